"""Vanilla terminal frontend, no third-party dependencies.

Uses only stdlib (print, input, ANSI codes) for rendering and input.
Includes a numbered menu to generate, initialise and search a start state.
"""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board, InvalidStateError
from backend.models.node import SearchResult, Strategy, Termination
from backend.models.report import ReportWriter

logger = logging.getLogger(__name__)

MAX_ANIMATED_MOVES = 100


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    sep = "+" + ("---+" * 3)

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} · {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val} {_R}")
            else:
                cells.append(f" {val} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- result rendering ---------------------------------------------------------


def show_result(result: SearchResult, writer: ReportWriter, elapsed: float | None = None) -> None:
    """Print the summary of *result* and persist the full report."""
    if result.termination is Termination.NO_OP_REQUESTED:
        print(f"  {_Y}Randomize and initialize a new start state to begin a search!{_R}")
        return

    if result.succeeded:
        print(f"  {_G}Search successful!{_R}  {_DIM}({result.strategy.label}){_R}")
    else:
        print(f"  {_RED}Solution was not found{_R}  {_DIM}({result.strategy.label}){_R}")

    for line in writer.lines(result):
        label, _, value = line.partition(": ")
        print(f"  {label}: {_Y}{value}{_R}")
    if elapsed is not None:
        print(f"  Time: {_Y}{elapsed:.3f}s{_R}")

    path = writer.write(result)
    print(f"  {_DIM}See the ({path.name}) file for search path{_R}")


def _replay(result: SearchResult | None) -> None:
    """Animate the last solution move by move."""
    if result is None or not result.succeeded:
        print(f"  {_Y}Run a successful search first.{_R}")
        return

    game = GamePlay(result.start)
    if len(result.path) > MAX_ANIMATED_MOVES:
        # Too long to animate; jump straight to the end.
        game.play(result.path)
        print(_render_board(game.board))
    else:
        for i, move in enumerate(result.path):
            game.move(move)
            _clear()
            print(f"  {_C}=== Replaying… ==={_R}")
            print()
            print(_render_board(game.board))
            print()
            print(f"  Move {i + 1}/{len(result.path)}  ({move})")
            sys.stdout.flush()
            time.sleep(0.15)

    print(f"\n  {_G}Reached {game.board.encode()} in {game.moves} moves.{_R}")


# -- menu screen --------------------------------------------------------------

_STRATEGY_CHOICES = {
    "3": Strategy.BFS,
    "4": Strategy.DFS,
    "5": Strategy.ASTAR_MISPLACED,
    "6": Strategy.ASTAR_MANHATTAN,
}


def _show_menu(state: GameState) -> None:
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}     P U Z Z L E   S L I D E R        {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    if state.is_initialized:
        print(f"    Start state: {_Y}{state.start}{_R}")
    else:
        print(f"    Start state: {_DIM}not initialized{_R}")
    print()
    print(f"    {_C}1{_R}  Generate a random state")
    print(f"    {_C}2{_R}  Initialize working state")
    for key, strategy in _STRATEGY_CHOICES.items():
        print(f"    {_Y}{key}{_R}  {strategy.label}")
    print(f"    {_DIM}7{_R}  Enter a state")
    print(f"    {_DIM}8{_R}  Replay last solution")
    print(f"    {_DIM}99{_R} Exit")
    print()


def _generate(state: GameState) -> None:
    board = state.generate()
    print()
    print(_render_board(board))
    verdict = f"{_G}is solvable!{_R}" if Solver.is_solvable(board) else f"{_RED}is not solvable!{_R}"
    print(f"\n  {board} {verdict}")


def _enter_state(state: GameState) -> None:
    raw = input("  State (e.g. 123456708, 0 for blank): ").strip()
    try:
        board = Board.from_string(raw)
    except InvalidStateError as exc:
        print(f"  {_RED}{exc}{_R}")
        return
    state.set_start(board)
    print(f"  Your initialized start state is: {_Y}{state.start}{_R}")


def _search(state: GameState, strategy: Strategy, writer: ReportWriter) -> None:
    if state.is_initialized and not state.is_solvable:
        print(f"  {_RED}{state.start} is not solvable; generate another state.{_R}")
        return
    result = state.run(strategy)
    show_result(result, writer, state.last_elapsed)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(report_path: Path, state: GameState) -> None:
    writer = ReportWriter(report_path)

    while True:
        _show_menu(state)
        choice = input("  Choose an option. ").strip()
        _clear()

        if choice in ("99", "0", "q"):
            print("  Exiting the application!\n")
            return
        elif choice == "1":
            _generate(state)
        elif choice == "2":
            state.initialize()
            print(f"  Your initialized start state is: {_Y}{state.start}{_R}")
        elif choice in _STRATEGY_CHOICES:
            _search(state, _STRATEGY_CHOICES[choice], writer)
        elif choice == "7":
            _enter_state(state)
        elif choice == "8":
            _replay(state.last_result)
        else:
            print("  Incorrect option, choose again!")


# -- public entry point -------------------------------------------------------


def run(report_path: Path, state: GameState | None = None) -> None:
    """Launch the vanilla CLI with interactive menu."""
    logger.debug("Starting vanilla frontend, reports to %s", report_path)
    _menu_loop(report_path, state or GameState())
