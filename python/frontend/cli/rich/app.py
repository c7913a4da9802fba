"""Rich terminal frontend with tables and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.  Includes a built-in menu to generate,
initialise, search and replay a start state.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.models.board import Board, InvalidStateError
from backend.models.node import SearchResult, Strategy, Termination
from backend.models.report import ReportWriter

logger = logging.getLogger(__name__)

console = Console()

MAX_ANIMATED_MOVES = 100

_STRATEGY_CHOICES = {
    "3": Strategy.BFS,
    "4": Strategy.DFS,
    "5": Strategy.ASTAR_MISPLACED,
    "6": Strategy.ASTAR_MANHATTAN,
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


# -- result rendering ---------------------------------------------------------


def _render_result(result: SearchResult, writer: ReportWriter, elapsed: float | None) -> Table:
    table = Table(show_header=False, box=rich.box.ROUNDED, border_style="dim")
    table.add_column(style="dim", justify="right")
    table.add_column(style="bold yellow")
    for line in writer.lines(result):
        label, _, value = line.partition(": ")
        table.add_row(label, value)
    if elapsed is not None:
        table.add_row("Time", f"{elapsed:.3f}s")
    return table


def show_result(result: SearchResult, writer: ReportWriter, elapsed: float | None = None) -> None:
    """Print the summary of *result* and persist the full report."""
    if result.termination is Termination.NO_OP_REQUESTED:
        console.print(
            "[yellow]Randomize and initialize a new start state to begin a search![/yellow]"
        )
        return

    if result.succeeded:
        title = "[bold green]Search successful![/bold green]"
        border = "green"
    else:
        title = "[bold red]Solution was not found[/bold red]"
        border = "red"

    parts = [Align.center(_render_result(result, writer, elapsed))]
    if result.final_state is not None:
        parts.insert(0, Align.center(_render_board(result.final_state)))

    console.print(
        Panel(
            Group(*parts),
            title=title,
            subtitle=f"[dim]{result.strategy.label}[/dim]",
            border_style=border,
            padding=(1, 2),
        )
    )

    path = writer.write(result)
    console.print(f"[dim]See the ({path.name}) file for search path[/dim]")


def _replay(result: SearchResult | None) -> None:
    """Animate the last solution move by move."""
    if result is None or not result.succeeded:
        console.print("[yellow]Run a successful search first.[/yellow]")
        return

    game = GamePlay(result.start)
    if len(result.path) > MAX_ANIMATED_MOVES:
        game.play(result.path)
    else:
        for i, move in enumerate(result.path):
            game.move(move)
            console.clear()

            progress = Text()
            progress.append(f"  Replaying… move {i + 1}/{len(result.path)} ", style="bold cyan")
            progress.append(f"({move})", style="dim")

            console.print(
                Align.center(
                    Panel(
                        Align.center(_render_board(game.board)),
                        title="[bold cyan]Replay[/bold cyan]",
                        border_style="cyan",
                        padding=(1, 2),
                    )
                )
            )
            console.print(Align.center(progress))
            time.sleep(0.15)

    console.print(Align.center(_render_board(game.board)))
    console.print(
        f"[bold green]Reached {game.board.encode()} in {game.moves} moves.[/bold green]"
    )


# -- menu screen --------------------------------------------------------------


def _draw_menu(state: GameState) -> None:
    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Generate a random state\n")
    opts.append("  2", style="bold cyan")
    opts.append("  Initialize working state\n")
    for key, strategy in _STRATEGY_CHOICES.items():
        opts.append(f"  {key}", style="bold yellow")
        opts.append(f"  {strategy.label}\n")
    opts.append("  7", style="dim bold")
    opts.append("  Enter a state\n", style="dim")
    opts.append("  8", style="dim bold")
    opts.append("  Replay last solution\n", style="dim")
    opts.append(" 99", style="dim bold")
    opts.append("  Exit", style="dim")

    if state.is_initialized:
        start = Text.from_markup(f"Start state: [bold yellow]{state.start}[/bold yellow]")
    else:
        start = Text("Start state: not initialized", style="dim")

    panel = Panel(
        Group(Align.center(start), Text(""), opts),
        title="[bold]P U Z Z L E   S L I D E R[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _generate(state: GameState) -> None:
    board = state.generate()
    if Solver.is_solvable(board):
        verdict = "[bold green]is solvable![/bold green]"
    else:
        verdict = "[bold red]is not solvable![/bold red]"
    console.print(Align.center(_render_board(board)))
    console.print(Align.center(Text.from_markup(f"{board} {verdict}")))


def _enter_state(state: GameState) -> None:
    raw = Prompt.ask("State (e.g. 123456708, 0 for blank)", console=console)
    try:
        board = Board.from_string(raw)
    except InvalidStateError as exc:
        console.print(f"[red]{exc}[/red]")
        return
    state.set_start(board)
    console.print(f"Your initialized start state is: [bold yellow]{state.start}[/bold yellow]")


def _search(state: GameState, strategy: Strategy, writer: ReportWriter) -> None:
    if state.is_initialized and not state.is_solvable:
        console.print(f"[red]{state.start} is not solvable; generate another state.[/red]")
        return
    with console.status(f"[cyan]{strategy.label}…[/cyan]"):
        result = state.run(strategy)
    show_result(result, writer, state.last_elapsed)


# -- menu loop ----------------------------------------------------------------


def _menu_loop(report_path: Path, state: GameState) -> None:
    writer = ReportWriter(report_path)

    while True:
        _draw_menu(state)
        choice = Prompt.ask("Choose an option", console=console).strip()
        console.clear()

        if choice in ("99", "0", "q"):
            console.print(Align.center(Text("\nExiting the application!\n", style="bold cyan")))
            return
        elif choice == "1":
            _generate(state)
        elif choice == "2":
            state.initialize()
            console.print(
                f"Your initialized start state is: [bold yellow]{state.start}[/bold yellow]"
            )
        elif choice in _STRATEGY_CHOICES:
            _search(state, _STRATEGY_CHOICES[choice], writer)
        elif choice == "7":
            _enter_state(state)
        elif choice == "8":
            _replay(state.last_result)
        else:
            console.print("[yellow]Incorrect option, choose again![/yellow]")


# -- public entry point -------------------------------------------------------


def run(report_path: Path, state: GameState | None = None) -> None:
    """Launch the Rich CLI with interactive menu."""
    logger.debug("Starting rich frontend, reports to %s", report_path)
    _menu_loop(report_path, state or GameState())
