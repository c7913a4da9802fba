#!/usr/bin/env python3
"""Puzzle Slider: 8-tile slider puzzle search.

Usage::

    python main.py                              # interactive menu
    python main.py -f rich                      # Rich terminal menu
    python main.py -s 123405786 -a bfs          # one search, report written
    python main.py --random -a astar-manhattan  # random solvable start
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # puzzle-slider/
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.engine.gamestate import GameState  # noqa: E402
from backend.models.board import Board, InvalidStateError  # noqa: E402
from backend.models.node import Strategy  # noqa: E402
from backend.models.report import ReportWriter  # noqa: E402

logger = logging.getLogger("puzzle_slider")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


def _solve_once(
    mod, start: Board, strategy: Strategy, output: Path
) -> None:
    """Run one search, render it, and exit with a status code."""
    state = GameState()
    state.set_start(start)

    if state.is_initialized and not state.is_solvable:
        typer.echo(f"{start} is not solvable.", err=True)
        raise typer.Exit(code=2)

    result = state.run(strategy)
    mod.show_result(result, ReportWriter(output), state.last_elapsed)
    if not result.succeeded:
        raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Terminal frontend used for the menu and reports.",
    ),
    state: Optional[str] = typer.Option(
        None, "-s", "--state",
        help="Start state, e.g. 123405786 (0 or E for the blank). Omit for interactive menu.",
    ),
    strategy: Strategy = typer.Option(
        Strategy.BFS, "-a", "--strategy",
        help="Search strategy for --state / --random.",
    ),
    use_random: bool = typer.Option(
        False, "--random",
        help="Search from a random solvable start state.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    output: Path = typer.Option(
        DATA_DIR / "results.csv", "-o", "--output",
        help="Report file written after each search.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log debug output.",
    ),
) -> None:
    """8-tile slider puzzle search."""
    _configure_logging(verbose)
    mod = importlib.import_module(_RUNNERS[frontend])

    if state is not None and use_random:
        raise typer.BadParameter("--state and --random are mutually exclusive.")

    if use_random:
        start = GameGenerator.generate(random.Random(seed))
        logger.info("Random start state %s", start)
        _solve_once(mod, start, strategy, output)
        return

    if state is not None:
        try:
            start = Board.from_string(state)
        except InvalidStateError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=2)
        _solve_once(mod, start, strategy, output)
        return

    mod.run(report_path=output)


if __name__ == "__main__":
    app()
