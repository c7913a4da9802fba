"""Tracks the working state of an interactive session."""

from __future__ import annotations

import logging
import random
import time

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.models.board import GOAL, Board
from backend.models.node import SearchResult, Strategy

logger = logging.getLogger(__name__)


class GameState:
    """Holds the generated board, the initialised start board and the last run.

    A start board equal to the goal means nothing has been initialised yet.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.generated: Board = GOAL
        self.start: Board = GOAL
        self.last_result: SearchResult | None = None
        self.last_elapsed: float = 0.0

    # -- working state --------------------------------------------------------

    def generate(self) -> Board:
        """Shuffle a new random board; it may be unsolvable."""
        self.generated = GameGenerator.shuffle(self.rng)
        return self.generated

    def initialize(self) -> Board:
        """Promote the generated board to the start board."""
        self.start = self.generated
        self.last_result = None
        return self.start

    def set_start(self, board: Board) -> None:
        self.generated = board
        self.initialize()

    @property
    def is_initialized(self) -> bool:
        return not self.start.is_solved()

    @property
    def is_solvable(self) -> bool:
        return Solver.is_solvable(self.start)

    # -- searching ------------------------------------------------------------

    def run(self, strategy: Strategy) -> SearchResult:
        t0 = time.perf_counter()
        result = Solver.search(self.start, strategy)
        self.last_elapsed = time.perf_counter() - t0
        self.last_result = result
        logger.debug(
            "%s from %s: %s after %d nodes in %.3fs",
            strategy.value,
            self.start,
            result.termination.value,
            result.nodes_generated,
            self.last_elapsed,
        )
        return result
