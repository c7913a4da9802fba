"""Generates random slider puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamesolver.solver import Solver
from backend.models.board import ADJACENCY, BLANK, GOAL, Board, Move

logger = logging.getLogger(__name__)


class GameGenerator:
    """Random boards, either fully shuffled or walked out from the goal."""

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def shuffle(rng: random.Random | None = None) -> Board:
        """Return a uniformly random arrangement. Half of these are unsolvable."""
        rng = rng or random.Random()
        tiles = list(GOAL.tiles)
        rng.shuffle(tiles)
        board = Board.from_flat(tiles)
        logger.debug("Shuffled %s", board)
        return board

    @staticmethod
    def scramble(depth: int, rng: random.Random | None = None) -> Board:
        """Walk the blank *depth* random steps from the goal, never straight back."""
        if depth < 0:
            raise ValueError(f"Scramble depth must be non-negative, got {depth}.")
        rng = rng or random.Random()
        board = GOAL
        prev_blank: int | None = None

        for _ in range(depth):
            blank = board.tiles.index(BLANK)
            targets = list(ADJACENCY[blank])
            if prev_blank in targets and len(targets) > 1:
                targets.remove(prev_blank)
            target = rng.choice(targets)
            prev_blank = blank
            board = board.apply(Move(blank=blank, target=target))

        return board

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = rng or random.Random()
        while True:
            board = GameGenerator.shuffle(rng)
            if Solver.is_solvable(board) and not board.is_solved():
                return board
