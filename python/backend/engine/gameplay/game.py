"""Replays a move path over a board."""

from __future__ import annotations

from typing import Iterable

from backend.models.board import ADJACENCY, BLANK, Board, Move


class GamePlay:
    """Walks a board through moves, one at a time."""

    def __init__(self, board: Board) -> None:
        self.start = board
        self.board = board
        self.moves: int = 0

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Slide the tile at ``move.target`` into the blank.

        Returns True if the move was legal for the current board and was
        applied.
        """
        if self.board.tiles[move.blank] != BLANK or move.target not in ADJACENCY[move.blank]:
            return False
        self.board = self.board.apply(move)
        self.moves += 1
        return True

    def play(self, path: Iterable[Move | str]) -> list[Board]:
        """Apply every move of *path* and return the boards visited, start included.

        Descriptor strings such as ``"1 to 2"`` are accepted alongside
        ``Move`` values.
        """
        boards = [self.board]
        for i, step in enumerate(path):
            move = Move.parse(step) if isinstance(step, str) else step
            if not self.move(move):
                raise ValueError(
                    f"Move {i} ({move}) is illegal at {self.board.encode()}."
                )
            boards.append(self.board)
        return boards

    def reset(self) -> None:
        self.board = self.start
        self.moves = 0

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
