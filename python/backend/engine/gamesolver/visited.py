"""States already admitted to a frontier during one search run."""

from __future__ import annotations

from backend.models.board import Board


class VisitedSet:
    """Canonical encodings seen so far.

    A state is inserted when it is generated, not when it is expanded, so
    the first path to reach a state is the only one ever considered.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()

    @staticmethod
    def _key(state: Board | str) -> str:
        return state.encode() if isinstance(state, Board) else state

    def contains(self, state: Board | str) -> bool:
        return self._key(state) in self._seen

    def insert(self, state: Board | str) -> None:
        self._seen.add(self._key(state))

    def clear(self) -> None:
        self._seen.clear()

    def __contains__(self, state: object) -> bool:
        if not isinstance(state, (Board, str)):
            return False
        return self.contains(state)

    def __len__(self) -> int:
        return len(self._seen)
