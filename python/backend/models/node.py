"""Search nodes and the result record handed back to callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Callable

from backend.models.board import Board, Move


class Strategy(StrEnum):
    BFS = "bfs"
    DFS = "dfs"
    ASTAR_MISPLACED = "astar-misplaced"
    ASTAR_MANHATTAN = "astar-manhattan"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Strategy.BFS: "Breadth-First Search",
    Strategy.DFS: "Depth-First Search",
    Strategy.ASTAR_MISPLACED: "A* Search w/ misplaced tiles",
    Strategy.ASTAR_MANHATTAN: "A* Search w/ Manhattan distance",
}


class Termination(StrEnum):
    GOAL_FOUND = "goal-found"
    NO_OP_REQUESTED = "no-op-requested"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class SearchNode:
    """A board plus its search bookkeeping.

    ``path`` is rebuilt from the parent chain, so a node never shares a
    mutable path with its siblings.
    """

    board: Board
    depth: int
    generation_order: int
    score: int = 0
    move: Move | None = None
    parent: SearchNode | None = field(default=None, repr=False, compare=False)

    @property
    def path(self) -> tuple[Move, ...]:
        moves: list[Move] = []
        node: SearchNode | None = self
        while node is not None and node.move is not None:
            moves.append(node.move)
            node = node.parent
        moves.reverse()
        return tuple(moves)

    def child(
        self,
        move: Move,
        board: Board,
        generation_order: int,
        heuristic: Callable[[Board], int] | None = None,
    ) -> SearchNode:
        """Wrap *board*, reached from this node by *move*."""
        depth = self.depth + 1
        score = depth + heuristic(board) if heuristic is not None else 0
        return SearchNode(
            board=board,
            depth=depth,
            generation_order=generation_order,
            score=score,
            move=move,
            parent=self,
        )


@dataclass(frozen=True, slots=True)
class SearchResult:
    start: Board
    strategy: Strategy
    termination: Termination
    final_state: Board | None = None
    depth: int = 0
    nodes_generated: int = 0
    path: tuple[Move, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.termination is Termination.GOAL_FOUND

    @property
    def move_path(self) -> list[str]:
        return [str(m) for m in self.path]
