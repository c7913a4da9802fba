"""Pending-node containers; the pop order defines the search strategy."""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from collections import deque
from typing import Callable

from backend.engine.gamesolver.heuristics import manhattan_distance, misplaced_tiles
from backend.models.board import Board
from backend.models.node import SearchNode, Strategy

Heuristic = Callable[[Board], int]


class Frontier(ABC):
    """Base container. ``heuristic`` is ``None`` for uninformed disciplines."""

    heuristic: Heuristic | None = None

    @abstractmethod
    def push(self, node: SearchNode) -> None: ...

    @abstractmethod
    def pop(self) -> SearchNode: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0

    def serves(self, strategy: Strategy) -> bool:
        """Return True if this discipline and heuristic implement *strategy*."""
        expected = Frontier.for_strategy(strategy)
        return isinstance(self, type(expected)) and expected.heuristic is self.heuristic

    @staticmethod
    def for_strategy(strategy: Strategy) -> Frontier:
        """Build an empty frontier for *strategy*."""
        if strategy is Strategy.BFS:
            return FifoFrontier()
        if strategy is Strategy.DFS:
            return LifoFrontier()
        if strategy is Strategy.ASTAR_MISPLACED:
            return PriorityFrontier(misplaced_tiles)
        if strategy is Strategy.ASTAR_MANHATTAN:
            return PriorityFrontier(manhattan_distance)
        raise ValueError(f"Unknown strategy: {strategy!r}")


class FifoFrontier(Frontier):
    """Breadth-first: earliest pushed pops first."""

    def __init__(self) -> None:
        self._queue: deque[SearchNode] = deque()

    def push(self, node: SearchNode) -> None:
        self._queue.append(node)

    def pop(self) -> SearchNode:
        return self._queue.popleft()

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)


class LifoFrontier(Frontier):
    """Depth-first: most recently pushed pops first."""

    def __init__(self) -> None:
        self._stack: list[SearchNode] = []

    def push(self, node: SearchNode) -> None:
        self._stack.append(node)

    def pop(self) -> SearchNode:
        return self._stack.pop()

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)


class PriorityFrontier(Frontier):
    """Best-first on ``node.score``; equal scores pop in generation order."""

    def __init__(self, heuristic: Heuristic) -> None:
        self.heuristic = heuristic
        self._heap: list[tuple[int, int, SearchNode]] = []

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (node.score, node.generation_order, node))

    def pop(self) -> SearchNode:
        return heapq.heappop(self._heap)[2]

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)
