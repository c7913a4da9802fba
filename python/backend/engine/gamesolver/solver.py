"""8-tile slider puzzle solver."""

from __future__ import annotations

from enum import StrEnum

from backend.engine.gamesolver.frontier import Frontier
from backend.engine.gamesolver.visited import VisitedSet
from backend.models.board import BLANK, Board
from backend.models.node import SearchNode, SearchResult, Strategy, Termination


class EnginePhase(StrEnum):
    IDLE = "idle"
    SEEDED = "seeded"
    RUNNING = "running"
    GOAL_FOUND = "goal-found"
    EXHAUSTED = "exhausted"


class SearchEngine:
    """Generic expand/evaluate loop over one frontier and one visited set.

    Both containers belong to the run in progress and are emptied whenever
    ``run`` returns or raises. Visited states are never reopened, so the
    heuristic strategies may return a longer path than the optimum.

    On success ``nodes_generated`` is the goal node's generation order; on
    exhaustion it is the number of nodes the run created.
    """

    def __init__(self, frontier: Frontier, visited: VisitedSet, strategy: Strategy) -> None:
        if not frontier.serves(strategy):
            raise ValueError(
                f"{type(frontier).__name__} cannot run a {strategy.label} search."
            )
        self.frontier = frontier
        self.visited = visited
        self.strategy = strategy
        self.phase = EnginePhase.IDLE
        self._counter = 0

    def _next_order(self) -> int:
        self._counter += 1
        return self._counter

    def _seed(self, start: Board) -> None:
        self.visited.insert(start)
        self.frontier.push(SearchNode(board=start, depth=0, generation_order=self._next_order()))
        self.phase = EnginePhase.SEEDED

    def _expand(self, node: SearchNode) -> None:
        heuristic = self.frontier.heuristic
        for move in node.board.legal_moves():
            board = node.board.apply(move)
            key = board.encode()
            if self.visited.contains(key):
                continue
            self.visited.insert(key)
            self.frontier.push(node.child(move, board, self._next_order(), heuristic))

    def run(self, start: Board) -> SearchResult:
        if start.is_solved():
            return SearchResult(
                start=start,
                strategy=self.strategy,
                termination=Termination.NO_OP_REQUESTED,
                final_state=start,
            )

        self._counter = 0
        try:
            self._seed(start)
            self.phase = EnginePhase.RUNNING
            while self.frontier:
                node = self.frontier.pop()
                if node.board.is_solved():
                    self.phase = EnginePhase.GOAL_FOUND
                    return SearchResult(
                        start=start,
                        strategy=self.strategy,
                        termination=Termination.GOAL_FOUND,
                        final_state=node.board,
                        depth=node.depth,
                        nodes_generated=node.generation_order,
                        path=node.path,
                    )
                self._expand(node)

            self.phase = EnginePhase.EXHAUSTED
            return SearchResult(
                start=start,
                strategy=self.strategy,
                termination=Termination.EXHAUSTED,
                nodes_generated=self._counter,
            )
        finally:
            self.frontier.clear()
            self.visited.clear()


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def search(start: Board | str, strategy: Strategy) -> SearchResult:
        """Search from *start* with a fresh frontier and visited set.

        The caller is expected to check ``is_solvable`` first; an unsolvable
        start exhausts its whole reachable component.
        """
        if isinstance(start, str):
            start = Board.from_string(start)
        engine = SearchEngine(Frontier.for_strategy(strategy), VisitedSet(), strategy)
        return engine.run(start)

    @staticmethod
    def inversions(board: Board) -> int:
        """Count pairs of tiles (blank ignored) out of ascending order."""
        arr = [t for t in board.tiles if t != BLANK]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        return inv

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return Solver.inversions(board) % 2 == 0
