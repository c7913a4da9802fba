"""Search engine: every strategy, replayed through the path player.

Every solved path is replayed move by move with ``GamePlay`` to verify it
really reaches the goal. Timeouts come from ``pytest-timeout`` (configured
in ``pyproject.toml``).
"""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import (
    EnginePhase,
    FifoFrontier,
    Frontier,
    PriorityFrontier,
    SearchEngine,
    Solver,
    VisitedSet,
    manhattan_distance,
    misplaced_tiles,
)
from backend.models.board import GOAL, Board, InvalidStateError
from backend.models.node import Strategy, Termination

ALL_STRATEGIES = list(Strategy)


# -- helpers ------------------------------------------------------------------


def _assert_solves(start: Board, strategy: Strategy) -> int:
    """Search from *start* and check the path replays to the goal."""
    result = Solver.search(start, strategy)

    assert result.termination is Termination.GOAL_FOUND, (start, strategy)
    assert result.succeeded
    assert result.final_state == GOAL
    assert result.depth == len(result.path)
    assert result.nodes_generated >= result.depth + 1

    game = GamePlay(start)
    game.play(result.path)
    assert game.is_won, f"{strategy} path from {start} does not reach the goal"
    return result.depth


# -- basic scenarios ----------------------------------------------------------


@pytest.mark.parametrize(
    "strategy", [Strategy.BFS, Strategy.ASTAR_MISPLACED, Strategy.ASTAR_MANHATTAN]
)
def test_one_move_from_goal(strategy: Strategy) -> None:
    result = Solver.search("123456708", strategy)
    assert result.succeeded
    assert result.move_path == ["8 to 9"]
    assert result.nodes_generated == 2


def test_dfs_reports_goal_generation_order() -> None:
    # The goal is the first child pushed, so it pops last, but its node count
    # is still the order it was generated in.
    result = Solver.search("123456708", Strategy.DFS)
    assert result.succeeded
    assert result.depth == 1
    assert result.nodes_generated == 2


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_solves_shuffled_boards(strategy: Strategy) -> None:
    rng = random.Random(1)
    for _ in range(3):
        _assert_solves(GameGenerator.generate(rng), strategy)


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_accepts_string_start(strategy: Strategy) -> None:
    result = Solver.search("123405786", strategy)
    assert result.start == Board.from_string("123405786")
    assert result.strategy is strategy


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_node_count_is_goal_generation_order(strategy: Strategy) -> None:
    frontier = Frontier.for_strategy(strategy)
    popped = []
    pop = frontier.pop

    def recording_pop():
        node = pop()
        popped.append(node)
        return node

    frontier.pop = recording_pop
    result = SearchEngine(frontier, VisitedSet(), strategy).run(Board.from_string("413726580"))

    goal = popped[-1]
    assert goal.board == GOAL
    assert result.nodes_generated == goal.generation_order
    assert result.depth == goal.depth


def test_engine_rejects_frontier_of_another_strategy() -> None:
    with pytest.raises(ValueError):
        SearchEngine(PriorityFrontier(manhattan_distance), VisitedSet(), Strategy.BFS)
    with pytest.raises(ValueError):
        SearchEngine(PriorityFrontier(misplaced_tiles), VisitedSet(), Strategy.ASTAR_MANHATTAN)


def test_bfs_two_move_scenario() -> None:
    result = Solver.search("123405786", Strategy.BFS)
    assert result.depth == 2
    assert result.move_path == ["5 to 6", "6 to 9"]


# -- no-op and exhaustion -----------------------------------------------------


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_goal_start_is_a_no_op(strategy: Strategy) -> None:
    result = Solver.search(GOAL, strategy)
    assert result.termination is Termination.NO_OP_REQUESTED
    assert not result.succeeded
    assert result.nodes_generated == 0
    assert result.path == ()


def test_no_op_generates_nothing() -> None:
    frontier, visited = FifoFrontier(), VisitedSet()
    engine = SearchEngine(frontier, visited, Strategy.BFS)
    engine.run(GOAL)
    assert engine.phase is EnginePhase.IDLE
    assert len(visited) == 0


def test_unsolvable_start_exhausts_reachable_half(distances: dict[str, int]) -> None:
    start = Board.from_string("213456780")
    assert not Solver.is_solvable(start)
    assert start.encode() not in distances

    result = Solver.search(start, Strategy.BFS)

    assert result.termination is Termination.EXHAUSTED
    assert result.final_state is None
    assert result.path == ()
    assert result.nodes_generated == 181440


def test_invalid_start_is_fatal() -> None:
    with pytest.raises(InvalidStateError):
        Solver.search("123456788", Strategy.BFS)


# -- optimality ---------------------------------------------------------------


def test_bfs_depth_is_minimal(distances: dict[str, int]) -> None:
    rng = random.Random(7)
    for depth in range(1, 13):
        for _ in range(3):
            start = GameGenerator.scramble(depth, rng)
            if start.is_solved():
                continue
            assert _assert_solves(start, Strategy.BFS) == distances[start.encode()]


@pytest.mark.parametrize("text", ["867254301", "647850321"])
def test_bfs_on_hardest_states(text: str, distances: dict[str, int]) -> None:
    start = Board.from_string(text)
    assert _assert_solves(start, Strategy.BFS) == distances[text]


@pytest.mark.parametrize("strategy", [Strategy.ASTAR_MISPLACED, Strategy.ASTAR_MANHATTAN])
def test_astar_depth_never_below_optimum(strategy: Strategy, distances: dict[str, int]) -> None:
    rng = random.Random(11)
    for _ in range(10):
        start = GameGenerator.generate(rng)
        assert _assert_solves(start, strategy) >= distances[start.encode()]


def test_astar_manhattan_generates_fewer_nodes_than_bfs() -> None:
    start = Board.from_string("867254301")
    bfs = Solver.search(start, Strategy.BFS)
    astar = Solver.search(start, Strategy.ASTAR_MANHATTAN)
    assert astar.nodes_generated < bfs.nodes_generated


# -- determinism and run ownership --------------------------------------------


@pytest.mark.parametrize("strategy", ALL_STRATEGIES)
def test_repeated_searches_are_identical(strategy: Strategy) -> None:
    start = Board.from_string("413726580")
    first = Solver.search(start, strategy)
    second = Solver.search(start, strategy)
    assert first.move_path == second.move_path
    assert first.nodes_generated == second.nodes_generated


def test_engine_clears_its_containers_and_can_rerun() -> None:
    frontier, visited = PriorityFrontier(manhattan_distance), VisitedSet()
    engine = SearchEngine(frontier, visited, Strategy.ASTAR_MANHATTAN)
    start = Board.from_string("413726580")

    first = engine.run(start)
    assert engine.phase is EnginePhase.GOAL_FOUND
    assert len(frontier) == 0
    assert len(visited) == 0

    second = engine.run(start)
    assert second == first


def test_engine_clears_containers_after_exhaustion() -> None:
    frontier, visited = FifoFrontier(), VisitedSet()
    engine = SearchEngine(frontier, visited, Strategy.BFS)
    result = engine.run(Board.from_string("123456870"))
    assert result.termination is Termination.EXHAUSTED
    assert engine.phase is EnginePhase.EXHAUSTED
    assert len(frontier) == 0
    assert len(visited) == 0
