from backend.engine.gamesolver.frontier import (
    FifoFrontier,
    Frontier,
    LifoFrontier,
    PriorityFrontier,
)
from backend.engine.gamesolver.heuristics import manhattan_distance, misplaced_tiles
from backend.engine.gamesolver.solver import EnginePhase, SearchEngine, Solver
from backend.engine.gamesolver.visited import VisitedSet

__all__ = [
    "EnginePhase",
    "FifoFrontier",
    "Frontier",
    "LifoFrontier",
    "PriorityFrontier",
    "SearchEngine",
    "Solver",
    "VisitedSet",
    "manhattan_distance",
    "misplaced_tiles",
]
