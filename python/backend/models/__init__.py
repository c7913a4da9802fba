from backend.models.board import GOAL, Board, InvalidStateError, Move, legal_moves
from backend.models.node import SearchNode, SearchResult, Strategy, Termination
from backend.models.report import ReportWriter

__all__ = [
    "GOAL",
    "Board",
    "InvalidStateError",
    "Move",
    "ReportWriter",
    "SearchNode",
    "SearchResult",
    "Strategy",
    "Termination",
    "legal_moves",
]
