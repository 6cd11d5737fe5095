"""Bot engine package: evaluation, minimax search and Qt worker bridge."""

from chessmaster.engine.evaluation import PIECE_VALUES, evaluate
from chessmaster.engine.minimax import MinimaxEngine, best_move
from chessmaster.engine.search import Difficulty, IEngine, SearchResult

DefaultEngine: type[IEngine] = MinimaxEngine

__all__ = [
    "DefaultEngine",
    "Difficulty",
    "IEngine",
    "MinimaxEngine",
    "PIECE_VALUES",
    "SearchResult",
    "best_move",
    "evaluate",
]
