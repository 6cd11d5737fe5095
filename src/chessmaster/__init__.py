"""Chess rules engine with a minimax bot opponent.

The functional interface below is all a front end needs::

    import chessmaster as cm

    board = cm.initial_board()
    targets = cm.legal_moves(board, cm.parse_square("e2"))
    board = cm.apply_move(board, cm.parse_square("e2"), targets[-1])
    reply = cm.best_move(board, cm.Color.BLACK, cm.Difficulty.MEDIUM)
"""

from chessmaster.core import (
    Board,
    Color,
    Move,
    Piece,
    PieceType,
    Square,
    apply_move,
    initial_board,
    is_checkmate,
    is_in_check,
    is_stalemate,
    legal_moves,
    parse_square,
)
from chessmaster.engine import Difficulty, best_move

__all__ = [
    "Board",
    "Color",
    "Difficulty",
    "Move",
    "Piece",
    "PieceType",
    "Square",
    "apply_move",
    "best_move",
    "initial_board",
    "is_checkmate",
    "is_in_check",
    "is_stalemate",
    "legal_moves",
    "parse_square",
]
