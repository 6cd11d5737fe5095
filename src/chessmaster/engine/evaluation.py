"""Static evaluation: material plus a small positional bonus."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmaster.core.enums import Color, PieceType
from chessmaster.core.types import ALL_SQUARES, BOARD_SIZE

if TYPE_CHECKING:
    from chessmaster.core.board import Board
    from chessmaster.core.piece import Piece

PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 100,
    PieceType.KNIGHT: 320,
    PieceType.BISHOP: 330,
    PieceType.ROOK: 500,
    PieceType.QUEEN: 900,
    PieceType.KING: 20_000,
}


def _center_bonus(row: int, col: int) -> int:
    # |3.5 - row| + |3.5 - col| is always a whole number on an 8x8 board.
    return int(max(0.0, 3 - abs(3.5 - row) - abs(3.5 - col)) * 10)


_CENTER_BONUS: tuple[int, ...] = tuple(
    _center_bonus(sq.row, sq.col) for sq in ALL_SQUARES
)


def positional_bonus(piece: Piece, row: int, col: int) -> int:
    """Bonus for *piece* standing on ``(row, col)``.

    Pawns are paid 10 per row walked from white's starting row (white) or
    from row 0 (black); knights and bishops are paid for centrality.
    """
    if piece.piece_type == PieceType.PAWN:
        if piece.color == Color.WHITE:
            return (6 - row) * 10
        return row * 10
    if piece.piece_type in (PieceType.KNIGHT, PieceType.BISHOP):
        return _CENTER_BONUS[row * BOARD_SIZE + col]
    return 0


def evaluate(board: Board, perspective: Color) -> int:
    """Score *board* from *perspective*'s point of view (positive = better)."""
    score = 0
    for sq, piece in board.pieces():
        total = PIECE_VALUES[piece.piece_type] + positional_bonus(piece, sq.row, sq.col)
        if piece.color == perspective:
            score += total
        else:
            score -= total
    return score
