"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmaster.core.enums import PieceType
from chessmaster.core.piece import Piece
from chessmaster.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single move.

    Move generation only fills ``from_sq``, ``to_sq`` and ``piece``.
    ``captured``, ``is_en_passant``, ``is_castling`` and ``promotion`` are
    optional metadata that nothing in the rules engine sets or reads.
    """

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece | None = None
    is_en_passant: bool = False
    is_castling: bool = False
    promotion: PieceType | None = None

    @property
    def is_double_pawn_push(self) -> bool:
        return (
            self.piece.piece_type == PieceType.PAWN
            and abs(self.from_sq.row - self.to_sq.row) == 2
        )

    def __str__(self) -> str:
        """History text, e.g. 'pawn e2-e4'."""
        return f"{self.piece.piece_type} {self.from_sq.name}-{self.to_sq.name}"
