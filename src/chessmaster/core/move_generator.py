"""Legal and pseudo-legal move generation + check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmaster.core.enums import Color, PieceType
from chessmaster.core.move import Move
from chessmaster.core.types import ALL_SQUARES, BOARD_SIZE, Square

if TYPE_CHECKING:
    from chessmaster.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = KING_OFFSETS

# White pawns walk toward row 0, black pawns toward row 7.
_PAWN_DIRECTION: tuple[int, int] = (-1, 1)
_PAWN_START_ROW: tuple[int, int] = (6, 1)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves = (sq.offset(dr, dc) for dr, dc in offsets)
        targets.append(tuple(to_sq for to_sq in moves if to_sq.is_valid))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for dr, dc in directions:
            ray: list[Square] = []
            to_sq = sq.offset(dr, dc)
            while to_sq.is_valid:
                ray.append(to_sq)
                to_sq = to_sq.offset(dr, dc)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_SLIDER_RAYS: dict[PieceType, tuple[tuple[tuple[Square, ...], ...], ...]] = {
    PieceType.BISHOP: _build_rays(BISHOP_DIRS),
    PieceType.ROOK: _build_rays(ROOK_DIRS),
    PieceType.QUEEN: _build_rays(QUEEN_DIRS),
}


def _index(sq: Square) -> int:
    return sq.row * BOARD_SIZE + sq.col


class MoveGenerator:
    """Generates moves for the pieces of a :class:`Board`.

    The pseudo-legal generators know nothing about check, and
    :meth:`is_in_check` only ever calls them.  The
    legal generators filter pseudo-legal targets through :meth:`is_in_check`
    on a copied board, so the board given to the constructor is never
    modified.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def legal_targets(self, sq: Square, last_move: Move | None = None) -> list[Square]:
        """Destinations for the piece on *sq* that keep its own king safe."""
        piece = self._board[sq]
        if piece is None:
            return []
        return [
            to_sq
            for to_sq in self.pseudo_legal_targets(sq, last_move)
            if not self._leaves_king_in_check(sq, to_sq, piece.color)
        ]

    def legal_moves(self, color: Color, last_move: Move | None = None) -> list[Move]:
        """All legal moves for *color*, squares scanned row by row."""
        moves: list[Move] = []
        append = moves.append
        for sq, piece in self._board.pieces(color):
            for to_sq in self.legal_targets(sq, last_move):
                append(Move(sq, to_sq, piece))
        return moves

    def has_legal_move(self, color: Color) -> bool:
        """Whether any piece of *color* has at least one legal destination."""
        return any(self.legal_targets(sq) for sq, _ in self._board.pieces(color))

    def pseudo_legal_targets(
        self, sq: Square, last_move: Move | None = None
    ) -> list[Square]:
        """Destinations allowed by the piece pattern (may leave own king in check)."""
        piece = self._board[sq]
        if piece is None:
            return []

        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            return self._gen_pawn(sq, piece.color, last_move)
        if ptype == PieceType.KNIGHT:
            return self._gen_step(sq, piece.color, _KNIGHT_TARGETS[_index(sq)])
        if ptype == PieceType.KING:
            return self._gen_step(sq, piece.color, _KING_TARGETS[_index(sq)])
        return self._gen_sliding(sq, piece.color, _SLIDER_RAYS[ptype][_index(sq)])

    # -- Check detection (public) ------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Can any opponent piece reach *color*'s king?

        A board without a king of *color* is never in check.
        """
        king_sq = self._board.king_square(color)
        if king_sq is None:
            return False
        return any(
            king_sq in self.pseudo_legal_targets(sq)
            for sq, _ in self._board.pieces(color.opposite)
        )

    # -- Internal helpers ---------------------------------------------------

    def _leaves_king_in_check(self, from_sq: Square, to_sq: Square, color: Color) -> bool:
        after = self._board.apply_move(from_sq, to_sq)
        return MoveGenerator(after).is_in_check(color)

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(
        self, sq: Square, color: Color, last_move: Move | None
    ) -> list[Square]:
        board = self._board
        direction = _PAWN_DIRECTION[int(color)]
        targets: list[Square] = []

        forward = sq.offset(direction, 0)
        if forward.is_valid and board.is_empty(forward):
            targets.append(forward)
            if sq.row == _PAWN_START_ROW[int(color)]:
                double = sq.offset(2 * direction, 0)
                if board.is_empty(double):
                    targets.append(double)

        for col_offset in (-1, 1):
            capture = sq.offset(direction, col_offset)
            if not capture.is_valid:
                continue
            target = board[capture]
            if target is not None and target.color != color:
                targets.append(capture)
            if (
                last_move is not None
                and last_move.is_double_pawn_push
                and last_move.to_sq.row == sq.row
                and last_move.to_sq.col == capture.col
            ):
                targets.append(capture)

        return targets

    def _gen_step(
        self, sq: Square, color: Color, candidates: tuple[Square, ...]
    ) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for to_sq in candidates:
            target = board[to_sq]
            if target is None or target.color != color:
                targets.append(to_sq)
        return targets

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
    ) -> list[Square]:
        board = self._board
        targets: list[Square] = []
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    targets.append(to_sq)
                    continue
                if target.color != color:
                    targets.append(to_sq)
                break
        return targets
