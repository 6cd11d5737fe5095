"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Callable, Iterator

from chessmaster.core.enums import Color, PieceType
from chessmaster.core.piece import Piece
from chessmaster.core.types import ALL_SQUARES, BOARD_SIZE, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


class Board:
    """64-square board treated as a value.

    Making a move never touches ``self``: :meth:`apply_move` returns an
    independent copy with the move applied.  Item assignment exists only for
    building a board (factories, FEN parsing) before it is handed out.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not sq.is_valid:
            return None
        return self._squares[_index(sq.row, sq.col)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not sq.is_valid:
            raise IndexError(f"Square off the board: {sq!r}")
        self._squares[_index(sq.row, sq.col)] = piece

    def piece_at(self, row: int, col: int) -> Piece | None:
        return self[Square(row, col)]

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in row-major order, optionally for one *color*."""
        for sq in ALL_SQUARES:
            piece = self._squares[_index(sq.row, sq.col)]
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield sq, piece

    def king_square(self, color: Color) -> Square | None:
        """First square holding *color*'s king, or ``None`` if it is missing."""
        for sq, piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return sq
        return None

    # -- Copying / moves ----------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def apply_move(self, from_sq: Square, to_sq: Square) -> Board:
        """New board with the piece on *from_sq* relocated to *to_sq*.

        No legality check is made; whatever stood on *to_sq* is overwritten.
        """
        b = self.copy()
        b[to_sq] = self[from_sq]
        b[from_sq] = None
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Color.BLACK, pt)
            b[Square(1, col)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(6, col)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(7, col)] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return self._render(str)

    def __str__(self) -> str:
        """Grid of piece glyphs, rank 8 on top."""
        return self._render(lambda p: p.symbol)

    def _render(self, cell: Callable[[Piece], str]) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                p = self.piece_at(row, col)
                cells.append(cell(p) if p else ".")
            rows.append(f"{BOARD_SIZE - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
