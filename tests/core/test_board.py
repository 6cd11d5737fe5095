"""Tests for Board."""

import pytest

from chessmaster.core.board import Board
from chessmaster.core.enums import Color, PieceType
from chessmaster.core.notation import board_from_fen
from chessmaster.core.piece import Piece
from chessmaster.core.types import Square, parse_square


class TestInitialBoard:
    def test_piece_count(self) -> None:
        b = Board.initial()
        assert len(list(b.pieces())) == 32
        assert len(list(b.pieces(Color.WHITE))) == 16
        assert len(list(b.pieces(Color.BLACK))) == 16

    def test_black_on_row_zero(self) -> None:
        b = Board.initial()
        assert b.piece_at(0, 4) == Piece(Color.BLACK, PieceType.KING)
        assert b.piece_at(0, 3) == Piece(Color.BLACK, PieceType.QUEEN)
        assert b.piece_at(1, 0) == Piece(Color.BLACK, PieceType.PAWN)

    def test_white_on_row_seven(self) -> None:
        b = Board.initial()
        assert b.piece_at(7, 4) == Piece(Color.WHITE, PieceType.KING)
        assert b.piece_at(7, 3) == Piece(Color.WHITE, PieceType.QUEEN)
        assert b.piece_at(6, 7) == Piece(Color.WHITE, PieceType.PAWN)

    def test_middle_empty(self) -> None:
        b = Board.initial()
        for row in range(2, 6):
            for col in range(8):
                assert b.piece_at(row, col) is None

    def test_king_squares(self) -> None:
        b = Board.initial()
        assert b.king_square(Color.WHITE) == Square(7, 4)
        assert b.king_square(Color.BLACK) == Square(0, 4)


class TestAccess:
    def test_off_board_reads_empty(self) -> None:
        b = Board.initial()
        assert b[Square(8, 0)] is None
        assert b[Square(0, -1)] is None

    def test_off_board_write_raises(self) -> None:
        b = Board()
        with pytest.raises(IndexError):
            b[Square(8, 8)] = Piece(Color.WHITE, PieceType.PAWN)

    def test_missing_king(self) -> None:
        b = board_from_fen("8/8/8/8/8/8/8/4K3")
        assert b.king_square(Color.BLACK) is None


class TestApplyMove:
    def test_returns_new_board(self) -> None:
        b = Board.initial()
        after = b.apply_move(parse_square("e2"), parse_square("e4"))
        assert after is not b
        assert b == Board.initial()
        assert after[parse_square("e4")] == Piece(Color.WHITE, PieceType.PAWN)
        assert after[parse_square("e2")] is None

    def test_return_move_restores_placement(self) -> None:
        b = Board.initial()
        e2, e4 = parse_square("e2"), parse_square("e4")
        back = b.apply_move(e2, e4).apply_move(e4, e2)
        assert back == b

    def test_capture_is_not_restored(self) -> None:
        b = board_from_fen("4k3/8/8/p7/8/8/8/R3K3")
        a1, a5 = parse_square("a1"), parse_square("a5")
        back = b.apply_move(a1, a5).apply_move(a5, a1)
        assert back[a1] == Piece(Color.WHITE, PieceType.ROOK)
        assert back[a5] is None
        assert back != b

    def test_copy_is_independent(self) -> None:
        b = Board.initial()
        c = b.copy()
        c[Square(4, 4)] = Piece(Color.WHITE, PieceType.QUEEN)
        assert b[Square(4, 4)] is None


class TestRepr:
    def test_repr_rank_labels(self) -> None:
        text = repr(Board.initial())
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"

    def test_str_shows_glyphs(self) -> None:
        lines = str(Board.initial()).splitlines()
        assert lines[0] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[1] == "7 ♟ ♟ ♟ ♟ ♟ ♟ ♟ ♟"
        assert lines[4] == "4 . . . . . . . ."
        assert lines[7] == "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"
