"""Tests for FEN placement parsing and serialisation."""

import pytest

from chessmaster.core.board import Board
from chessmaster.core.enums import Color, PieceType
from chessmaster.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from chessmaster.core.piece import Piece
from chessmaster.core.types import parse_square


class TestBoardFromFen:
    def test_starting_placement(self) -> None:
        assert board_from_fen(STARTING_PLACEMENT) == Board.initial()

    def test_full_fen_fields_ignored(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
        assert board_from_fen(fen) == Board.initial()

    def test_rank_eight_is_row_zero(self) -> None:
        b = board_from_fen("k7/8/8/8/8/8/8/7K")
        assert b.piece_at(0, 0) == Piece(Color.BLACK, PieceType.KING)
        assert b.piece_at(7, 7) == Piece(Color.WHITE, PieceType.KING)

    def test_piece_placed_on_named_square(self) -> None:
        b = board_from_fen("8/8/8/3p4/8/8/8/3R4")
        assert b[parse_square("d5")] == Piece(Color.BLACK, PieceType.PAWN)
        assert b[parse_square("d1")] == Piece(Color.WHITE, PieceType.ROOK)

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "8/8/8/8/8/8/8/7",
            "8/8/8/8/8/8/8/ppppppppp",
            "8/8/8/8/8/8/8/x7",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            board_from_fen(fen)


class TestBoardToFen:
    def test_starting(self) -> None:
        assert board_to_fen(Board.initial()) == STARTING_PLACEMENT

    def test_roundtrip(self) -> None:
        placement = "r3k3/ppp2ppp/8/3q4/3N4/8/PPP2PPP/R3K2R"
        assert board_to_fen(board_from_fen(placement)) == placement
