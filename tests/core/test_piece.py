"""Tests for Piece."""

import pytest

from chessmaster.core.enums import Color, PieceType
from chessmaster.core.piece import Piece


class TestFenLetters:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str_case_follows_color(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KING)) == "K"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    @pytest.mark.parametrize("char", ["x", "", "NN", "1"])
    def test_invalid_char(self, char: str) -> None:
        with pytest.raises(ValueError):
            Piece.from_char(char)


class TestSymbol:
    def test_white_and_black_glyphs(self) -> None:
        assert Piece(Color.WHITE, PieceType.KNIGHT).symbol == "♘"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_every_piece_has_distinct_glyph(self) -> None:
        glyphs = {Piece(c, pt).symbol for c in Color for pt in PieceType}
        assert len(glyphs) == 12
