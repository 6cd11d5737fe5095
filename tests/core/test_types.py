"""Tests for Square and coordinate helpers."""

import pytest

from chessmaster.core.types import ALL_SQUARES, Square, parse_square


class TestSquare:
    def test_name_uses_white_orientation(self) -> None:
        assert Square(6, 4).name == "e2"
        assert Square(0, 0).name == "a8"
        assert Square(7, 7).name == "h1"

    def test_is_valid(self) -> None:
        assert Square(0, 0).is_valid
        assert Square(7, 7).is_valid
        assert not Square(-1, 0).is_valid
        assert not Square(0, 8).is_valid

    def test_offset(self) -> None:
        assert Square(6, 4).offset(-2, 0) == Square(4, 4)

    def test_all_squares_row_major(self) -> None:
        assert len(ALL_SQUARES) == 64
        assert ALL_SQUARES[0] == Square(0, 0)
        assert ALL_SQUARES[8] == Square(1, 0)


class TestParseSquare:
    def test_roundtrip(self) -> None:
        for sq in ALL_SQUARES:
            assert parse_square(sq.name) == sq

    def test_e4(self) -> None:
        assert parse_square("e4") == Square(4, 4)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e22"])
    def test_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse_square(name)
