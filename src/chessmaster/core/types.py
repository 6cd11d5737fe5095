"""Square value object and coordinate helpers.

Board layout (row-major, as seen from white's side):
    row 0 = rank 8 (black's back rank), row 7 = rank 1 (white's back rank)
    col 0 = file a, col 7 = file h

So ``Square(6, 4)`` is e2 and ``Square(0, 4)`` is e8.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable ``(row, col)`` coordinate on the board."""

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Square(6, 4)`` → 'e2'."""
        return f"{_FILES[self.col]}{BOARD_SIZE - self.row}"

    def offset(self, d_row: int, d_col: int) -> Square:
        """Square shifted by ``(d_row, d_col)``; may be off the board."""
        return Square(self.row + d_row, self.col + d_col)

    def __str__(self) -> str:
        return self.name if self.is_valid else f"({self.row}, {self.col})"


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → ``Square(4, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(BOARD_SIZE - int(name[1]), _FILES.index(name[0]))


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
