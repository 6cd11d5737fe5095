"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessmaster.core.board import Board
    from chessmaster.core.enums import Color
    from chessmaster.core.move import Move


class Difficulty(IntEnum):
    """Bot strength; the value is the fixed search depth in plies."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def depth(self) -> int:
        return int(self.value)

    @classmethod
    def from_name(cls, name: str) -> Difficulty:
        """Parse 'easy' / 'medium' / 'hard' (case-insensitive)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int
    randomized: bool = False


class IEngine(Protocol):
    """Protocol for engines used by the game layer and the Qt worker."""

    def search(
        self,
        board: Board,
        color: Color,
        difficulty: Difficulty,
    ) -> SearchResult: ...
