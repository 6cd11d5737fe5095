"""Abstract interfaces for the game layer.

The controller depends on these ABCs, not on concrete players.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from chessmaster.core.enums import Color

if TYPE_CHECKING:
    from chessmaster.core.board import Board


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    THINKING = auto()  # bot is computing
    GAME_OVER = auto()


class GameMode(IntEnum):
    """Who sits on the other side of the board."""

    BOT = auto()
    PLAYER = auto()  # two humans on one device


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or bot)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def request_move(self, board: Board) -> None:
        """Begin the move-selection process.

        For humans this is a no-op (they pick squares in the UI).
        For the bot this kicks off a search.
        """

    @abstractmethod
    def cancel(self) -> None:
        """Drop an ongoing move computation (bot only, no-op for human)."""
