"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from chessmaster.core.enums import Color
from chessmaster.game.interfaces import IPlayer

if TYPE_CHECKING:
    from chessmaster.core.board import Board


class HumanPlayer(IPlayer):
    """A human participant whose moves come from the UI.

    ``request_move`` is a no-op because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def request_move(self, board: Board) -> None:
        pass  # Human moves arrive via controller.submit_move()

    def cancel(self) -> None:
        pass


class AIPlayer(IPlayer):
    """A bot participant that delegates computation to a callback.

    ``AIPlayer`` only stores a *bridge* callable invoked on
    ``request_move``.  With Qt this callable dispatches the board to an
    ``EngineWorker`` living in a ``QThread``; without Qt it can call
    ``GameController.play_engine_move`` directly.

    Args:
        color: Side the bot plays.
        name: Display name.
        on_request_move: ``(Board) -> None``, called when the game
            controller asks the bot to start thinking.
        on_cancel: ``() -> None``, called to drop a running search.
    """

    __slots__ = ("_color", "_name", "_on_request_move", "_on_cancel")

    def __init__(
        self,
        color: Color,
        name: str = "Bot",
        on_request_move: Callable[[Board], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._on_request_move = on_request_move
        self._on_cancel = on_cancel

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def request_move(self, board: Board) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board)

    def cancel(self) -> None:
        if self._on_cancel is not None:
            self._on_cancel()
