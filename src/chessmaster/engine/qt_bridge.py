"""Qt bridge to run a bot search in a worker thread."""

from __future__ import annotations

import logging
import threading

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

from chessmaster.config import EngineSettings
from chessmaster.core.board import Board
from chessmaster.core.enums import Color
from chessmaster.engine.minimax import MinimaxEngine
from chessmaster.engine.search import Difficulty

_LOGGER = logging.getLogger(__name__)


class EngineWorker(QObject):
    """Thread-affine worker that computes bot moves on demand.

    A search always runs to completion.  :meth:`cancel` only marks the
    running request as stale, so its move is reported through
    ``search_cancelled`` instead of ``best_move_ready``.
    """

    best_move_ready = pyqtSignal(int, object, int, int)
    search_cancelled = pyqtSignal(int)
    search_no_move = pyqtSignal(int)
    search_error = pyqtSignal(int, str)

    __slots__ = ("_cancel_event", "_engine", "_settings")

    def __init__(self, settings: EngineSettings | None = None) -> None:
        super().__init__()
        self._engine = MinimaxEngine()
        self._settings = settings or EngineSettings()
        self._cancel_event = threading.Event()

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @pyqtSlot(object, int, int)
    def request_move(self, board_obj: object, color: int, request_id: int) -> None:
        """Search for the best move of *color* on *board_obj* and emit result."""
        if not isinstance(board_obj, Board):
            self.search_error.emit(request_id, "Engine received invalid board")
            return

        self._cancel_event.clear()
        try:
            result = self._engine.search(
                board_obj,
                Color(color),
                self._settings.difficulty,
            )
        except Exception as exc:
            _LOGGER.exception("Engine search failed for request %d", request_id)
            self.search_error.emit(request_id, str(exc))
            return

        if self._settings.thinking_delay_ms > 0:
            QThread.msleep(self._settings.thinking_delay_ms)

        if self._cancel_event.is_set():
            self.search_cancelled.emit(request_id)
            return

        if result.best_move is None:
            self.search_no_move.emit(request_id)
            return

        self.best_move_ready.emit(
            request_id,
            result.best_move,
            result.score,
            result.nodes,
        )

    @pyqtSlot()
    def cancel(self) -> None:
        """Mark the current request as stale."""
        self._cancel_event.set()

    @pyqtSlot(int)
    def set_difficulty(self, difficulty: int) -> None:
        """Update difficulty (takes effect on the next search)."""
        self._settings.difficulty = Difficulty(difficulty)
