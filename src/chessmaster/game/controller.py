"""GameController: the central orchestrator of a chess game.

Coordinates: Players, GameState, MoveGenerator, the bot engine.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessmaster.config import EngineSettings
from chessmaster.core.board import Board
from chessmaster.core.enums import Color, GameResult
from chessmaster.core.move import Move
from chessmaster.core.move_generator import MoveGenerator
from chessmaster.core.types import Square
from chessmaster.engine.search import Difficulty, IEngine
from chessmaster.game.interfaces import GameMode, GamePhase, IPlayer
from chessmaster.game.player import AIPlayer, HumanPlayer
from chessmaster.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
GameOverCallback = Callable[[GameResult, str], None]  # result, message
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Orchestrates a full chess game: validates moves, switches turns,
    asks the bot to move, notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).  Bot results computed on an ``EngineWorker``
    thread arrive via ``submit_bot_move`` on the main thread.
    """

    __slots__ = ("_state", "_players", "_game_id", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self._game_id = 0
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.side_to_move)

    @property
    def mode(self) -> GameMode:
        if any(not p.is_human for p in self._players.values()):
            return GameMode.BOT
        return GameMode.PLAYER

    @property
    def game_id(self) -> int:
        """Increments with every ``new_game``; bot replies must quote it."""
        return self._game_id

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
    ) -> None:
        """Set up a new game and prompt the first player.

        A bot still thinking in the previous game is cancelled, and any
        reply it later submits under the old ``game_id`` is dropped.
        """
        cp = self.current_player
        if cp is not None and not cp.is_human and self._state.phase == GamePhase.THINKING:
            cp.cancel()

        self._game_id += 1
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState()
        self._state.setup(board, side_to_move)

        if self._state.is_game_over:
            self._emit_game_over()
            return

        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._prompt_current_player()

    def new_bot_game(
        self,
        settings: EngineSettings,
        on_request_move: Callable[[Board], None] | None = None,
        on_cancel: Callable[[], None] | None = None,
        human_name: str = "",
    ) -> AIPlayer:
        """Start a human-vs-bot game with the bot on ``settings.bot_color``.

        Returns the bot player so the caller can route its replies.
        """
        bot_color = settings.bot_color
        bot = AIPlayer(
            bot_color,
            name=f"Bot ({settings.difficulty})",
            on_request_move=on_request_move,
            on_cancel=on_cancel,
        )
        human = HumanPlayer(bot_color.opposite, human_name)
        if bot_color == Color.WHITE:
            self.new_game(bot, human)
        else:
            self.new_game(human, bot)
        return bot

    def legal_targets(self, square: Square) -> list[Square]:
        """Destinations for the side to move's piece on *square*.

        Empty for an empty square, an opponent piece, or a finished game.
        """
        if self._state.is_game_over:
            return []
        piece = self._state.board[square]
        if piece is None or piece.color != self._state.side_to_move:
            return []
        gen = MoveGenerator(self._state.board)
        return gen.legal_targets(square, self._state.last_move)

    def submit_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play a human's *from_sq* → *to_sq*. Returns True if applied.

        Rejected while the bot is thinking.
        """
        if self._state.phase != GamePhase.AWAITING_MOVE:
            return False
        return self._play(from_sq, to_sq)

    def submit_bot_move(self, move: Move, game_id: int) -> bool:
        """Play a bot reply computed for game *game_id*.

        Replies for an earlier game, or arriving when no bot is thinking,
        are dropped.
        """
        if game_id != self._game_id:
            _LOGGER.debug("Dropped %s from finished game %d", move, game_id)
            return False
        if self._state.phase != GamePhase.THINKING:
            return False
        return self._play(move.from_sq, move.to_sq)

    def play_engine_move(self, engine: IEngine, difficulty: Difficulty) -> Move | None:
        """Let *engine* move for the side to move, synchronously."""
        if self._state.phase not in (GamePhase.AWAITING_MOVE, GamePhase.THINKING):
            return None
        game_id = self._game_id
        result = engine.search(self._state.board, self._state.side_to_move, difficulty)
        move = result.best_move
        if move is None or game_id != self._game_id:
            return None
        if not self._play(move.from_sq, move.to_sq):
            return None
        return move

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, from_sq: Square, to_sq: Square) -> bool:
        if self._state.is_game_over:
            return False

        if to_sq not in self.legal_targets(from_sq):
            _LOGGER.debug(
                "Rejected move %s-%s for %s", from_sq, to_sq, self._state.side_to_move
            )
            return False

        piece = self._state.board[from_sq]
        assert piece is not None
        record = self._state.apply_move(Move(from_sq, to_sq, piece))
        self._emit_move(record)

        if self._state.is_game_over:
            self._emit_game_over()
            return True

        self._prompt_current_player()
        return True

    def _prompt_current_player(self) -> None:
        """Ask the current player to move."""
        cp = self.current_player
        if cp is None:
            return

        if cp.is_human:
            self._state.phase = GamePhase.AWAITING_MOVE
            self._emit_phase(GamePhase.AWAITING_MOVE)
        else:
            self._state.phase = GamePhase.THINKING
            self._emit_phase(GamePhase.THINKING)
            cp.request_move(self._state.board)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self) -> None:
        message = self._state.end_message or ""
        _LOGGER.info("Game over: %s", message)
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(self._state.result, message)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
