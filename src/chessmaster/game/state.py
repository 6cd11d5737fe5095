"""Game state machine that tracks phase transitions and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessmaster.core.board import Board
from chessmaster.core.enums import Color, GameResult
from chessmaster.core.move import Move
from chessmaster.core.move_generator import MoveGenerator
from chessmaster.core.rules import Rules
from chessmaster.game.interfaces import GamePhase

_END_MESSAGES: dict[GameResult, str] = {
    GameResult.WHITE_WINS: "Checkmate! White wins!",
    GameResult.BLACK_WINS: "Checkmate! Black wins!",
    GameResult.DRAW: "Stalemate! Game is a draw.",
}


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    text: str
    was_check: bool = False
    was_capture: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: board, turn, phase, result, move history.

    This is a pure data/logic class without threading or UI.  ``board`` is
    replaced by a new board on every move, never modified.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.move_history.clear()
        self._check_game_over()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for legality check.
        """
        was_capture = self.board[move.to_sq] is not None
        self.board = self.board.apply_move(move.from_sq, move.to_sq)
        self.side_to_move = self.side_to_move.opposite

        record = MoveRecord(
            move=move,
            text=str(move),
            was_check=Rules.is_in_check(self.board, self.side_to_move),
            was_capture=was_capture,
        )
        self.move_history.append(record)

        self._check_game_over()
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def last_move(self) -> Move | None:
        if not self.move_history:
            return None
        return self.move_history[-1].move

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def end_message(self) -> str | None:
        """Announcement for a finished game, e.g. 'Checkmate! White wins!'."""
        return _END_MESSAGES.get(self.result)

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveGenerator(self.board).legal_moves(self.side_to_move, self.last_move)

    # ── Internal ─────────────────────────────────────────────────────────

    def _check_game_over(self) -> None:
        result = Rules.game_result(self.board, self.side_to_move)
        if result != GameResult.IN_PROGRESS:
            self.result = result
            self.phase = GamePhase.GAME_OVER
