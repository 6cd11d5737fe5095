"""Tests for GameState."""

from chessmaster.core.board import Board
from chessmaster.core.enums import Color, GameResult, PieceType
from chessmaster.core.move import Move
from chessmaster.core.piece import Piece
from chessmaster.core.types import parse_square
from chessmaster.game.interfaces import GamePhase
from chessmaster.game.state import GameState

_WHITE_PAWN = Piece(Color.WHITE, PieceType.PAWN)


def _e2e4() -> Move:
    return Move(parse_square("e2"), parse_square("e4"), _WHITE_PAWN)


class TestGameStateSetup:
    def test_before_setup(self) -> None:
        gs = GameState()
        assert gs.phase == GamePhase.NOT_STARTED
        assert gs.side_to_move == Color.WHITE

    def test_setup_default(self) -> None:
        gs = GameState()
        gs.setup()
        assert gs.phase == GamePhase.AWAITING_MOVE
        assert gs.result == GameResult.IN_PROGRESS
        assert gs.board == Board.initial()
        assert gs.ply_count == 0
        assert gs.end_message is None

    def test_setup_resets(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(_e2e4())
        assert gs.ply_count == 1
        gs.setup()
        assert gs.ply_count == 0
        assert gs.side_to_move == Color.WHITE
        assert gs.last_move is None


class TestApplyMove:
    def test_switches_side_and_records(self) -> None:
        gs = GameState()
        gs.setup()
        start = gs.board
        record = gs.apply_move(_e2e4())

        assert gs.side_to_move == Color.BLACK
        assert record.text == "pawn e2-e4"
        assert not record.was_capture
        assert not record.was_check
        assert gs.last_move == _e2e4()
        assert start == Board.initial()

    def test_legal_moves_for_side_to_move(self) -> None:
        gs = GameState()
        gs.setup()
        gs.apply_move(_e2e4())
        moves = gs.legal_moves()
        assert len(moves) == 20
        assert all(m.piece.color == Color.BLACK for m in moves)
