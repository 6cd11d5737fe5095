"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessmaster.core.enums import Color, GameResult
from chessmaster.core.move_generator import MoveGenerator

if TYPE_CHECKING:
    from chessmaster.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    The board carries no turn, so every query names the color it is about.
    Nothing is cached: game-over state is recomputed from the board each time.
    """

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if not gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def is_stalemate(board: Board, color: Color) -> bool:
        gen = MoveGenerator(board)
        if gen.is_in_check(color):
            return False
        return not gen.has_legal_move(color)

    @staticmethod
    def game_result(board: Board, side_to_move: Color) -> GameResult:
        """Determine the result with *side_to_move* about to play."""
        gen = MoveGenerator(board)
        if gen.has_legal_move(side_to_move):
            return GameResult.IN_PROGRESS

        if gen.is_in_check(side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        return GameResult.DRAW  # stalemate
