"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessmaster.core import Board, Color, MoveGenerator

    board = Board.initial()
    for move in MoveGenerator(board).legal_moves(Color.WHITE):
        print(move)
"""

from __future__ import annotations

from chessmaster.core.board import Board
from chessmaster.core.enums import Color, GameResult, PieceType
from chessmaster.core.move import Move
from chessmaster.core.move_generator import MoveGenerator
from chessmaster.core.notation import STARTING_PLACEMENT, board_from_fen, board_to_fen
from chessmaster.core.piece import Piece
from chessmaster.core.rules import Rules
from chessmaster.core.types import Square, parse_square


def initial_board() -> Board:
    """The standard starting position."""
    return Board.initial()


def legal_moves(
    board: Board, square: Square, last_move: Move | None = None
) -> list[Square]:
    """Legal destinations for the piece on *square*; empty if there is none."""
    return MoveGenerator(board).legal_targets(square, last_move)


def is_in_check(board: Board, color: Color) -> bool:
    return Rules.is_in_check(board, color)


def is_checkmate(board: Board, color: Color) -> bool:
    return Rules.is_checkmate(board, color)


def is_stalemate(board: Board, color: Color) -> bool:
    return Rules.is_stalemate(board, color)


def apply_move(board: Board, from_sq: Square, to_sq: Square) -> Board:
    """New board with the piece relocated; legality is the caller's job."""
    return board.apply_move(from_sq, to_sq)


__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_fen",
    "board_to_fen",
    # Functional interface
    "apply_move",
    "initial_board",
    "is_checkmate",
    "is_in_check",
    "is_stalemate",
    "legal_moves",
]
