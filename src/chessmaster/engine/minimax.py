"""Pure-Python bot search (fixed-depth minimax + alpha-beta)."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from chessmaster.core.enums import Color
from chessmaster.core.move import Move
from chessmaster.core.move_generator import MoveGenerator
from chessmaster.engine.evaluation import evaluate
from chessmaster.engine.search import Difficulty, IEngine, SearchResult

if TYPE_CHECKING:
    from chessmaster.core.board import Board

_LOGGER = logging.getLogger(__name__)

_INF_SCORE = 10_000_000
MATE_SCORE = 999_999

# Easy bot: how often it skips the search, and how often a random pick
# prefers a capture when one exists.
EASY_RANDOM_RATE = 0.5
EASY_CAPTURE_RATE = 0.7


class MinimaxEngine(IEngine):
    """Fixed-depth minimax searcher with alpha-beta pruning.

    Every node works on its own board copy, so a search can run while the
    caller keeps using the board it passed in.

    Args:
        rng: Random source for the easy-difficulty shortcut.
        use_pruning: Disable to run the same search without alpha-beta
            cut-offs (same result, more nodes).
    """

    __slots__ = ("_rng", "_use_pruning", "_nodes")

    def __init__(
        self,
        rng: random.Random | None = None,
        *,
        use_pruning: bool = True,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._use_pruning = use_pruning
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Nodes visited by the last search."""
        return self._nodes

    def search(
        self,
        board: Board,
        color: Color,
        difficulty: Difficulty,
    ) -> SearchResult:
        self._nodes = 0
        moves = MoveGenerator(board).legal_moves(color)
        if not moves:
            _LOGGER.debug("No legal moves for %s", color)
            return SearchResult(None, 0, 0, 0)

        if difficulty == Difficulty.EASY and self._rng.random() < EASY_RANDOM_RATE:
            move = self._random_move(board, moves)
            score = evaluate(board.apply_move(move.from_sq, move.to_sq), color)
            _LOGGER.debug("Easy bot picked %s at random", move)
            return SearchResult(move, score, 0, 0, randomized=True)

        depth = difficulty.depth
        best_move = moves[0]
        best_score = -_INF_SCORE

        for move in moves:
            child = board.apply_move(move.from_sq, move.to_sq)
            score = self._minimax(
                child,
                depth - 1,
                -_INF_SCORE,
                _INF_SCORE,
                maximizing=False,
                root_color=color,
            )
            # Strict comparison: ties keep the earliest generated move.
            if score > best_score:
                best_score = score
                best_move = move

        _LOGGER.debug(
            "%s search for %s: best=%s score=%d nodes=%d",
            difficulty,
            color,
            best_move,
            best_score,
            self._nodes,
        )
        return SearchResult(best_move, best_score, depth, self._nodes)

    def _random_move(self, board: Board, moves: list[Move]) -> Move:
        captures = [m for m in moves if board[m.to_sq] is not None]
        if captures and self._rng.random() < EASY_CAPTURE_RATE:
            return captures[int(self._rng.random() * len(captures))]
        return moves[int(self._rng.random() * len(moves))]

    def _minimax(
        self,
        board: Board,
        depth: int,
        alpha: int,
        beta: int,
        maximizing: bool,
        root_color: Color,
    ) -> int:
        self._nodes += 1

        # Leaves are always scored for the side the search was started for.
        if depth == 0:
            return evaluate(board, root_color)

        side = root_color if maximizing else root_color.opposite
        gen = MoveGenerator(board)
        moves = gen.legal_moves(side)
        if not moves:
            if gen.is_in_check(side):
                return -MATE_SCORE if maximizing else MATE_SCORE
            return 0  # stalemate

        if maximizing:
            best = -_INF_SCORE
            for move in moves:
                child = board.apply_move(move.from_sq, move.to_sq)
                score = self._minimax(child, depth - 1, alpha, beta, False, root_color)
                best = max(best, score)
                alpha = max(alpha, score)
                if self._use_pruning and beta <= alpha:
                    break
            return best

        best = _INF_SCORE
        for move in moves:
            child = board.apply_move(move.from_sq, move.to_sq)
            score = self._minimax(child, depth - 1, alpha, beta, True, root_color)
            best = min(best, score)
            beta = min(beta, score)
            if self._use_pruning and beta <= alpha:
                break
        return best


def best_move(
    board: Board,
    color: Color,
    difficulty: Difficulty,
    rng: random.Random | None = None,
) -> Move | None:
    """Move the bot would play for *color*, or ``None`` when it has none."""
    return MinimaxEngine(rng).search(board, color, difficulty).best_move
