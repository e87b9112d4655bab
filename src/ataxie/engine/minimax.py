"""Pure-Python Ataxx engine search (minimax + alpha-beta)."""

from __future__ import annotations

import logging

from ataxie.core.move import Move
from ataxie.core.move_generator import MoveGenerator
from ataxie.core.position import Position
from ataxie.engine.evaluate import evaluate
from ataxie.engine.search import (
    DEFAULT_SENSES,
    INF_SCORE,
    WINNING_VALUE,
    ColorSense,
    IEngine,
    SearchLimits,
    SearchResult,
)

_LOGGER = logging.getLogger(__name__)


class MinimaxEngine(IEngine):
    """Fixed-depth minimax searcher with alpha-beta pruning.

    Every explored move is applied to a fresh copy of its parent position,
    so siblings never observe each other's changes. Nothing survives between
    calls to :meth:`search` except the node counter of the last run.
    """

    __slots__ = ("_senses", "_fold_forced_pass", "_nodes")

    def __init__(self, senses: ColorSense = DEFAULT_SENSES) -> None:
        self._senses = senses
        self._fold_forced_pass = False
        self._nodes = 0

    @property
    def senses(self) -> ColorSense:
        return self._senses

    def search(self, position: Position, limits: SearchLimits) -> SearchResult:
        if limits.max_depth < 0:
            raise ValueError("Search depth must be >= 0")

        self._nodes = 0
        self._fold_forced_pass = limits.fold_forced_pass
        sense = self._senses.sense(position.side_to_move)

        if (
            limits.max_depth > 0
            and position.winner is None
            and not MoveGenerator(position).has_moves()
        ):
            raise ValueError(
                f"{position.side_to_move} has no legal move; play a pass instead of searching"
            )

        score, best_move = self._minimax(
            position.copy(),
            limits.max_depth,
            sense,
            -INF_SCORE,
            INF_SCORE,
        )
        _LOGGER.debug(
            "search depth=%d score=%d nodes=%d best=%s",
            limits.max_depth,
            score,
            self._nodes,
            best_move,
        )
        return SearchResult(best_move, score, limits.max_depth, self._nodes)

    def _minimax(
        self,
        position: Position,
        depth: int,
        sense: int,
        alpha: int,
        beta: int,
    ) -> tuple[int, Move | None]:
        """Value of *position* and the move achieving it.

        Seeks a maximal value (or one >= *beta*) when *sense* is +1 and a
        minimal value (or one <= *alpha*) when it is -1. Horizon and decided
        positions return their static value with no move.
        """
        self._nodes += 1
        if depth == 0 or position.winner is not None:
            return self._static_eval(position, WINNING_VALUE + depth), None

        moves = MoveGenerator(position).generate_moves()
        best_move: Move | None = None
        best_score = INF_SCORE if sense == -1 else -INF_SCORE

        for move in moves:
            child = position.copy()
            child.make_move(move)
            response, _ = self._minimax(child, depth - 1, -sense, alpha, beta)
            if sense == -1:
                if response < best_score:
                    best_score = response
                    best_move = move
                    beta = min(beta, best_score)
                    if alpha >= beta:
                        break
            elif response > best_score:
                best_score = response
                best_move = move
                alpha = max(alpha, best_score)
                if alpha >= beta:
                    break

        if not moves:
            child = position.copy()
            child.make_move(Move.PASS)
            response, _ = self._minimax(child, depth - 1, -sense, alpha, beta)
            if self._fold_forced_pass:
                best_score = response
                best_move = Move.PASS

        return best_score, best_move

    def _static_eval(self, position: Position, win_magnitude: int) -> int:
        return evaluate(position, win_magnitude, self._senses)
