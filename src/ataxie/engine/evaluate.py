"""Static position evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ataxie.core.enums import PieceColor
from ataxie.engine.search import DEFAULT_SENSES, ColorSense

if TYPE_CHECKING:
    from ataxie.core.position import Position


def evaluate(
    position: Position,
    win_magnitude: int,
    senses: ColorSense = DEFAULT_SENSES,
) -> int:
    """Heuristic value of *position* from the maximizer's point of view.

    A decided game scores ``±win_magnitude`` (0 for a draw). An undecided
    one scores ``win_magnitude`` plus the leading side's piece count, signed
    by the leader; ties count the minimizer as leading. Callers pass
    ``WINNING_VALUE + depth`` so that outcomes nearer the root weigh more.
    """
    winner = position.winner
    if winner is not None:
        if winner == PieceColor.EMPTY:
            return 0
        return senses.sense(winner) * win_magnitude

    if win_magnitude == 0:
        return 0
    max_count = position.piece_count(senses.maximizer)
    min_count = position.piece_count(senses.minimizer)
    if max_count > min_count:
        return win_magnitude + max_count
    return -(win_magnitude + min_count)
