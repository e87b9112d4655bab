"""Shared engine search models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from ataxie.core.enums import PieceColor

if TYPE_CHECKING:
    from ataxie.core.move import Move
    from ataxie.core.position import Position

INF_SCORE = 1_000_000
WINNING_VALUE = 100_000
DEFAULT_MAX_DEPTH = 4


@dataclass(slots=True, frozen=True)
class SearchLimits:
    """Search constraints for a single move computation.

    ``fold_forced_pass`` controls nodes where the mover has no legal move:
    when False the value of the forced pass is searched but discarded, so
    such a node reports its initial bound; when True the pass is scored and
    recorded like any other candidate.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    fold_forced_pass: bool = False


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by the engine search."""

    best_move: Move | None
    score: int
    depth: int
    nodes: int


@dataclass(slots=True, frozen=True)
class ColorSense:
    """Which color the search maximizes for, and which it minimizes for."""

    maximizer: PieceColor = PieceColor.RED
    minimizer: PieceColor = PieceColor.BLUE

    def __post_init__(self) -> None:
        if not (self.maximizer.is_piece and self.minimizer.is_piece):
            raise ValueError("Search polarity needs two piece colors")
        if self.maximizer == self.minimizer:
            raise ValueError("Maximizer and minimizer must differ")

    def sense(self, color: PieceColor) -> int:
        """+1 for the maximizing color, -1 for the minimizing color."""
        if color == self.maximizer:
            return 1
        if color == self.minimizer:
            return -1
        raise ValueError(f"{color.name} has no search polarity")

    def color(self, sense: int) -> PieceColor:
        return self.maximizer if sense > 0 else self.minimizer

    def swapped(self) -> ColorSense:
        return ColorSense(maximizer=self.minimizer, minimizer=self.maximizer)


DEFAULT_SENSES = ColorSense()


class IEngine(Protocol):
    """Protocol for Ataxx engines used by players and the Qt bridge."""

    def search(self, position: Position, limits: SearchLimits) -> SearchResult: ...
