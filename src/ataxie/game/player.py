"""Concrete player implementations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ataxie.core.enums import PieceColor
from ataxie.core.move import Move
from ataxie.core.move_generator import MoveGenerator
from ataxie.engine.minimax import MinimaxEngine
from ataxie.engine.search import IEngine, SearchLimits
from ataxie.game.interfaces import IPlayer

if TYPE_CHECKING:
    from ataxie.core.position import Position

_LOGGER = logging.getLogger(__name__)


class AIPlayer(IPlayer):
    """A participant whose moves come from an engine search.

    Checks for a forced pass before searching, since the engine refuses to
    search a position where the mover has nothing to play.

    Args:
        color: Side the AI plays.
        name: Display name.
        limits: Search configuration.
        seed: Kept for interface parity with seeded players; move selection
            is deterministic and never consults it.
        engine: Search engine; defaults to :class:`MinimaxEngine`.
    """

    __slots__ = ("_color", "_name", "_limits", "_seed", "_engine")

    def __init__(
        self,
        color: PieceColor,
        name: str = "Engine",
        limits: SearchLimits | None = None,
        seed: int | None = None,
        engine: IEngine | None = None,
    ) -> None:
        if not color.is_piece:
            raise ValueError(f"A player must be red or blue, got {color.name}")
        self._color = color
        self._name = name
        self._limits = limits if limits is not None else SearchLimits()
        self._seed = seed
        self._engine = engine if engine is not None else MinimaxEngine()

    @property
    def color(self) -> PieceColor:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    @property
    def limits(self) -> SearchLimits:
        return self._limits

    @property
    def seed(self) -> int | None:
        return self._seed

    def get_move(self, position: Position) -> Move:
        if position.side_to_move != self._color:
            raise ValueError(f"It is not {self._color}'s turn")
        if not MoveGenerator(position).has_moves(self._color):
            _LOGGER.debug("%s has no legal move; passing", self._color)
            return Move.PASS

        result = self._engine.search(position, self._limits)
        if result.best_move is None:
            # Depth 0, or every reply stuck at the initial bound: nothing was
            # recorded, so play the first legal move.
            return MoveGenerator(position).generate_moves(self._color)[0]
        return result.best_move
