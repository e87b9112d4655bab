"""Abstract interfaces for the game layer.

A turn-driving loop depends on these ABCs, not on concrete players.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ataxie.core.enums import PieceColor
    from ataxie.core.move import Move
    from ataxie.core.position import Position


class IPlayer(ABC):
    """Interface for a game participant."""

    @property
    @abstractmethod
    def color(self) -> PieceColor: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def get_move(self, position: Position) -> Move:
        """Return the move this player makes in *position*.

        Must return :attr:`Move.PASS` when the player has no legal move.
        """
