"""Core enumerations for the Ataxx domain."""

from __future__ import annotations

from enum import IntEnum


class PieceColor(IntEnum):
    """Contents of a single board cell."""

    RED = 0
    BLUE = 1
    EMPTY = 2
    BLOCKED = 3

    @property
    def is_piece(self) -> bool:
        return self in (PieceColor.RED, PieceColor.BLUE)

    @property
    def opposite(self) -> PieceColor:
        if not self.is_piece:
            raise ValueError(f"{self.name} has no opposite color")
        return PieceColor(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()
