"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ataxie.core.types import Square, col_of, row_of, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object: a transfer between two squares, or a pass.

    A pass is represented by both squares being ``None``; use
    :attr:`Move.PASS` rather than constructing one.
    """

    from_sq: Square | None
    to_sq: Square | None

    PASS: ClassVar[Move]

    def __post_init__(self) -> None:
        if (self.from_sq is None) != (self.to_sq is None):
            raise ValueError("A move needs both squares, or neither for a pass")

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_pass(self) -> bool:
        return self.from_sq is None

    @property
    def distance(self) -> int:
        """Chebyshev distance between source and destination (0 for a pass)."""
        if self.from_sq is None or self.to_sq is None:
            return 0
        return max(
            abs(col_of(self.to_sq) - col_of(self.from_sq)),
            abs(row_of(self.to_sq) - row_of(self.from_sq)),
        )

    @property
    def is_extend(self) -> bool:
        """A clone onto an adjacent cell."""
        return self.distance == 1

    @property
    def is_jump(self) -> bool:
        """A move two cells away that vacates the source."""
        return self.distance == 2

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        if self.from_sq is None or self.to_sq is None:
            return "-"
        return f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"


Move.PASS = Move(None, None)
