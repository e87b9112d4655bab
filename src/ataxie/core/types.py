"""Square type alias and coordinate helpers.

Board layout (row-major, column a on the left, row 1 at the bottom):
    a1=0,  b1=1,  ..., g1=6
    a2=7,  b2=8,  ..., g2=13
    ...
    a7=42, b7=43, ..., g7=48
"""

from __future__ import annotations

from typing import TypeAlias

BOARD_SIZE = 7
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

Square: TypeAlias = int  # 0–48

_COLUMNS = "abcdefg"
_ROWS = "1234567"


def col_of(sq: Square) -> int:
    """Column index 0–6 (a–g)."""
    return sq % BOARD_SIZE


def row_of(sq: Square) -> int:
    """Row index 0–6 (1–7)."""
    return sq // BOARD_SIZE


def make_square(col: int, row: int) -> Square:
    """Create square from column (0–6) and row (0–6)."""
    return row * BOARD_SIZE + col


def in_bounds(col: int, row: int) -> bool:
    """Whether (col, row) lies on the board."""
    return 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 48 → 'g7'."""
    return _COLUMNS[col_of(sq)] + _ROWS[row_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'd4' → 24."""
    if len(name) != 2 or name[0] not in _COLUMNS or name[1] not in _ROWS:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_COLUMNS.index(name[0]), _ROWS.index(name[1]))


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < SQUARE_COUNT


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1 = range(0, 7)
A2, B2, C2, D2, E2, F2, G2 = range(7, 14)
A3, B3, C3, D3, E3, F3, G3 = range(14, 21)
A4, B4, C4, D4, E4, F4, G4 = range(21, 28)
A5, B5, C5, D5, E5, F5, G5 = range(28, 35)
A6, B6, C6, D6, E6, F6, G6 = range(35, 42)
A7, B7, C7, D7, E7, F7, G7 = range(42, 49)
