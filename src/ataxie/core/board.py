"""Board - cell contents of the 7x7 Ataxx grid."""

from __future__ import annotations

from ataxie.core.enums import PieceColor
from ataxie.core.types import A1, A7, BOARD_SIZE, G1, G7, SQUARE_COUNT, Square, make_square

_REPR_CHARS: dict[PieceColor, str] = {
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
    PieceColor.EMPTY: "-",
    PieceColor.BLOCKED: "X",
}


class Board:
    """Mutable 49-cell board with incremental per-color counts."""

    __slots__ = ("_cells", "_counts")

    def __init__(self) -> None:
        self._cells: list[PieceColor] = [PieceColor.EMPTY] * SQUARE_COUNT
        # [color] -> number of cells holding that color.
        self._counts: list[int] = [0, 0, SQUARE_COUNT, 0]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> PieceColor:
        return self._cells[sq]

    def __setitem__(self, sq: Square, color: PieceColor) -> None:
        old = self._cells[sq]
        if old == color:
            return
        self._counts[old] -= 1
        self._counts[color] += 1
        self._cells[sq] = color

    def is_empty(self, sq: Square) -> bool:
        return self._cells[sq] == PieceColor.EMPTY

    # -- Query helpers ------------------------------------------------------

    def count(self, color: PieceColor) -> int:
        """Number of cells holding *color*."""
        return self._counts[color]

    def squares(self, color: PieceColor) -> list[Square]:
        """Squares holding *color*, in increasing index order."""
        return [sq for sq, cell in enumerate(self._cells) if cell == color]

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._cells = self._cells.copy()
        b._counts = self._counts.copy()
        return b

    def clear(self) -> None:
        self._cells = [PieceColor.EMPTY] * SQUARE_COUNT
        self._counts = [0, 0, SQUARE_COUNT, 0]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout: red on a7/g1, blue on a1/g7."""
        b = cls()
        b[A7] = PieceColor.RED
        b[G1] = PieceColor.RED
        b[A1] = PieceColor.BLUE
        b[G7] = PieceColor.BLUE
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = [_REPR_CHARS[self[make_square(col, row)]] for col in range(BOARD_SIZE)]
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g")
        return "\n".join(rows)
