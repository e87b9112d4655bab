"""Text notation for positions (FEN-style) and moves."""

from __future__ import annotations

from ataxie.core.board import Board
from ataxie.core.enums import PieceColor
from ataxie.core.move import Move
from ataxie.core.position import Position
from ataxie.core.types import BOARD_SIZE, make_square, parse_square

STARTING_FEN = "r5b/7/7/7/7/7/b5r r 0"

_CELL_CHARS: dict[str, PieceColor] = {
    "r": PieceColor.RED,
    "b": PieceColor.BLUE,
    "X": PieceColor.BLOCKED,
}
_CHAR_OF: dict[PieceColor, str] = {v: k for k, v in _CELL_CHARS.items()}
_SIDE_CHARS: dict[str, PieceColor] = {"r": PieceColor.RED, "b": PieceColor.BLUE}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN-style string into a :class:`Position`.

    Rows run from row 7 down to row 1, separated by ``/``; ``r``/``b`` are
    pieces, ``X`` is a block and digits are runs of empty cells. Then the
    side to move (``r``/``b``) and an optional consecutive-jump count.
    """
    parts = fen.split()
    if not (2 <= len(parts) <= 3):
        raise ValueError(f"Invalid FEN (need 2-3 fields): {fen!r}")

    placement, side_part = parts[:2]

    # 1. Cells
    rows = placement.split("/")
    if len(rows) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain {BOARD_SIZE} rows): {fen!r}")
    board = Board()
    for row_idx, row_text in enumerate(rows):
        row = BOARD_SIZE - 1 - row_idx
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                color = _CELL_CHARS.get(ch)
                if color is None:
                    raise ValueError(f"Invalid FEN cell character {ch!r}: {fen!r}")
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN row width: {fen!r}")
                board[make_square(col, row)] = color
                col += 1
            if col > BOARD_SIZE:
                raise ValueError(f"Invalid FEN row width: {fen!r}")
        if col != BOARD_SIZE:
            raise ValueError(f"Invalid FEN row width: {fen!r}")

    # 2. Side to move
    side = _SIDE_CHARS.get(side_part)
    if side is None:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Jump counter (optional)
    num_jumps = 0
    if len(parts) > 2:
        try:
            num_jumps = int(parts[2])
        except ValueError:
            raise ValueError(f"Invalid FEN jump count: {parts[2]!r}") from None
        if num_jumps < 0:
            raise ValueError(f"Invalid FEN jump count: {parts[2]!r}")

    return Position(board, side, num_jumps)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN-style text."""
    rows: list[str] = []
    for row in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        text = ""
        for col in range(BOARD_SIZE):
            cell = pos.board[make_square(col, row)]
            if cell == PieceColor.EMPTY:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += _CHAR_OF[cell]
        if empty:
            text += str(empty)
        rows.append(text)

    side_str = "r" if pos.side_to_move == PieceColor.RED else "b"
    return f"{'/'.join(rows)} {side_str} {pos.num_jumps}"


def parse_move(text: str) -> Move:
    """Parse ``"a7-b6"`` style text; ``"-"`` is a pass."""
    text = text.strip()
    if text == "-":
        return Move.PASS
    parts = text.split("-")
    if len(parts) != 2:
        raise ValueError(f"Invalid move text: {text!r}")
    return Move(parse_square(parts[0]), parse_square(parts[1]))
