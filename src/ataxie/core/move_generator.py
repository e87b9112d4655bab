"""Move generation restricted to geometrically reachable destinations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ataxie.core.enums import PieceColor
from ataxie.core.move import Move
from ataxie.core.types import BOARD_SIZE, SQUARE_COUNT, Square, in_bounds, make_square

if TYPE_CHECKING:
    from ataxie.core.position import Position


MAX_MOVE_DISTANCE = 2

# Column-major so targets come out in increasing column, then row.
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dc, dr) for dc in range(-1, 2) for dr in range(-1, 2) if (dc, dr) != (0, 0)
)
REACH_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dc, dr)
    for dc in range(-MAX_MOVE_DISTANCE, MAX_MOVE_DISTANCE + 1)
    for dr in range(-MAX_MOVE_DISTANCE, MAX_MOVE_DISTANCE + 1)
    if (dc, dr) != (0, 0)
)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(SQUARE_COUNT):
        col = sq % BOARD_SIZE
        row = sq // BOARD_SIZE
        moves: list[Square] = []
        for dc, dr in offsets:
            ac = col + dc
            ar = row + dr
            if in_bounds(ac, ar):
                moves.append(make_square(ac, ar))
        targets.append(tuple(moves))
    return tuple(targets)


NEIGHBOUR_TARGETS = _build_targets(NEIGHBOUR_OFFSETS)
REACH_TARGETS = _build_targets(REACH_OFFSETS)

# Sources visited in increasing column, then row.
_SOURCE_ORDER: tuple[Square, ...] = tuple(
    make_square(col, row) for col in range(BOARD_SIZE) for row in range(BOARD_SIZE)
)


class MoveGenerator:
    """Generates legal moves for a given :class:`Position`.

    Candidates are drawn from the 5x5 window around every friendly piece and
    filtered through the position's legality check. The position is never
    modified.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_moves(self, color: PieceColor | None = None) -> list[Move]:
        """All legal moves for *color* (default: the side to move).

        Ordered by source column, source row, destination column,
        destination row. Empty when the mover must pass.
        """
        if color is None:
            color = self._pos.side_to_move
        moves: list[Move] = []
        append = moves.append
        board = self._board
        is_legal = self._pos.is_legal

        for from_sq in _SOURCE_ORDER:
            if board[from_sq] != color:
                continue
            for to_sq in REACH_TARGETS[from_sq]:
                move = Move(from_sq, to_sq)
                if is_legal(move, color):
                    append(move)
        return moves

    def has_moves(self, color: PieceColor | None = None) -> bool:
        """Whether *color* has at least one legal move."""
        if color is None:
            color = self._pos.side_to_move
        board = self._board
        is_legal = self._pos.is_legal
        for from_sq in _SOURCE_ORDER:
            if board[from_sq] != color:
                continue
            for to_sq in REACH_TARGETS[from_sq]:
                if is_legal(Move(from_sq, to_sq), color):
                    return True
        return False
