"""Position — complete game state (board + side to move + jump counter)."""

from __future__ import annotations

from ataxie.core.board import Board
from ataxie.core.enums import PieceColor
from ataxie.core.move import Move
from ataxie.core.move_generator import NEIGHBOUR_TARGETS
from ataxie.core.rules import Rules
from ataxie.core.types import BOARD_SIZE, Square, col_of, make_square, row_of, square_name


class Position:
    """Full Ataxx position: board + side to move + consecutive-jump count.

    The decided winner is recomputed after every :meth:`make_move`; search
    code works on :meth:`copy` snapshots rather than undoing moves.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "num_jumps",
        "_winner",
        "_started",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: PieceColor = PieceColor.RED,
        num_jumps: int = 0,
    ) -> None:
        if not side_to_move.is_piece:
            raise ValueError(f"Side to move must be red or blue, got {side_to_move.name}")
        if num_jumps < 0:
            raise ValueError(f"Jump count must be >= 0, got {num_jumps}")
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.num_jumps = num_jumps
        self._started = False
        self._winner = Rules.outcome(self)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def winner(self) -> PieceColor | None:
        """Decided winner, ``PieceColor.EMPTY`` for a draw, ``None`` if undecided."""
        return self._winner

    def piece_count(self, color: PieceColor) -> int:
        return self.board.count(color)

    @property
    def red_pieces(self) -> int:
        return self.board.count(PieceColor.RED)

    @property
    def blue_pieces(self) -> int:
        return self.board.count(PieceColor.BLUE)

    def is_legal(self, move: Move, color: PieceColor | None = None) -> bool:
        return Rules.is_legal(self, move, color)

    def can_move(self, color: PieceColor | None = None) -> bool:
        return Rules.can_move(self, self.side_to_move if color is None else color)

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> None:
        """Apply *move* for the side to move; raise ``ValueError`` if illegal."""
        if not Rules.is_legal(self, move):
            raise ValueError(f"Illegal move {move} for {self.side_to_move}")
        self._started = True

        if move.is_pass:
            self.side_to_move = self.side_to_move.opposite
            return

        assert move.from_sq is not None and move.to_sq is not None
        mover = self.side_to_move
        enemy = mover.opposite
        board = self.board

        if move.is_jump:
            board[move.from_sq] = PieceColor.EMPTY
            self.num_jumps += 1
        else:
            self.num_jumps = 0
        board[move.to_sq] = mover

        for sq in NEIGHBOUR_TARGETS[move.to_sq]:
            if board[sq] == enemy:
                board[sq] = mover

        self.side_to_move = enemy
        self._winner = Rules.outcome(self)

    def set_block(self, sq: Square) -> None:
        """Block *sq* and its mirror images; only before the first move."""
        if self._started:
            raise ValueError("Blocks can only be placed before the first move")
        last = BOARD_SIZE - 1
        col, row = col_of(sq), row_of(sq)
        mirrored = {
            make_square(col, row),
            make_square(last - col, row),
            make_square(col, last - row),
            make_square(last - col, last - row),
        }
        for target in mirrored:
            if self.board[target].is_piece:
                raise ValueError(f"Cannot block occupied square {square_name(target)}")
        for target in mirrored:
            self.board[target] = PieceColor.BLOCKED
        self._winner = Rules.outcome(self)

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Independent snapshot sharing no mutable state."""
        pos = Position.__new__(Position)
        pos.board = self.board.copy()
        pos.side_to_move = self.side_to_move
        pos.num_jumps = self.num_jumps
        pos._started = self._started
        pos._winner = self._winner
        return pos

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
