"""High-level Ataxx rules: move legality and game outcome."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ataxie.core.enums import PieceColor
from ataxie.core.move import Move
from ataxie.core.move_generator import MAX_MOVE_DISTANCE, REACH_TARGETS
from ataxie.core.types import is_valid_square

if TYPE_CHECKING:
    from ataxie.core.position import Position

# Consecutive jumps (no extends in between) after which the game ends.
JUMP_LIMIT = 25


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    @staticmethod
    def can_move(position: Position, color: PieceColor) -> bool:
        """Whether *color* has an empty cell within reach of one of its pieces.

        Ignores whose turn it is and whether the game is over.
        """
        board = position.board
        for sq in board.squares(color):
            for to_sq in REACH_TARGETS[sq]:
                if board.is_empty(to_sq):
                    return True
        return False

    @staticmethod
    def is_legal(
        position: Position,
        move: Move,
        color: PieceColor | None = None,
    ) -> bool:
        """Whether *move* may be played by *color* (default: side to move).

        A pass is legal only when the mover has nothing else to play.
        Nothing is legal once the game is decided.
        """
        if position.winner is not None:
            return False
        mover = position.side_to_move if color is None else color
        if move.is_pass:
            return not Rules.can_move(position, mover)

        assert move.from_sq is not None and move.to_sq is not None
        if not (is_valid_square(move.from_sq) and is_valid_square(move.to_sq)):
            return False
        board = position.board
        if board[move.from_sq] != mover or not board.is_empty(move.to_sq):
            return False
        return 1 <= move.distance <= MAX_MOVE_DISTANCE

    @staticmethod
    def is_game_over(position: Position) -> bool:
        return Rules.outcome(position) is not None

    @staticmethod
    def outcome(position: Position) -> PieceColor | None:
        """Decided winner, ``PieceColor.EMPTY`` for a draw, ``None`` if in progress.

        The game ends when a side has no pieces left, when neither side can
        move, or after :data:`JUMP_LIMIT` consecutive jumps.
        """
        red = position.piece_count(PieceColor.RED)
        blue = position.piece_count(PieceColor.BLUE)
        finished = (
            red == 0
            or blue == 0
            or position.num_jumps >= JUMP_LIMIT
            or not (
                Rules.can_move(position, PieceColor.RED)
                or Rules.can_move(position, PieceColor.BLUE)
            )
        )
        if not finished:
            return None
        if red > blue:
            return PieceColor.RED
        if blue > red:
            return PieceColor.BLUE
        return PieceColor.EMPTY
