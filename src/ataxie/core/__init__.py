"""Core domain layer — pure Ataxx logic with zero external dependencies.

Quick start::

    from ataxie.core import MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in MoveGenerator(pos).generate_moves():
        print(move)
"""

from ataxie.core.board import Board
from ataxie.core.enums import PieceColor
from ataxie.core.move import Move
from ataxie.core.move_generator import MoveGenerator
from ataxie.core.notation import (
    STARTING_FEN,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from ataxie.core.position import Position
from ataxie.core.rules import JUMP_LIMIT, Rules
from ataxie.core.types import (
    BOARD_SIZE,
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "PieceColor",
    # Types / helpers
    "BOARD_SIZE",
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "JUMP_LIMIT",
    "Move",
    "MoveGenerator",
    "Position",
    "Rules",
    # Notation
    "STARTING_FEN",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
]
