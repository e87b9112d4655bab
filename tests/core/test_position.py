"""Tests for Position: move application, flips, blocks and outcome."""

import pytest

from ataxie.core.enums import PieceColor
from ataxie.core.move import Move
from ataxie.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from ataxie.core.position import Position
from ataxie.core.types import (
    A1,
    A5,
    A6,
    A7,
    C3,
    C5,
    D4,
    D5,
    E3,
    E4,
    E5,
    SQUARE_COUNT,
    parse_square,
)

# Red on d4 next to blue d5/e5; a lone blue piece on a1 keeps the game open.
CAPTURE_FEN = "7/7/3bb2/3r3/7/7/b6 r"
# Red on a1 walled in by blue: red has no legal move, blue does.
STUCK_FEN = "7/7/7/7/bbb4/bbb4/rbb4 r"


class TestMakeMove:
    def test_extend_clones_piece(self, start_position: Position) -> None:
        start_position.make_move(Move(A7, A6))
        assert start_position.board[A7] == PieceColor.RED
        assert start_position.board[A6] == PieceColor.RED
        assert start_position.red_pieces == 3
        assert start_position.num_jumps == 0
        assert start_position.side_to_move == PieceColor.BLUE

    def test_jump_vacates_source(self, start_position: Position) -> None:
        start_position.make_move(Move(A7, A5))
        assert start_position.board[A7] == PieceColor.EMPTY
        assert start_position.board[A5] == PieceColor.RED
        assert start_position.red_pieces == 2
        assert start_position.num_jumps == 1

    def test_extend_resets_jump_counter(self) -> None:
        pos = position_from_fen("r5b/7/7/7/7/7/b5r r 7")
        pos.make_move(Move(A7, A6))
        assert pos.num_jumps == 0

    def test_adjacent_enemies_flip(self) -> None:
        pos = position_from_fen(CAPTURE_FEN)
        pos.make_move(Move(D4, E4))
        assert pos.board[D5] == PieceColor.RED
        assert pos.board[E5] == PieceColor.RED
        assert pos.red_pieces == 4
        assert pos.blue_pieces == 1
        assert pos.winner is None

    def test_illegal_move_raises(self, start_position: Position) -> None:
        before = position_to_fen(start_position)
        with pytest.raises(ValueError, match="Illegal move"):
            start_position.make_move(Move(A7, parse_square("a4")))
        with pytest.raises(ValueError, match="Illegal move"):
            start_position.make_move(Move(A1, parse_square("a2")))  # blue piece
        assert position_to_fen(start_position) == before

    def test_pass_illegal_when_moves_exist(self, start_position: Position) -> None:
        assert not start_position.is_legal(Move.PASS)
        with pytest.raises(ValueError):
            start_position.make_move(Move.PASS)

    def test_forced_pass_switches_side(self) -> None:
        pos = position_from_fen(STUCK_FEN)
        assert pos.winner is None
        assert not pos.can_move()
        assert pos.is_legal(Move.PASS)
        before = pos.board.copy()

        pos.make_move(Move.PASS)

        assert pos.side_to_move == PieceColor.BLUE
        assert pos.board == before


class TestOutcome:
    def test_start_undecided(self, start_position: Position) -> None:
        assert start_position.winner is None

    def test_capturing_last_piece_wins(self) -> None:
        pos = position_from_fen("7/7/3bb2/3r3/7/7/7 r")
        pos.make_move(Move(D4, E4))
        assert pos.blue_pieces == 0
        assert pos.winner == PieceColor.RED

    def test_jump_limit_ends_in_draw_on_equal_material(self) -> None:
        pos = position_from_fen("r5b/7/7/7/7/7/b5r r 25")
        assert pos.winner == PieceColor.EMPTY

    def test_full_board_goes_to_majority(self) -> None:
        rows = ["rrrrrrr"] * 4 + ["bbbbbbb"] * 3
        pos = position_from_fen("/".join(rows) + " b")
        assert pos.winner == PieceColor.RED

    def test_no_moves_after_game_over(self) -> None:
        pos = position_from_fen("r6/7/7/7/7/7/7 b")
        assert pos.winner == PieceColor.RED
        assert not pos.is_legal(Move.PASS)


class TestBlocks:
    def test_block_is_mirrored(self, start_position: Position) -> None:
        start_position.set_block(C3)
        for sq in (C3, E3, C5, E5):
            assert start_position.board[sq] == PieceColor.BLOCKED
        assert start_position.board.count(PieceColor.BLOCKED) == 4

    def test_center_block_is_single(self, start_position: Position) -> None:
        start_position.set_block(D4)
        assert start_position.board.count(PieceColor.BLOCKED) == 1

    def test_block_on_piece_raises(self, start_position: Position) -> None:
        with pytest.raises(ValueError, match="occupied"):
            start_position.set_block(A1)
        assert start_position.board.count(PieceColor.BLOCKED) == 0

    def test_block_after_first_move_raises(self, start_position: Position) -> None:
        start_position.make_move(Move(A7, A6))
        with pytest.raises(ValueError, match="before the first move"):
            start_position.set_block(C3)


class TestCopy:
    def test_copy_independence(self, start_position: Position) -> None:
        copy = start_position.copy()
        copy.make_move(Move(A7, A6))
        assert position_to_fen(start_position) == STARTING_FEN
        assert start_position.side_to_move == PieceColor.RED
        assert copy.side_to_move == PieceColor.BLUE

    def test_default_constructor_is_start(self) -> None:
        pos = Position()
        assert position_to_fen(pos) == STARTING_FEN
        assert pos.board.count(PieceColor.EMPTY) == SQUARE_COUNT - 4

    def test_side_must_be_piece_color(self) -> None:
        with pytest.raises(ValueError):
            Position(side_to_move=PieceColor.EMPTY)
