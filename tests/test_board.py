from __future__ import annotations

import pytest

from tilesolver.domains.board import (
    ALL_MOVES,
    Board,
    Move,
    moves_from_string,
    moves_to_string,
    replay,
    scramble,
)
from tilesolver.domains.parity import is_solvable

from boards import ONE_MOVE, SOLVED_3x3, board


def test_solved_board_layout():
    b = Board.solved(3, 4)
    assert b.cells == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0]
    assert b.is_solved()
    assert b.empty_cell_pos() == (2, 3)
    assert b.dimensions() == (3, 4)


def test_from_rows_matches_parsed_board():
    assert Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]]) == board(ONE_MOVE)


def test_single_cell_board_is_solved():
    assert Board(1, 1, [0]).is_solved()


@pytest.mark.parametrize("move", ALL_MOVES)
def test_move_then_opposite_restores_board(move):
    b = Board.from_rows([[1, 2, 3], [4, 0, 5], [6, 7, 8]])
    before = b.clone()
    b.exec_move(move)
    assert b != before
    b.exec_move(move.opposite())
    assert b == before


def test_exec_move_swaps_blank_with_neighbour():
    b = board(ONE_MOVE)
    b.exec_move(Move.RIGHT)
    assert b.is_solved()
    assert b.at(2, 1) == 8


@pytest.mark.parametrize("move", [Move.DOWN, Move.RIGHT])
def test_illegal_move_raises(move):
    b = board(SOLVED_3x3)
    assert not b.can_move(move)
    with pytest.raises(ValueError):
        b.exec_move(move)


def test_missing_blank_raises():
    b = Board(2, 2, [1, 2, 3, 4])
    with pytest.raises(ValueError):
        b.empty_cell_pos()


def test_clone_is_independent():
    b = board(ONE_MOVE)
    c = b.clone()
    c.exec_move(Move.RIGHT)
    assert not b.is_solved()
    assert c.is_solved()


def test_equal_boards_hash_alike():
    assert {board(ONE_MOVE), board(ONE_MOVE)} == {board(ONE_MOVE)}
    assert board(ONE_MOVE).key() == (1, 2, 3, 4, 5, 6, 7, 0, 8)


def test_move_strings():
    moves = moves_from_string("udLR")
    assert moves == [Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT]
    assert moves_to_string(moves) == "UDLR"
    assert str(Move.LEFT) == "L"
    with pytest.raises(ValueError):
        moves_from_string("X")


def test_replay_leaves_input_untouched():
    b = board(ONE_MOVE)
    assert replay(b, [Move.RIGHT]).is_solved()
    assert not b.is_solved()


@pytest.mark.parametrize("seed", range(5))
def test_scramble_is_deterministic_and_solvable(seed):
    goal = Board.solved(3, 4)
    a = scramble(goal, 20, seed)
    assert a == scramble(goal, 20, seed)
    assert is_solvable(a)
    assert goal.is_solved()
