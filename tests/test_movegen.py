from __future__ import annotations

import pytest

from tilesolver.domains.board import Board, Move
from tilesolver.search.movegen import (
    MoveGenerator,
    SearchOrder,
    apply_move_sequence,
    parse_search_order,
    undo_move_sequence,
)
from tilesolver.search.visited import VisitedPositions

from boards import SOLVED_3x3, THREE_MOVES, board

U, D, L, R = Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT


def test_even_distance_emits_pairs():
    seqs = MoveGenerator().generate_moves(board(SOLVED_3x3))
    assert seqs == [(U, U), (U, L), (L, U), (L, L)]


def test_odd_distance_emits_singles():
    b = Board.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
    assert MoveGenerator().generate_moves(b) == [(U,), (D,), (L,)]


def test_previous_move_is_not_undone():
    b = Board.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
    assert MoveGenerator().generate_moves(b, previous=U) == [(U,), (L,)]


def test_pairs_never_undo_themselves():
    b = Board.from_rows([[1, 2, 3], [4, 0, 5], [7, 8, 6]])
    for first, second in MoveGenerator().generate_moves(b):
        assert second is not first.opposite()


def test_order_is_respected():
    b = board(THREE_MOVES)
    gen = MoveGenerator(parse_search_order("RDUL"))
    assert gen.generate_moves(b) == [(R,), (D,), (U,)]


def test_random_order_generates_the_same_moves():
    b = board(SOLVED_3x3)
    expected = set(MoveGenerator().generate_moves(b))
    gen = MoveGenerator(SearchOrder.random(seed=3))
    for _ in range(10):
        assert set(gen.generate_moves(b)) == expected


def test_random_order_is_reproducible_with_seed():
    a = SearchOrder.random(seed=11)
    b = SearchOrder.random(seed=11)
    assert [a.moves() for _ in range(5)] == [b.moves() for _ in range(5)]
    assert str(a) == "R"


@pytest.mark.parametrize("text", ["UDLR", "rdul", "LRUD"])
def test_parse_search_order(text):
    order = parse_search_order(text)
    assert str(order) == text.upper()
    assert not order.is_random
    assert order == parse_search_order(text.upper())


def test_parse_random_order():
    assert parse_search_order("R").is_random


@pytest.mark.parametrize(
    "text, message",
    [
        ("UDL", "Order must be 4 characters"),
        ("UDLRU", "Order must be 4 characters"),
        ("UDLX", "Invalid character X"),
        ("UDLL", "Duplicate move L"),
    ],
)
def test_parse_search_order_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_search_order(text)


def test_apply_and_undo_sequence():
    b = board(SOLVED_3x3)
    path = []
    apply_move_sequence(b, path, (U, L))
    assert path == [U, L]
    assert b.empty_cell_pos() == (1, 1)
    undo_move_sequence(b, path, (U, L))
    assert path == []
    assert b.is_solved()


def test_visited_positions():
    visited = VisitedPositions()
    b = board(SOLVED_3x3)
    assert not visited.is_visited(b)
    assert visited.visit(b)
    assert not visited.visit(b.clone())
    assert b in visited
    assert len(visited) == 1
    visited.clear()
    assert len(visited) == 0
