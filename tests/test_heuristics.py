from __future__ import annotations

import pytest

from tilesolver.domains.board import Board, scramble
from tilesolver.heuristics.inversion_distance import InversionDistance, count_inversions, moves_for_inversions
from tilesolver.heuristics.linear_conflict import LinearConflict, line_penalty, longest_increasing_run
from tilesolver.heuristics.manhattan import ManhattanDistance
from tilesolver.heuristics.registry import create_heuristic, heuristic_ids
from tilesolver.search.ida_star import IDAStarSolver

from boards import FIVE_MOVES, KNOWN_LENGTHS, ONE_MOVE, SEVEN_MOVES, board

HEURISTICS = [ManhattanDistance, LinearConflict, InversionDistance]


@pytest.mark.parametrize("cls", HEURISTICS)
@pytest.mark.parametrize("shape", [(1, 1), (2, 3), (3, 3), (4, 4)])
def test_solved_board_scores_zero(cls, shape):
    assert cls().evaluate(Board.solved(*shape)) == 0


def test_manhattan_values():
    md = ManhattanDistance()
    assert md(board(ONE_MOVE)) == 1
    assert md(board(FIVE_MOVES)) == 5
    assert md(board(SEVEN_MOVES)) == 5


def test_linear_conflict_adds_two_per_reversed_pair():
    b = Board.from_rows([[2, 1, 3], [4, 5, 6], [7, 8, 0]])
    assert ManhattanDistance()(b) == 2
    assert LinearConflict()(b) == 4


def test_linear_conflict_counts_columns():
    b = Board.from_rows([[4, 2, 3], [1, 5, 6], [7, 8, 0]])
    assert LinearConflict()(b) == 4


@pytest.mark.parametrize(
    "goals, penalty",
    [([], 0), ([0], 0), ([0, 1, 2], 0), ([1, 0], 2), ([2, 1, 0], 4), ([2, 0, 1], 2),
     ([1, 3, 0, 4, 2], 4), ([0, 2, 4, 1, 5, 3], 4), ([1, 3, 0, 4, 2, 5], 4)],
)
def test_line_penalty(goals, penalty):
    assert line_penalty(goals) == penalty


@pytest.mark.parametrize("goals, length", [([], 0), ([3, 1, 2], 2), ([1, 3, 0, 4, 2], 3), ([4, 3, 2, 1, 0], 1)])
def test_longest_increasing_run(goals, length):
    assert longest_increasing_run(goals) == length


def test_linear_conflict_on_wide_row():
    # row 0 holds tiles 2 4 1 5 3 (goal offsets 1 3 0 4 2): two tiles must leave the row
    b = Board.from_rows([[2, 4, 1, 5, 3], [6, 7, 8, 9, 0]])
    assert LinearConflict()(b) == ManhattanDistance()(b) + 4


def test_inversion_helpers():
    rank = {t: i for i, t in enumerate([1, 2, 3, 0])}
    assert count_inversions([2, 1, 0, 3], rank) == 1
    assert moves_for_inversions(0, 4) == 0
    assert moves_for_inversions(5, 4) == 3
    assert moves_for_inversions(6, 4) == 2
    assert moves_for_inversions(3, 1) == 0


def test_inversion_distance_counts_horizontal_moves():
    assert InversionDistance()(board(ONE_MOVE)) == 1


def test_inversion_distance_handles_changing_dimensions():
    h = InversionDistance()
    assert h(Board.solved(3, 3)) == 0
    assert h(Board.solved(2, 5)) == 0
    assert h(board(ONE_MOVE)) == 1


def _optimal_states(start):
    """Boards along a shortest solution, paired with the number of moves still needed."""
    path = IDAStarSolver(start, ManhattanDistance()).solve()
    b = start.clone()
    out = [(b.clone(), len(path))]
    for i, m in enumerate(path, start=1):
        b.exec_move(m)
        out.append((b.clone(), len(path) - i))
    return out


_ADMISSIBILITY_BOARDS = [board(text) for text, _ in KNOWN_LENGTHS] + [
    scramble(Board.solved(3, 3), 16, seed) for seed in range(4)
] + [scramble(Board.solved(2, 4), 14, seed) for seed in range(3)]


@pytest.mark.parametrize("cls", HEURISTICS)
@pytest.mark.parametrize("start", _ADMISSIBILITY_BOARDS, ids=repr)
def test_heuristics_never_overestimate(cls, start):
    h = cls()
    for b, remaining in _optimal_states(start):
        assert 0 <= h.evaluate(b) <= remaining


def test_registry_accepts_short_and_long_ids():
    assert isinstance(create_heuristic("MD"), ManhattanDistance)
    assert isinstance(create_heuristic("linear_conflict"), LinearConflict)
    assert isinstance(create_heuristic("ID"), InversionDistance)
    assert {"MD", "LC", "ID"} <= set(heuristic_ids())


def test_registry_lists_valid_ids_on_error():
    with pytest.raises(ValueError, match="MD"):
        create_heuristic("XX")
