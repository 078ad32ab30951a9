from __future__ import annotations
from bisect import bisect_left
from typing import List

from tilesolver.domains.board import Board
from tilesolver.heuristics.base import Heuristic
from tilesolver.heuristics.manhattan import ManhattanDistance


def longest_increasing_run(goals: List[int]) -> int:
    """Length of the longest increasing subsequence (patience sorting)."""
    tails: List[int] = []
    for g in goals:
        i = bisect_left(tails, g)
        if i == len(tails):
            tails.append(g)
        else:
            tails[i] = g
    return len(tails)


def line_penalty(goals: List[int]) -> int:
    """
    `goals` lists, in current order along one row/column, the goal offsets of the
    tiles that already sit in their goal line. Tiles outside a longest increasing
    subsequence must step out of the line, each costing at least two extra moves.
    """
    return 2 * (len(goals) - longest_increasing_run(goals))


class LinearConflict(Heuristic):
    """Manhattan + 2 per tile that has to step out of its goal row/column."""
    name = "linear_conflict"
    short_name = "LC"

    def __init__(self) -> None:
        self._manhattan = ManhattanDistance()

    def evaluate(self, board: Board) -> int:
        R, C = board.rows, board.columns
        s = board.cells
        m = self._manhattan.evaluate(board)
        # Row conflicts
        for r in range(R):
            goals = [(t - 1) % C for t in s[r * C:(r + 1) * C]
                     if t != 0 and (t - 1) // C == r]
            m += line_penalty(goals)
        # Column conflicts
        for c in range(C):
            goals = [(t - 1) // C for t in (s[c + r * C] for r in range(R))
                     if t != 0 and (t - 1) % C == c]
            m += line_penalty(goals)
        return m
