"""
Inversion distance by Ken'ichiro Takahashi,
see <https://computerpuzzle.net/puzzle/15puzzle/index.html>.

A vertical move carries one tile past `columns-1` others in the row-major
reading, so it changes the row-major inversion count by at most `columns-1`
(and by `columns-1`, `columns-3`, ...). Horizontal moves leave that reading
unchanged. The same holds for the column-major reading and horizontal moves.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from tilesolver.domains.board import Board
from tilesolver.heuristics.base import Heuristic


@dataclass(frozen=True)
class _GoalOrders:
    rows: int
    columns: int
    row_first_order: Tuple[int, ...]
    column_first_order: Tuple[int, ...]
    row_rank: Dict[int, int]
    column_rank: Dict[int, int]

    @classmethod
    def build(cls, rows: int, columns: int) -> "_GoalOrders":
        size = rows * columns
        row_first = tuple(list(range(1, size)) + [0])
        column_first = tuple(row_first[r * columns + c] for c in range(columns) for r in range(rows))
        return cls(
            rows=rows,
            columns=columns,
            row_first_order=row_first,
            column_first_order=column_first,
            row_rank={t: i for i, t in enumerate(row_first)},
            column_rank={t: i for i, t in enumerate(column_first)},
        )


def count_inversions(order: Sequence[int], rank: Dict[int, int]) -> int:
    """Pairs of tiles that appear in `order` reversed with respect to `rank`; blank ignored."""
    ranks = [rank[t] for t in order if t != 0]
    inv = 0
    for i in range(len(ranks)):
        ri = ranks[i]
        for j in range(i + 1, len(ranks)):
            if ri > ranks[j]:
                inv += 1
    return inv


def moves_for_inversions(inversions: int, width: int) -> int:
    """Fewest moves that can remove `inversions` when one move removes width-1, width-3, ..."""
    moves = 0
    divisor = width - 1
    while divisor > 0:
        moves += inversions // divisor
        inversions %= divisor
        divisor -= 2
    return moves


class InversionDistance(Heuristic):
    name = "inversion_distance"
    short_name = "ID"

    def __init__(self) -> None:
        self._cache: Optional[_GoalOrders] = None

    def _goal_orders(self, rows: int, columns: int) -> _GoalOrders:
        cache = self._cache
        if cache is None or (cache.rows, cache.columns) != (rows, columns):
            cache = _GoalOrders.build(rows, columns)
            self._cache = cache
        return cache

    def evaluate(self, board: Board) -> int:
        R, C = board.rows, board.columns
        goal = self._goal_orders(R, C)
        s = board.cells
        column_first: List[int] = [s[r * C + c] for c in range(C) for r in range(R)]

        vertical = moves_for_inversions(count_inversions(s, goal.row_rank), C)
        horizontal = moves_for_inversions(count_inversions(column_first, goal.column_rank), R)
        return vertical + horizontal
