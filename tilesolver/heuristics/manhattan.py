from __future__ import annotations

from tilesolver.domains.board import Board
from tilesolver.heuristics.base import Heuristic, goal_position


class ManhattanDistance(Heuristic):
    """Sum of Manhattan distances of every tile to its goal cell (blank ignored)."""
    name = "manhattan_distance"
    short_name = "MD"

    def evaluate(self, board: Board) -> int:
        C = board.columns
        dist = 0
        for idx, tile in enumerate(board.cells):
            if tile == 0:
                continue
            r, c = divmod(idx, C)
            gr, gc = goal_position(tile, C)
            dist += abs(r - gr) + abs(c - gc)
        return dist
