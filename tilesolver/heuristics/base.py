"""
Heuristic capability shared by the informed solvers.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Tuple

from tilesolver.domains.board import Board


class Heuristic(ABC):
    """
    Lower bound on the number of blank moves still needed to solve a board.

    Implementations must be admissible (never overestimate), otherwise A* and
    IDA* lose their optimality guarantee. Instances are shared by every search
    node of a solve and must not change observable state between calls.

    Attributes:
        name: Long identifier used by the registry and the CLI
        short_name: Two-letter identifier
    """
    name: str = "base"
    short_name: str = ""

    @abstractmethod
    def evaluate(self, board: Board) -> int:
        """Return a non-negative lower bound for `board`."""

    def __call__(self, board: Board) -> int:
        return self.evaluate(board)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def goal_position(tile: int, columns: int) -> Tuple[int, int]:
    """Goal (row, column) of a non-blank tile."""
    return divmod(tile - 1, columns)
