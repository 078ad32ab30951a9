"""
Base Solver Module - Abstract base class for search strategies.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from time import perf_counter
from typing import Any, Dict, List

from tilesolver.domains.board import Board, Move
from tilesolver.domains.parity import is_solvable
from tilesolver.search.errors import AlgorithmError, UnsolvableBoard

logger = logging.getLogger(__name__)


class Solver(ABC):
    """
    Abstract base class for all search strategies.

    A solver is built around one board and is single-use: solve() consults the
    solvability oracle, runs the strategy and returns the move list. Subclasses
    implement _search() and define the `name` class attribute.

    Attributes:
        name: Short identifier used in logs and experiment CSVs
        stats: Instrumentation filled while solving (expanded, generated,
               duplicates, peak_open, peak_recursion, bound_final, time,
               termination)
    """
    name: str = "base"

    def __init__(self, board: Board):
        self.board = board
        self._used = False
        self.stats: Dict[str, Any] = {
            "algorithm": self.name,
            "expanded": 0,
            "generated": 0,
            "duplicates": 0,
            "peak_open": 0,
            "peak_recursion": 0,
            "bound_final": "",
            "time": 0.0,
            "termination": "",
        }

    @abstractmethod
    def _search(self) -> List[Move]:
        """Run the strategy on a board already known to be solvable."""

    def solve(self) -> List[Move]:
        """
        Find a move list that solves the board.

        Raises:
            UnsolvableBoard: The board has the wrong parity, no search was run
            AlgorithmError: The strategy gave up (see its `outcome`)
            RuntimeError: solve() was already called on this solver
        """
        if self._used:
            raise RuntimeError(f"{type(self).__name__} is single-use, build a new solver")
        self._used = True

        t0 = perf_counter()
        try:
            if not is_solvable(self.board):
                self.stats["termination"] = "unsolvable"
                raise UnsolvableBoard()
            logger.info(f"{self.name}: solving {self.board.rows}x{self.board.columns} board")
            path = self._search()
        except AlgorithmError as e:
            self.stats["termination"] = e.outcome.name.lower()
            raise
        finally:
            self.stats["time"] = perf_counter() - t0

        self.stats["termination"] = "ok"
        self.stats["g"] = len(path)
        logger.info(
            f"{self.name}: found {len(path)} moves in {self.stats['time']:.3f}s "
            f"({self.stats['expanded']} expanded)"
        )
        return path

    def _note_open(self, size: int) -> None:
        if size > self.stats["peak_open"]:
            self.stats["peak_open"] = size

    def _note_depth(self, depth: int) -> None:
        if depth > self.stats["peak_recursion"]:
            self.stats["peak_recursion"] = depth
