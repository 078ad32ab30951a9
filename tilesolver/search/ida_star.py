from __future__ import annotations
from typing import List, Optional, Union
import logging
import math
import sys

from tilesolver.domains.board import Board, Move
from tilesolver.heuristics.base import Heuristic
from tilesolver.search.base import Solver
from tilesolver.search.errors import AlgorithmError, SearchOutcome
from tilesolver.search.movegen import MoveGenerator, apply_move_sequence, undo_move_sequence

logger = logging.getLogger(__name__)

# interpreter frames left free for the caller and the solver machinery
RECURSION_MARGIN = 100

FOUND = SearchOutcome.FOUND


class IDAStarSolver(Solver):
    """
    IDA*: depth-first search bounded by f = g + h, re-run with the bound raised
    to the smallest f that exceeded it. One board is mutated and restored on
    backtrack. Returns a shortest solution for an admissible heuristic.
    """
    name = "IDA*"

    def __init__(self, board: Board, heuristic: Heuristic, move_generator: Optional[MoveGenerator] = None):
        super().__init__(board)
        self.heuristic = heuristic
        self.move_generator = move_generator or MoveGenerator()
        self.path: List[Move] = []
        self._board = board.clone()
        self._budget = max(1, sys.getrecursionlimit() - RECURSION_MARGIN)
        self._cut = False

    def _dfs(self, depth: int, bound: int) -> Union[SearchOutcome, float]:
        """
        Returns:
            FOUND        goal reached, self.path holds the solution
            f (int)      smallest f above `bound` in this subtree
            math.inf     nothing left to explore below this node
        """
        board, path = self._board, self.path
        f = len(path) + self.heuristic.evaluate(board)
        if f > bound:
            return f
        if board.is_solved():
            return FOUND
        if depth >= self._budget:
            if not self._cut:
                logger.debug(f"{self.name} reached recursion budget at depth {depth}, backtracking")
            self._cut = True
            return math.inf

        self.stats["expanded"] += 1
        self._note_depth(depth + 1)
        min_next = math.inf
        for seq in self.move_generator.generate_moves(board, path[-1] if path else None):
            apply_move_sequence(board, path, seq)
            self.stats["generated"] += 1
            t = self._dfs(depth + 1, bound)
            if t is FOUND:
                return FOUND
            if t < min_next:
                min_next = t
            undo_move_sequence(board, path, seq)
        return min_next

    def _search(self) -> List[Move]:
        bound = self.heuristic.evaluate(self._board)
        while True:
            self.stats["bound_final"] = bound
            t = self._dfs(0, bound)
            if t is FOUND:
                return list(self.path)
            if t == math.inf:
                outcome = SearchOutcome.MAX_DEPTH_REACHED if self._cut else SearchOutcome.NOT_FOUND
                raise AlgorithmError(outcome, self.name)
            bound = int(t)
            logger.debug(f"Increasing f-cost bound to {bound}")
