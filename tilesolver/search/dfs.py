from __future__ import annotations
import logging
from typing import List, Optional

from tilesolver.domains.board import Board, Move
from tilesolver.search.base import Solver
from tilesolver.search.errors import AlgorithmError, SearchOutcome
from tilesolver.search.movegen import MoveGenerator, apply_move_sequence, undo_move_sequence
from tilesolver.search.visited import VisitedPositions

logger = logging.getLogger(__name__)

# frames kept on the explicit stack before a branch is abandoned
DEFAULT_STACK_LIMIT = 1_000_000


class DFSSolver(Solver):
    """
    Depth-first search on one board mutated in place.

    The recursion is unrolled onto an explicit stack of (move iterator, sequence
    applied from this frame) entries; popping a frame undoes its sequence.
    A state seen before is not expanded again. Not necessarily shortest.
    """
    name = "DFS"

    def __init__(
        self,
        board: Board,
        move_generator: Optional[MoveGenerator] = None,
        stack_limit: Optional[int] = DEFAULT_STACK_LIMIT,
    ):
        super().__init__(board)
        self.move_generator = move_generator or MoveGenerator()
        self.visited: Optional[VisitedPositions] = VisitedPositions()
        self.stack_limit = stack_limit
        self.path: List[Move] = []
        self._board = board.clone()

    def _enter(self, depth: int, max_depth: Optional[int]) -> Optional[SearchOutcome]:
        """Classify the current board; None means it should be expanded."""
        board = self._board
        if board.is_solved():
            return SearchOutcome.FOUND
        if self.visited is not None and not self.visited.visit(board):
            self.stats["duplicates"] += 1
            return SearchOutcome.STATE_ALREADY_VISITED
        if max_depth is not None and depth >= max_depth:
            return SearchOutcome.MAX_DEPTH_REACHED
        if self.stack_limit is not None and depth >= self.stack_limit:
            logger.debug(f"{self.name} reached stack limit at depth {depth}, backtracking")
            return SearchOutcome.MAX_DEPTH_REACHED
        return None

    def _run(self, max_depth: Optional[int] = None) -> SearchOutcome:
        """
        One depth-first pass. Returns FOUND with self.path holding the solution,
        MAX_DEPTH_REACHED if some branch was cut by a depth bound, otherwise
        STATE_EXHAUSTED. On failure the board and path are back at the start.
        """
        board, path = self._board, self.path
        gen = self.move_generator.generate_moves

        outcome = self._enter(0, max_depth)
        if outcome is not None:
            return outcome

        cut = False
        stack: List[list] = [[iter(gen(board, None)), None]]
        self.stats["expanded"] += 1
        while stack:
            frame = stack[-1]
            if frame[1] is not None:
                undo_move_sequence(board, path, frame[1])
                frame[1] = None

            seq = next(frame[0], None)
            if seq is None:
                # every move from this state failed: StateExhausted, backtrack
                stack.pop()
                continue

            apply_move_sequence(board, path, seq)
            frame[1] = seq
            self.stats["generated"] += 1

            outcome = self._enter(len(stack), max_depth)
            if outcome is SearchOutcome.FOUND:
                return outcome
            if outcome is None:
                self.stats["expanded"] += 1
                stack.append([iter(gen(board, path[-1])), None])
                self._note_depth(len(stack))
            elif outcome is SearchOutcome.MAX_DEPTH_REACHED:
                cut = True

        return SearchOutcome.MAX_DEPTH_REACHED if cut else SearchOutcome.STATE_EXHAUSTED

    def _search(self) -> List[Move]:
        outcome = self._run()
        if outcome is not SearchOutcome.FOUND:
            raise AlgorithmError(outcome, self.name)
        return list(self.path)


class IncrementalDFSSolver(DFSSolver):
    """
    Iterative deepening: DFS with a depth cap of 1, 2, ... move sequences.

    Re-visit pruning is off because a state may be reached again at a shallower
    depth; the depth cap alone bounds each pass. Returns a shortest solution.
    """
    name = "IDFS"

    def __init__(
        self,
        board: Board,
        move_generator: Optional[MoveGenerator] = None,
        depth_limit: Optional[int] = None,
    ):
        super().__init__(board, move_generator, stack_limit=None)
        self.visited = None
        self.depth_limit = depth_limit

    def _search(self) -> List[Move]:
        max_depth = 1
        while True:
            if self.visited is not None:
                self.visited.clear()
            outcome = self._run(max_depth)
            if outcome is SearchOutcome.FOUND:
                self.stats["bound_final"] = max_depth
                return list(self.path)
            if outcome is not SearchOutcome.MAX_DEPTH_REACHED:
                raise AlgorithmError(outcome, self.name)
            max_depth += 1
            if self.depth_limit is not None and max_depth > self.depth_limit:
                raise AlgorithmError(
                    SearchOutcome.MAX_DEPTH_REACHED, self.name, f"depth limit {self.depth_limit}"
                )
            logger.debug(f"Increasing {self.name} depth to {max_depth}")
