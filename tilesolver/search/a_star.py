from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from abc import abstractmethod
import heapq
import itertools
import logging

from tilesolver.domains.board import Board, Move
from tilesolver.heuristics.base import Heuristic
from tilesolver.search.base import Solver
from tilesolver.search.errors import AlgorithmError, SearchOutcome
from tilesolver.search.movegen import MoveGenerator
from tilesolver.search.visited import VisitedPositions

logger = logging.getLogger(__name__)

Path = Tuple[Move, ...]
TIE_BREAKS = ("h", "g", "fifo", "lifo")


@dataclass
class SearchNode:
    """Board snapshot with the path that produced it; the heuristic handle is shared."""
    board: Board
    path: Path
    heuristic: Heuristic = field(repr=False)
    h: int = field(init=False)

    def __post_init__(self):
        self.h = self.heuristic.evaluate(self.board)

    @property
    def g(self) -> int:
        return len(self.path)

    @property
    def f(self) -> int:
        return self.g + self.h

    def child(self, seq: Tuple[Move, ...]) -> "SearchNode":
        board = self.board.clone()
        for m in seq:
            board.exec_move(m)
        return SearchNode(board, self.path + seq, self.heuristic)


class _HeuristicSolver(Solver):
    """Tree search driven by a binary heap; subclasses pick the ordering key."""

    def __init__(self, board: Board, heuristic: Heuristic, move_generator: Optional[MoveGenerator] = None):
        super().__init__(board)
        self.heuristic = heuristic
        self.move_generator = move_generator or MoveGenerator()
        self.visited: Optional[VisitedPositions] = None
        self.queue: List[Tuple[tuple, SearchNode]] = []
        self._counter = itertools.count()

    @abstractmethod
    def _priority(self, node: SearchNode) -> tuple:
        """Heap key of `node`; must be unique per push."""

    @abstractmethod
    def _cost(self, node: SearchNode) -> int:
        """Cost whose running maximum is logged."""

    def _push(self, node: SearchNode) -> None:
        heapq.heappush(self.queue, (self._priority(node), node))

    def _search(self) -> List[Move]:
        self._push(SearchNode(self.board.clone(), (), self.heuristic))
        gen = self.move_generator.generate_moves
        max_cost = 0
        while self.queue:
            self._note_open(len(self.queue))
            _, node = heapq.heappop(self.queue)
            cost = self._cost(node)
            if cost > max_cost:
                max_cost = cost
                self.stats["bound_final"] = cost
                logger.debug(f"{self.name}: evaluating position with cost {cost}")
            if node.board.is_solved():
                return list(node.path)
            if self.visited is not None and not self.visited.visit(node.board):
                self.stats["duplicates"] += 1
                continue
            self.stats["expanded"] += 1
            for seq in gen(node.board, node.path[-1] if node.path else None):
                self._push(node.child(seq))
                self.stats["generated"] += 1
        raise AlgorithmError(SearchOutcome.STATE_EXHAUSTED, self.name)


class AStarSolver(_HeuristicSolver):
    """
    A* ordered by f = g + h.

    The search runs on a tree (no closed set), so duplicates may be expanded
    again, and optimality only needs an admissible heuristic.
    tie_break orders equal f by: "h" lower h first, "g" deeper first,
    "fifo" insertion order, "lifo" reverse insertion order.
    """
    name = "A*"

    def __init__(
        self,
        board: Board,
        heuristic: Heuristic,
        move_generator: Optional[MoveGenerator] = None,
        tie_break: str = "h",
    ):
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"tie_break must be one of {TIE_BREAKS}")
        super().__init__(board, heuristic, move_generator)
        self.tie_break = tie_break
        self.stats["tie_break"] = tie_break

    def _priority(self, node: SearchNode) -> tuple:
        f, ctr = node.f, next(self._counter)
        if self.tie_break == "h":    return (f, node.h, ctr)
        if self.tie_break == "g":    return (f, -node.g, ctr)
        if self.tie_break == "fifo": return (f, 0, ctr)
        return (f, 0, -ctr)

    def _cost(self, node: SearchNode) -> int:
        return node.f


class BestFirstSolver(_HeuristicSolver):
    """Greedy best-first search ordered by h alone; not optimal. Repeated states are skipped."""
    name = "BestFS"

    def __init__(self, board: Board, heuristic: Heuristic, move_generator: Optional[MoveGenerator] = None):
        super().__init__(board, heuristic, move_generator)
        self.visited = VisitedPositions()

    def _priority(self, node: SearchNode) -> tuple:
        return (node.h, next(self._counter))

    def _cost(self, node: SearchNode) -> int:
        return node.h
