"""
Simplified Memory-bounded A* (SMA*).

All nodes held in memory form one search tree. The open list holds the tree's
leaves plus any interior node that still has a successor not in memory, sorted
by (f ascending, deeper first). Each pop generates one successor. When memory
is full the worst leaf (highest f, then shallowest) is dropped and its f is
remembered by its parent, so the parent can regenerate it later and its cost
still accounts for it.
"""
from __future__ import annotations
from bisect import bisect_left, insort
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import itertools
import logging
import math

from tilesolver.domains.board import Board, Move
from tilesolver.heuristics.base import Heuristic
from tilesolver.search.base import Solver
from tilesolver.search.errors import AlgorithmError, SearchOutcome
from tilesolver.search.movegen import MoveGenerator, MoveSequence

logger = logging.getLogger(__name__)

Path = Tuple[Move, ...]


@dataclass(eq=False)
class SMANode:
    board: Board
    path: Path
    parent: Optional["SMANode"]
    seq: Optional[MoveSequence]
    depth: int
    h: int
    successors: List[MoveSequence]
    f: float = 0
    next_index: int = 0
    children: Dict[MoveSequence, "SMANode"] = field(default_factory=dict)
    forgotten: Dict[MoveSequence, float] = field(default_factory=dict)
    key: Optional[tuple] = None  # (f, -depth, uid) while queued

    @property
    def g(self) -> int:
        return len(self.path)

    @property
    def best_forgotten_child(self) -> float:
        return min(self.forgotten.values(), default=math.inf)

    def fully_generated(self) -> bool:
        return self.next_index >= len(self.successors)

    def has_missing_successor(self) -> bool:
        return not self.fully_generated() or bool(self.forgotten)


class SMAStarSolver(Solver):
    """
    SMA* with an optional memory limit counted in nodes.

    With enough memory for the optimal path it returns a shortest solution.
    When the limit cannot hold any solution path, solve() raises AlgorithmError
    (MEMORY_EXHAUSTED) instead of returning a longer or invalid path.
    """
    name = "SMA*"

    def __init__(
        self,
        board: Board,
        heuristic: Heuristic,
        memory_limit: Optional[int] = None,
        move_generator: Optional[MoveGenerator] = None,
    ):
        if memory_limit is not None and memory_limit < 1:
            raise ValueError("memory_limit must be at least 1")
        super().__init__(board)
        self.heuristic = heuristic
        self.memory_limit = memory_limit
        self.move_generator = move_generator or MoveGenerator()
        self.open: List[tuple] = []
        self.resident = 0
        self._uid = itertools.count()
        self.stats["evicted"] = 0

    # ---------- open list ----------
    def _insert(self, node: SMANode) -> None:
        node.key = (node.f, -node.depth, next(self._uid))
        insort(self.open, node.key + (node,))

    def _remove(self, node: SMANode) -> None:
        i = bisect_left(self.open, node.key)
        del self.open[i]
        node.key = None

    def _set_f(self, node: SMANode, f: float) -> None:
        if node.key is None:
            node.f = f
            return
        self._remove(node)
        node.f = f
        self._insert(node)

    # ---------- tree ----------
    def _make_node(self, board: Board, parent: Optional[SMANode], seq: Optional[MoveSequence]) -> SMANode:
        path: Path = parent.path + seq if parent is not None else ()
        return SMANode(
            board=board,
            path=path,
            parent=parent,
            seq=seq,
            depth=parent.depth + 1 if parent is not None else 0,
            h=self.heuristic.evaluate(board),
            successors=self.move_generator.generate_moves(board, path[-1] if path else None),
        )

    def _next_successor(self, node: SMANode) -> Optional[Tuple[MoveSequence, float]]:
        """Next successor not in memory, with the lowest f it may be given."""
        if not node.fully_generated():
            seq = node.successors[node.next_index]
            node.next_index += 1
            return seq, node.f
        if node.forgotten:
            seq = min(node.forgotten, key=node.forgotten.__getitem__)
            return seq, node.forgotten.pop(seq)
        return None

    def _backup(self, node: Optional[SMANode]) -> None:
        """Once all successors were generated, a node's f is the best f among them."""
        while node is not None and node.fully_generated():
            costs = [c.f for c in node.children.values()]
            costs.extend(node.forgotten.values())
            new_f = min(costs, default=math.inf)
            if new_f == node.f:
                break
            self._set_f(node, new_f)
            node = node.parent

    def _evict(self, expanding: SMANode) -> bool:
        """Drop the worst queued leaf; False when nothing can be dropped."""
        for i in range(len(self.open) - 1, -1, -1):
            victim = self.open[i][-1]
            if victim.children or victim.parent is None:
                continue
            del self.open[i]
            victim.key = None
            parent = victim.parent
            del parent.children[victim.seq]
            parent.forgotten[victim.seq] = min(parent.forgotten.get(victim.seq, math.inf), victim.f)
            self.resident -= 1
            self.stats["evicted"] += 1
            logger.debug(f"{self.name}: evicted node at depth {victim.depth} with f={victim.f}")
            if parent.key is None and parent is not expanding:
                self._insert(parent)
            return True
        return False

    # ---------- search ----------
    def _search(self) -> List[Move]:
        limit = self.memory_limit
        root = self._make_node(self.board.clone(), None, None)
        root.f = root.h if root.successors or root.board.is_solved() else math.inf
        self._insert(root)
        self.resident = 1

        while self.open:
            self._note_open(self.resident)
            node = self.open.pop(0)[-1]
            node.key = None
            if node.f == math.inf:
                outcome = SearchOutcome.MEMORY_EXHAUSTED if limit is not None else SearchOutcome.NOT_FOUND
                raise AlgorithmError(outcome, self.name, f"memory limit {limit}" if limit else None)
            if node.board.is_solved():
                self.stats["bound_final"] = node.f
                return list(node.path)

            nxt = self._next_successor(node)
            if nxt is None:
                continue
            seq, floor = nxt

            board = node.board.clone()
            for m in seq:
                board.exec_move(m)
            child = self._make_node(board, node, seq)
            self.stats["generated"] += 1
            if board.is_solved():
                child.f = child.g
            elif (limit is not None and child.depth >= limit - 1) or not child.successors:
                # no room in memory (or no move) to continue below this child
                child.f = math.inf
            else:
                child.f = max(node.f, floor, child.g + child.h)

            if limit is not None and self.resident >= limit and not self._evict(node):
                node.forgotten[seq] = math.inf
            else:
                node.children[seq] = child
                self._insert(child)
                self.resident += 1
                self.stats["expanded"] += 1
                self._note_depth(child.depth)

            self._backup(node)
            if node.has_missing_successor():
                self._insert(node)

        raise AlgorithmError(SearchOutcome.NOT_FOUND, self.name)
