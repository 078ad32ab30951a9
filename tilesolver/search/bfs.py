from __future__ import annotations
from collections import deque
from typing import Deque, List, Optional, Tuple

from tilesolver.domains.board import Board, Move
from tilesolver.search.base import Solver
from tilesolver.search.errors import AlgorithmError, SearchOutcome
from tilesolver.search.movegen import MoveGenerator
from tilesolver.search.visited import VisitedPositions

Path = Tuple[Move, ...]


class BFSSolver(Solver):
    """
    Level-order search over (board, path) pairs.

    Every level adds the same number of blank moves to each path (the move
    generator keeps singles and pairs aligned with the goal parity), so the
    first solved board popped has a shortest path.
    """
    name = "BFS"

    def __init__(self, board: Board, move_generator: Optional[MoveGenerator] = None):
        super().__init__(board)
        self.move_generator = move_generator or MoveGenerator()
        self.visited = VisitedPositions()
        self.queue: Deque[Tuple[Board, Path]] = deque()

    def _search(self) -> List[Move]:
        q = self.queue
        q.append((self.board.clone(), ()))
        gen = self.move_generator.generate_moves
        while q:
            self._note_open(len(q))
            board, path = q.popleft()
            if board.is_solved():
                return list(path)
            if not self.visited.visit(board):
                self.stats["duplicates"] += 1
                continue
            self.stats["expanded"] += 1
            for seq in gen(board, path[-1] if path else None):
                child = board.clone()
                for m in seq:
                    child.exec_move(m)
                q.append((child, path + seq))
                self.stats["generated"] += 1
        raise AlgorithmError(SearchOutcome.STATE_EXHAUSTED, self.name)
