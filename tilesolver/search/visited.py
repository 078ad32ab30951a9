from __future__ import annotations
from typing import Set

from tilesolver.domains.board import Board, Cells


class VisitedPositions:
    """Set of board states already expanded during one solve, keyed by cell content."""

    def __init__(self) -> None:
        self._seen: Set[Cells] = set()

    def is_visited(self, board: Board) -> bool:
        return board.key() in self._seen

    def mark_visited(self, board: Board) -> None:
        self._seen.add(board.key())

    def visit(self, board: Board) -> bool:
        """Mark `board` and return True if it was not seen before."""
        key = board.key()
        if key in self._seen:
            return False
        self._seen.add(key)
        return True

    def clear(self) -> None:
        self._seen.clear()

    def __contains__(self, board: Board) -> bool:
        return self.is_visited(board)

    def __len__(self) -> int:
        return len(self._seen)
