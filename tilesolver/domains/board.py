from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple
import random

Cells = Tuple[int, ...]


class Move(Enum):
    """Direction the blank travels."""
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    def opposite(self) -> "Move":
        return _OPPOSITE[self]

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    def __str__(self) -> str:
        return self.value


_OPPOSITE = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

_OFFSETS = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}

ALL_MOVES: Tuple[Move, ...] = (Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT)


def moves_to_string(moves: Iterable[Move]) -> str:
    return "".join(m.value for m in moves)


def moves_from_string(s: str) -> List[Move]:
    return [Move(ch) for ch in s.upper()]


class Board:
    """
    Generic R×C sliding-tile board (0 is blank), stored flat in row-major order.
    The caller guarantees that cells hold every value of [0, rows*columns) once.
    """
    __slots__ = ("rows", "columns", "cells", "_blank")

    def __init__(self, rows: int, columns: int, cells: Sequence[int]):
        assert rows >= 1 and columns >= 1
        assert len(cells) == rows * columns
        self.rows = rows
        self.columns = columns
        self.cells: List[int] = list(cells)
        self._blank: Optional[int] = None

    # ---------- construction ----------
    @classmethod
    def solved(cls, rows: int, columns: int) -> "Board":
        size = rows * columns
        return cls(rows, columns, list(range(1, size)) + [0])

    @classmethod
    def from_rows(cls, grid: Sequence[Sequence[int]]) -> "Board":
        rows = len(grid)
        columns = len(grid[0]) if rows else 0
        return cls(rows, columns, [v for row in grid for v in row])

    def clone(self) -> "Board":
        other = Board.__new__(Board)
        other.rows = self.rows
        other.columns = self.columns
        other.cells = self.cells[:]
        other._blank = self._blank
        return other

    # ---------- queries ----------
    def dimensions(self) -> Tuple[int, int]:
        return self.rows, self.columns

    def at(self, row: int, column: int) -> int:
        return self.cells[row * self.columns + column]

    def _blank_index(self) -> int:
        if self._blank is None or self.cells[self._blank] != 0:
            try:
                self._blank = self.cells.index(0)
            except ValueError:
                raise ValueError("Cell list does not contain the empty cell") from None
        return self._blank

    def empty_cell_pos(self) -> Tuple[int, int]:
        return divmod(self._blank_index(), self.columns)

    def is_solved(self) -> bool:
        cells = self.cells
        # blank is rarely in the corner, so check it first
        if cells[-1] != 0:
            return False
        for expected, actual in enumerate(cells[:-1], start=1):
            if actual != expected:
                return False
        return True

    def can_move(self, move: Move) -> bool:
        row, column = self.empty_cell_pos()
        if move is Move.UP:
            return row > 0
        if move is Move.DOWN:
            return row < self.rows - 1
        if move is Move.LEFT:
            return column > 0
        return column < self.columns - 1

    # ---------- transitions ----------
    def exec_move(self, move: Move) -> None:
        """Swap the blank with its neighbour in `move` direction. Check `can_move` first."""
        if not self.can_move(move):
            raise ValueError(f"Board cannot execute move {move}")
        z = self._blank_index()
        dr, dc = move.offset
        target = z + dr * self.columns + dc
        self.cells[z] = self.cells[target]
        self.cells[target] = 0
        self._blank = target

    # ---------- value semantics ----------
    def key(self) -> Cells:
        return tuple(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self.rows, self.columns) == (other.rows, other.columns) and self.cells == other.cells

    def __hash__(self) -> int:
        return hash((self.rows, self.columns, tuple(self.cells)))

    def __repr__(self) -> str:
        return f"Board({self.rows}, {self.columns}, {self.cells!r})"


# ---------- instance generation ----------
def scramble(board: Board, depth: int, seed: int) -> Board:
    """Random walk of `depth` blank moves from `board` with no immediate backtrack."""
    rng = random.Random(seed)
    out = board.clone()
    last: Optional[Move] = None
    for _ in range(depth):
        cand = [m for m in ALL_MOVES if out.can_move(m)]
        if last is not None and last.opposite() in cand and len(cand) > 1:
            cand.remove(last.opposite())
        m = rng.choice(cand)
        out.exec_move(m)
        last = m
    return out


def replay(board: Board, moves: Iterable[Move]) -> Board:
    """Apply `moves` to a copy of `board` and return it."""
    out = board.clone()
    for m in moves:
        out.exec_move(m)
    return out
