"""
Text form of a board:

    3 3
    1 2 3
    4 0 6
    7 5 8

The first line holds `rows columns`, then `rows` lines of `columns` integers.
"""
from __future__ import annotations
from collections import Counter
from typing import Iterable, List

from tilesolver.domains.board import Board


class BoardCreationError(ValueError):
    """Input text does not describe a valid board."""


class InvalidHeader(BoardCreationError):
    def __init__(self, detail: str = "The size header is invalid or missing"):
        super().__init__(detail)


class CellParseError(BoardCreationError):
    def __init__(self, token: str):
        super().__init__(f"Error while parsing board: {token!r} is not a non-negative integer")
        self.token = token


class MissingCells(BoardCreationError):
    def __init__(self, detail: str = "The board does not contain all of the required cell values"):
        super().__init__(detail)


class DuplicateCells(BoardCreationError):
    def __init__(self, value: int):
        super().__init__(f"The board contains multiple cells with the number {value}")
        self.value = value


def _to_int(token: str) -> int:
    if not token.isdigit():
        raise CellParseError(token)
    return int(token)


def parse_lines(lines: Iterable[str]) -> Board:
    it = (ln for ln in lines if ln.strip())
    header = next(it, None)
    if header is None:
        raise InvalidHeader()
    parts = header.split()
    if len(parts) != 2:
        raise InvalidHeader()
    try:
        rows, columns = (_to_int(p) for p in parts)
    except CellParseError:
        raise InvalidHeader() from None
    if rows < 1 or columns < 1:
        raise InvalidHeader(f"Board dimensions must be positive, got {rows}x{columns}")

    cells: List[int] = []
    for r in range(rows):
        line = next(it, None)
        if line is None:
            raise MissingCells(f"Expected {rows} rows, got {r}")
        values = [_to_int(tok) for tok in line.split()]
        if len(values) < columns:
            raise MissingCells(f"Row {r + 1} has {len(values)} cells, expected {columns}")
        cells.extend(values[:columns])

    counts = Counter(cells)
    for value, n in counts.items():
        if n > 1:
            raise DuplicateCells(value)
    if any(v not in counts for v in range(rows * columns)):
        raise MissingCells()
    return Board(rows, columns, cells)


def parse_board(text: str) -> Board:
    return parse_lines(text.splitlines())


def format_board(board: Board) -> str:
    width = len(str(board.rows * board.columns - 1))
    out = [f"{board.rows} {board.columns}"]
    for r in range(board.rows):
        out.append(" ".join(str(board.at(r, c)).rjust(width) for c in range(board.columns)))
    return "\n".join(out) + "\n"
