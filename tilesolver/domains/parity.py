from __future__ import annotations
from enum import Enum
from typing import Sequence

from tilesolver.domains.board import Board


class Parity(Enum):
    EVEN = 0
    ODD = 1

    @classmethod
    def of(cls, value: int) -> "Parity":
        return cls.ODD if value % 2 else cls.EVEN

    def opposite(self) -> "Parity":
        return Parity.EVEN if self is Parity.ODD else Parity.ODD

    def __add__(self, other: "Parity") -> "Parity":
        if not isinstance(other, Parity):
            return NotImplemented
        return Parity.EVEN if self is other else Parity.ODD


def permutation_parity(permutation: Sequence[int]) -> Parity:
    """
    Parity of a permutation of range(len(permutation)), read as i -> permutation[i].
    A cycle of length L is a product of L-1 transpositions.
    """
    visited = bytearray(len(permutation))
    parity = Parity.EVEN
    for start in range(len(permutation)):
        length = 0
        element = start
        while not visited[element]:
            visited[element] = 1
            element = permutation[element]
            length += 1
        if length > 1:
            parity = parity + Parity.of(length - 1)
    return parity


def required_moves_parity(board: Board) -> Parity:
    """Parity of the taxicab distance from the blank to the bottom-right corner."""
    row, column = board.empty_cell_pos()
    return Parity.of((board.rows - 1 - row) + (board.columns - 1 - column))


def solved_board_parity(board: Board) -> Parity:
    # solved board is one big cycle, so its parity is opposite to its size
    return Parity.of(board.rows * board.columns).opposite()


def is_solvable(board: Board) -> bool:
    """Every blank move flips both the permutation parity and the blank distance parity."""
    return permutation_parity(board.cells) + solved_board_parity(board) == required_moves_parity(board)
