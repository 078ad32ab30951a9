"""
Move generation shared by all solvers.

The parity of the blank's distance to its goal cell fixes the parity of every
solution length. When it is odd the generator emits single moves; when it is
even it emits pairs, so every generated sequence keeps the search on
parity-compatible states and the solved board can only appear at a sequence
boundary.
"""
from __future__ import annotations
import random
from typing import List, MutableSequence, Optional, Sequence, Tuple

from tilesolver.domains.board import ALL_MOVES, Board, Move
from tilesolver.domains.parity import Parity, required_moves_parity

MoveSequence = Tuple[Move, ...]

DEFAULT_ORDER: Tuple[Move, ...] = ALL_MOVES
ORDER_LEN = 4


class SearchOrder:
    """Order in which directions are tried: a fixed permutation, or shuffled per call."""

    def __init__(self, moves: Optional[Sequence[Move]] = DEFAULT_ORDER, seed: Optional[int] = None):
        if moves is not None:
            moves = tuple(moves)
            if len(moves) != ORDER_LEN or set(moves) != set(ALL_MOVES):
                raise ValueError(f"Search order must be a permutation of {ALL_MOVES}")
        self._moves = moves
        self._rng = random.Random(seed) if moves is None else None

    @classmethod
    def default(cls) -> "SearchOrder":
        return cls(DEFAULT_ORDER)

    @classmethod
    def random(cls, seed: Optional[int] = None) -> "SearchOrder":
        return cls(None, seed=seed)

    @property
    def is_random(self) -> bool:
        return self._moves is None

    def moves(self) -> Tuple[Move, ...]:
        if self._moves is not None:
            return self._moves
        shuffled = list(ALL_MOVES)
        self._rng.shuffle(shuffled)
        return tuple(shuffled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchOrder):
            return NotImplemented
        return self._moves == other._moves if not (self.is_random or other.is_random) else self is other

    def __hash__(self) -> int:
        return hash(self._moves) if self._moves is not None else id(self)

    def __str__(self) -> str:
        return "R" if self._moves is None else "".join(m.value for m in self._moves)

    def __repr__(self) -> str:
        return f"SearchOrder({str(self)!r})"


def parse_search_order(s: str, seed: Optional[int] = None) -> SearchOrder:
    """'R' selects a random order, otherwise 4 distinct characters out of U/D/L/R."""
    text = s.strip().upper()
    if text == "R":
        return SearchOrder.random(seed)
    if len(text) != ORDER_LEN:
        raise ValueError(f"Order must be {ORDER_LEN} characters")
    order: List[Move] = []
    for ch in text:
        try:
            m = Move(ch)
        except ValueError:
            raise ValueError(f"Invalid character {ch}") from None
        if m in order:
            raise ValueError(f"Duplicate move {ch}")
        order.append(m)
    return SearchOrder(order)


class MoveGenerator:
    def __init__(self, order: Optional[SearchOrder] = None):
        self.order = order if order is not None else SearchOrder.default()

    def generate_moves(self, board: Board, previous: Optional[Move] = None) -> List[MoveSequence]:
        R, C = board.rows, board.columns
        row, col = board.empty_cell_pos()
        order = self.order.moves()
        singles = required_moves_parity(board) is Parity.ODD
        out: List[MoveSequence] = []
        for first in order:
            if previous is not None and first is previous.opposite():
                continue
            dr, dc = first.offset
            r1, c1 = row + dr, col + dc
            if not (0 <= r1 < R and 0 <= c1 < C):
                continue
            if singles:
                out.append((first,))
                continue
            for second in order:
                if second is first.opposite():
                    continue
                dr, dc = second.offset
                if 0 <= r1 + dr < R and 0 <= c1 + dc < C:
                    out.append((first, second))
        return out

    def __repr__(self) -> str:
        return f"MoveGenerator({self.order!r})"


def apply_move_sequence(board: Board, path: MutableSequence[Move], seq: MoveSequence) -> None:
    for m in seq:
        board.exec_move(m)
        path.append(m)


def undo_move_sequence(board: Board, path: MutableSequence[Move], seq: MoveSequence) -> None:
    for m in reversed(seq):
        board.exec_move(m.opposite())
        path.pop()
