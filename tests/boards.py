"""Sample boards shared by the test modules, with their shortest solution lengths."""

from __future__ import annotations

from tilesolver.domains.board import Board, Move, replay
from tilesolver.domains.parsing import parse_board

SOLVED_3x3 = "3 3\n1 2 3\n4 5 6\n7 8 0\n"
ONE_MOVE = "3 3\n1 2 3\n4 5 6\n7 0 8\n"
TWO_MOVES = "3 3\n1 2 3\n4 5 6\n0 7 8\n"
THREE_MOVES = "3 3\n1 2 3\n0 4 6\n7 5 8\n"
FIVE_MOVES = "3 3\n1 2 3\n7 4 5\n8 0 6\n"
SEVEN_MOVES = "3 3\n1 2 3\n7 5 0\n8 4 6\n"
RECT_ONE_MOVE = "3 4\n1 2 3 4\n5 6 7 8\n9 10 0 11\n"
CENTER_TWO_MOVES = "3 3\n1 2 3\n4 0 5\n7 8 6\n"
SHIFTED_FIVE_MOVES = "3 3\n4 1 3\n0 2 5\n7 8 6\n"
SHIFTED_SEVEN_MOVES = "3 3\n4 1 3\n7 2 5\n8 0 6\n"

UNSOLVABLE_3x3 = "3 3\n1 2 3\n4 5 6\n8 7 0\n"
UNSOLVABLE_4x4 = "4 4\n1 2 3 4\n5 6 7 8\n9 10 11 12\n13 15 14 0\n"
SOLVABLE_4x4 = "4 4\n1 2 3 4\n5 6 7 8\n9 10 11 12\n13 14 0 15\n"

# (text, shortest solution length)
KNOWN_LENGTHS = [
    (ONE_MOVE, 1),
    (TWO_MOVES, 2),
    (THREE_MOVES, 3),
    (FIVE_MOVES, 5),
    (SEVEN_MOVES, 7),
    (CENTER_TWO_MOVES, 2),
    (SHIFTED_FIVE_MOVES, 5),
    (SHIFTED_SEVEN_MOVES, 7),
    (RECT_ONE_MOVE, 1),
]


def board(text: str) -> Board:
    return parse_board(text)


def assert_solves(start: Board, moves: list[Move]) -> None:
    """Replay `moves` on a copy of `start` and check every move is legal and the end is solved."""
    assert all(isinstance(m, Move) for m in moves), "Every element must be a Move"
    end = replay(start, moves)
    assert end.is_solved(), f"Board not solved after {len(moves)} moves: {end!r}"
