from __future__ import annotations

import os

import pytest

# plotting tests must not need a display
os.environ.setdefault("MPLBACKEND", "Agg")

from boards import SEVEN_MOVES, THREE_MOVES, board  # noqa: E402


@pytest.fixture
def three_moves():
    return board(THREE_MOVES)


@pytest.fixture
def seven_moves():
    return board(SEVEN_MOVES)


@pytest.fixture
def board_file(tmp_path):
    """Write board text to a file and return its path."""
    def write(text: str, name: str = "board.txt"):
        p = tmp_path / name
        p.write_text(text)
        return p
    return write
