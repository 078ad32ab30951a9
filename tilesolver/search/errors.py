from __future__ import annotations
from enum import Enum
from typing import Optional


class SearchOutcome(Enum):
    """Control-flow signals internal to a single solve()."""
    FOUND = "found"
    # DFS
    STATE_ALREADY_VISITED = "solver has already visited this state"
    MAX_DEPTH_REACHED = "solver reached max depth of the search tree"
    STATE_EXHAUSTED = "none of the moves from this position results in a solution"
    # IDA* / SMA*
    NOT_FOUND = "search space exhausted without reaching the goal"
    MEMORY_EXHAUSTED = "memory limit is too small to hold a solution path"


class SolvingError(Exception):
    """Base class of errors surfaced by Solver.solve()."""


class UnsolvableBoard(SolvingError):
    def __init__(self, message: str = "Board cannot be solved"):
        super().__init__(message)


class AlgorithmError(SolvingError):
    """A strategy failed to produce a path; `outcome` holds the internal reason."""

    def __init__(self, outcome: SearchOutcome, algorithm: str = "", detail: Optional[str] = None):
        self.outcome = outcome
        self.algorithm = algorithm
        msg = outcome.value if detail is None else f"{outcome.value} ({detail})"
        super().__init__(f"{algorithm}: {msg}" if algorithm else msg)
