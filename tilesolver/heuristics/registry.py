"""
Heuristic registry - maps CLI identifiers to heuristic classes.
"""
from __future__ import annotations
from typing import Dict, List, Type

from tilesolver.heuristics.base import Heuristic
from tilesolver.heuristics.inversion_distance import InversionDistance
from tilesolver.heuristics.linear_conflict import LinearConflict
from tilesolver.heuristics.manhattan import ManhattanDistance

_HEURISTICS: Dict[str, Type[Heuristic]] = {}


def register_heuristic(cls: Type[Heuristic]) -> Type[Heuristic]:
    """Register `cls` under both its long and short identifiers."""
    _HEURISTICS[cls.name] = cls
    if cls.short_name:
        _HEURISTICS[cls.short_name] = cls
    return cls


for _cls in (ManhattanDistance, LinearConflict, InversionDistance):
    register_heuristic(_cls)


def heuristic_ids() -> List[str]:
    return list(_HEURISTICS.keys())


def create_heuristic(heuristic_id: str) -> Heuristic:
    """
    Create a heuristic instance by identifier.

    Raises:
        ValueError: If the identifier is unknown
    """
    try:
        cls = _HEURISTICS[heuristic_id]
    except KeyError:
        available = ", ".join(_HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic id {heuristic_id!r}. Possible values are: {available}.") from None
    return cls()
