"""
Solver registry - maps algorithm names to solver constructors.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Union

from tilesolver.domains.board import Board
from tilesolver.heuristics.base import Heuristic
from tilesolver.heuristics.registry import create_heuristic
from tilesolver.search.a_star import AStarSolver, BestFirstSolver
from tilesolver.search.base import Solver
from tilesolver.search.bfs import BFSSolver
from tilesolver.search.dfs import DFSSolver, IncrementalDFSSolver
from tilesolver.search.ida_star import IDAStarSolver
from tilesolver.search.movegen import MoveGenerator, SearchOrder
from tilesolver.search.sma_star import SMAStarSolver

Builder = Callable[..., Solver]

_SOLVERS: Dict[str, Builder] = {}
# algorithms that need a heuristic
INFORMED = ("bestfs", "astar", "ida", "sma")


def register_solver(name: str) -> Callable[[Builder], Builder]:
    """
    Decorator registering a builder under `name`.

    Builders take (board, move_generator, heuristic, **options) and return a
    fresh solver.
    """
    def wrap(fn: Builder) -> Builder:
        _SOLVERS[name] = fn
        return fn
    return wrap


@register_solver("dfs")
def _dfs(board, move_generator, heuristic, **options):
    return DFSSolver(board, move_generator, **options)


@register_solver("idfs")
def _idfs(board, move_generator, heuristic, **options):
    return IncrementalDFSSolver(board, move_generator, **options)


@register_solver("bfs")
def _bfs(board, move_generator, heuristic, **options):
    return BFSSolver(board, move_generator)


@register_solver("bestfs")
def _bestfs(board, move_generator, heuristic, **options):
    return BestFirstSolver(board, heuristic, move_generator)


@register_solver("astar")
def _astar(board, move_generator, heuristic, **options):
    return AStarSolver(board, heuristic, move_generator, **options)


@register_solver("ida")
def _ida(board, move_generator, heuristic, **options):
    return IDAStarSolver(board, heuristic, move_generator)


@register_solver("sma")
def _sma(board, move_generator, heuristic, **options):
    return SMAStarSolver(board, heuristic, move_generator=move_generator, **options)


def solver_names() -> List[str]:
    return list(_SOLVERS.keys())


def create_solver(
    name: str,
    board: Board,
    heuristic: Union[Heuristic, str, None] = None,
    order: Optional[SearchOrder] = None,
    **options,
) -> Solver:
    """
    Create a solver instance by algorithm name.

    Args:
        name: One of solver_names() ("dfs", "idfs", "bfs", "bestfs", "astar", "ida", "sma")
        board: Board to solve
        heuristic: Heuristic instance or identifier; required for informed algorithms
        order: Direction order for the move generator (default UDLR)
        **options: Passed to the solver constructor (stack_limit, depth_limit,
                   tie_break, memory_limit)

    Raises:
        ValueError: Unknown algorithm name, unknown heuristic id, or missing heuristic
    """
    if name not in _SOLVERS:
        available = ", ".join(_SOLVERS.keys())
        raise ValueError(f"Unknown algorithm: {name}. Available: {available}")
    if isinstance(heuristic, str):
        heuristic = create_heuristic(heuristic)
    if name in INFORMED and heuristic is None:
        raise ValueError(f"Algorithm {name} needs a heuristic")
    return _SOLVERS[name](board, MoveGenerator(order), heuristic, **options)
