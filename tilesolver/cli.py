"""
Command-line front end.

    tilesolver -a MD board.txt
    tilesolver -b RDUL < board.txt
    tilesolver -s LC --memory 5000 board.txt

Prints the solution length and the moves on two lines, or -1 when the board
cannot be solved.
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from tilesolver.domains.board import moves_to_string
from tilesolver.domains.parsing import BoardCreationError, parse_board
from tilesolver.heuristics.registry import create_heuristic, heuristic_ids
from tilesolver.search.errors import AlgorithmError, UnsolvableBoard
from tilesolver.search.movegen import parse_search_order
from tilesolver.search.registry import create_solver

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSOLVABLE = 1
EXIT_INVALID_BOARD = 3
EXIT_ALGORITHM_ERROR = 4

# flag dest -> registry name
_UNINFORMED = {"bfs": "bfs", "dfs": "dfs", "idfs": "idfs"}
_INFORMED = {"bf": "bestfs", "astar": "astar", "ida": "ida", "sma": "sma"}


def _order_arg(s: str) -> str:
    try:
        parse_search_order(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return s


def _heuristic_arg(s: str) -> str:
    try:
        create_heuristic(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return s


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tilesolver",
        description="Solve an n x m sliding-tile puzzle",
        add_help=False,
    )
    ap.add_argument("--help", action="help", help="show this help message and exit")

    algo = ap.add_mutually_exclusive_group(required=True)
    algo.add_argument("-b", "--bfs", metavar="ORDER", type=_order_arg,
                      help="breadth-first search; ORDER is a permutation of UDLR or R for random")
    algo.add_argument("-d", "--dfs", metavar="ORDER", type=_order_arg, help="depth-first search")
    algo.add_argument("-i", "--idfs", metavar="ORDER", type=_order_arg, help="iterative deepening DFS")
    ids = "/".join(heuristic_ids())
    algo.add_argument("-h", "--bf", metavar="HEURISTIC", type=_heuristic_arg,
                      help=f"greedy best-first search; HEURISTIC is one of {ids}")
    algo.add_argument("-a", "--astar", metavar="HEURISTIC", type=_heuristic_arg, help="A*")
    algo.add_argument("--ida", metavar="HEURISTIC", type=_heuristic_arg, help="IDA*")
    algo.add_argument("-s", "--sma", metavar="HEURISTIC", type=_heuristic_arg, help="SMA*")

    ap.add_argument("--order", type=_order_arg, default="UDLR",
                    help="direction order for heuristic searches (default UDLR)")
    ap.add_argument("--seed", type=int, default=None, help="seed for the random order R")
    ap.add_argument("--memory", type=int, default=None, help="SMA* memory limit in nodes")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logs")
    ap.add_argument("board", nargs="?", default=None, help="board file (default: stdin)")
    return ap


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)

    heuristic = None
    options = {}
    for dest, name in _UNINFORMED.items():
        if getattr(args, dest) is not None:
            algorithm, order_text = name, getattr(args, dest)
    for dest, name in _INFORMED.items():
        if getattr(args, dest) is not None:
            algorithm, order_text, heuristic = name, args.order, getattr(args, dest)
    if args.memory is not None:
        if algorithm != "sma":
            ap.error("--memory only applies to --sma")
        if args.memory < 1:
            ap.error("--memory must be a positive integer")
        options["memory_limit"] = args.memory

    try:
        if args.board is None:
            text = sys.stdin.read()
        else:
            with open(args.board) as fh:
                text = fh.read()
    except OSError as e:
        print(f"Cannot read board: {e}", file=sys.stderr)
        return EXIT_INVALID_BOARD
    try:
        board = parse_board(text)
    except BoardCreationError as e:
        print(f"Invalid board: {e}", file=sys.stderr)
        return EXIT_INVALID_BOARD

    order = parse_search_order(order_text, seed=args.seed)
    solver = create_solver(algorithm, board, heuristic=heuristic, order=order, **options)
    try:
        path = solver.solve()
    except UnsolvableBoard:
        print(-1)
        return EXIT_UNSOLVABLE
    except AlgorithmError as e:
        logger.error(f"Search failed: {e}")
        return EXIT_ALGORITHM_ERROR

    print(len(path))
    print(moves_to_string(path))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
