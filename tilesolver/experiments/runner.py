from __future__ import annotations
import argparse, csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from tilesolver.domains.board import Board, scramble
from tilesolver.domains.parsing import format_board
from tilesolver.search.errors import AlgorithmError, UnsolvableBoard
from tilesolver.search.movegen import parse_search_order
from tilesolver.search.registry import INFORMED, create_solver, solver_names

HEADER = [
    "algorithm", "heuristic", "order", "rows", "cols", "depth", "seed",
    "expanded", "generated", "duplicates", "evicted", "g", "time_sec",
    "peak_open", "peak_recursion", "bound_final", "tie_break",
    "termination", "solvable",
]


@dataclass
class Instance:
    seed: int
    depth: int
    board: Board


def generate_instances(rows: int, cols: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """Random walks from the solved board; every instance is solvable by construction."""
    goal = Board.solved(rows, cols)
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, board=scramble(goal, d, seed)))
            seed += 1
    return out


def make_unsolvable_variant(board: Board) -> Board:
    """Swap the first two tiles, which flips the permutation parity."""
    cells = list(board.cells)
    i = next(k for k, v in enumerate(cells) if v != 0)
    j = next(k for k, v in enumerate(cells[i + 1:], start=i + 1) if v != 0)
    cells[i], cells[j] = cells[j], cells[i]
    return Board(board.rows, board.columns, cells)


def run_one(algorithm: str, board: Board, heuristic: Optional[str], order: str, **options) -> Dict:
    solver = create_solver(algorithm, board, heuristic=heuristic, order=parse_search_order(order), **options)
    try:
        path = solver.solve()
    except (UnsolvableBoard, AlgorithmError):
        return dict(solver.stats)
    res = dict(solver.stats)
    res["g"] = len(path)
    return res


def write_row(w, res: Dict, heur: str, order: str, inst: Instance, solvable_flag: int):
    w.writerow([
        res.get("algorithm", ""), heur, order, inst.board.rows, inst.board.columns, inst.depth, inst.seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""), res.get("evicted", ""),
        res.get("g", ""), f"{res.get('time', 0.0):.6f}",
        res.get("peak_open", ""), res.get("peak_recursion", ""), res.get("bound_final", ""),
        res.get("tie_break", ""), res.get("termination", "ok"), solvable_flag,
    ])


def run_batch(
    out: Path,
    instances: Iterable[Instance],
    algorithms: List[str],
    heuristics: List[str],
    orders: List[str],
    include_unsolvable: bool = False,
    memory: Optional[int] = None,
    tie_break: str = "h",
) -> int:
    """Run every algorithm x heuristic x order combination on each instance; returns rows written."""
    out.parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in instances:
            variants = [(inst.board, 1)]
            if include_unsolvable:
                variants.append((make_unsolvable_variant(inst.board), 0))
            for board, solvable_flag in variants:
                for algo in algorithms:
                    options = {}
                    if algo == "astar":
                        options["tie_break"] = tie_break
                    if algo == "sma" and memory is not None:
                        options["memory_limit"] = memory
                    for heur in (heuristics if algo in INFORMED else [""]):
                        for order in orders:
                            res = run_one(algo, board, heur or None, order, **options)
                            write_row(w, res, heur, order, inst, solvable_flag)
                            n += 1
    return n


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Sliding-tile solver experiment runner")
    ap.add_argument("--algo", nargs="+", choices=solver_names() + ["all"], default=["astar", "ida"],
                    help="'all' runs every registered algorithm")
    ap.add_argument("--heuristic", nargs="+", default=["MD"], help="heuristic ids for informed algorithms")
    ap.add_argument("--orders", nargs="+", default=["UDLR"], help="search orders (R = random)")
    ap.add_argument("--rows", type=int, default=3)
    ap.add_argument("--cols", type=int, default=3)
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--start_seed", type=int, default=0)
    ap.add_argument("--tie_break", choices=["h", "g", "fifo", "lifo"], default="h")
    ap.add_argument("--memory", type=int, default=None, help="SMA* memory limit in nodes")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run a parity-flipped variant of each instance")
    ap.add_argument("--show_instances", action="store_true", help="Print each generated board")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)

    algorithms = solver_names() if "all" in args.algo else args.algo
    for order in args.orders:
        try:
            parse_search_order(order)
        except ValueError as e:
            ap.error(f"bad order {order!r}: {e}")

    insts = generate_instances(args.rows, args.cols, args.depths, args.per_depth, args.start_seed)
    if args.show_instances:
        for inst in insts:
            print(f"# depth={inst.depth} seed={inst.seed}")
            print(format_board(inst.board))

    n = run_batch(args.out, insts, algorithms, args.heuristic, args.orders,
                  include_unsolvable=args.include_unsolvable, memory=args.memory, tie_break=args.tie_break)
    print(f"Wrote {args.out} ({len(insts)} instances, {n} runs)")


if __name__ == "__main__":
    main()
