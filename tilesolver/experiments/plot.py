#!/usr/bin/env python3
import os, argparse
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd
import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from tilesolver.experiments.summarize import load

METRICS = ["expanded", "generated", "duplicates", "time_sec"]


def series(df: pd.DataFrame, metric: str):
    """{(algorithm, heuristic): (depths, means, stds)} over solved runs."""
    if "termination" in df.columns:
        df = df[df["termination"] == "ok"]
    out = {}
    for key, part in df.groupby(["algorithm", "heuristic"]):
        by_depth = part.groupby("depth")[metric]
        means = by_depth.mean()
        xs = means.index.to_numpy(dtype=float)
        ys = means.to_numpy(dtype=float)
        es = by_depth.std(ddof=0).fillna(0.0).to_numpy(dtype=float)
        out[key] = (xs, ys, es)
    return out


def plot_metric(ax, df: pd.DataFrame, metric: str):
    data = series(df, metric)
    n = max(len(data), 1)
    for k, ((algo, heur), (xs, ys, es)) in enumerate(sorted(data.items())):
        # spread the curves a little so error bars don't overlap
        offset = (k - (n - 1) / 2) * 0.08
        label = f"{algo} | {heur or '-'}"
        ax.errorbar(xs + offset, ys, yerr=es, marker="o", capsize=3, label=label)
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± std)")
    ax.grid(True)
    if data:
        ax.legend()


def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path


def make_plots(csvs: List[Path], outdir: Path) -> List[Path]:
    df = load(csvs)
    if df.empty:
        return []
    base = "combo" if len(csvs) > 1 else Path(csvs[0]).stem
    saved = []

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, df, metric)
    fig.tight_layout()
    saved.append(save_fig(fig, outdir, f"{base}_combined"))
    plt.close(fig)

    for metric in METRICS:
        if metric not in df.columns:
            continue
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric)
        fig.tight_layout()
        saved.append(save_fig(fig, outdir, f"{base}_{metric}"))
        plt.close(fig)
    return saved


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--save", type=Path, default=Path("results/plots"), help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    saved = make_plots(args.csv, args.save)
    if not saved:
        print("No rows to plot. Are your CSVs empty?")
        return
    if args.show:
        plt.show()


if __name__ == "__main__":
    main()
