#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

GROUP_BY = ["algorithm", "heuristic", "order", "depth"]
METRICS = ["expanded", "generated", "time_sec", "g", "peak_open"]


def load(files: Sequence[Path]) -> pd.DataFrame:
    """Concatenate runner CSVs; rows from files missing the core columns are skipped."""
    frames = []
    need = {"algorithm", "depth", "time_sec"}
    for p in files:
        df = pd.read_csv(p)
        if not need.issubset(df.columns):
            print(f"Skipping {p}: missing columns {sorted(need - set(df.columns))}")
            continue
        df["file"] = Path(p).name
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=GROUP_BY + METRICS)
    df = pd.concat(frames, ignore_index=True)
    for col in ("heuristic", "order"):
        if col not in df.columns:
            df[col] = ""
        df[col] = df[col].fillna("")
    if "termination" in df.columns:
        df["termination"] = df["termination"].fillna("ok")
    return df


def geometric_mean(arr) -> float:
    arr = np.asarray(arr, float)
    arr = arr[np.isfinite(arr) & (arr > 0)]
    if arr.size == 0:
        return float("nan")
    return float(np.exp(np.mean(np.log(arr))))


def summarize(df: pd.DataFrame, solved_only: bool = True) -> pd.DataFrame:
    """Mean/std/count per (algorithm, heuristic, order, depth) for each metric present."""
    if solved_only and "termination" in df.columns:
        df = df[df["termination"] == "ok"]
    metrics = [m for m in METRICS if m in df.columns]
    if df.empty:
        return pd.DataFrame(columns=GROUP_BY)
    g = df.groupby(GROUP_BY)[metrics].agg(["mean", "std", "count"])
    g.columns = [f"{m}_{stat}" for m, stat in g.columns]
    g = g.reset_index()
    std_cols = [c for c in g.columns if c.endswith("_std")]
    g[std_cols] = g[std_cols].fillna(0.0)
    g["time_gmean"] = [
        geometric_mean(part["time_sec"]) for _, part in df.groupby(GROUP_BY)
    ]
    return g.sort_values(GROUP_BY, ignore_index=True)


def termination_counts(df: pd.DataFrame) -> pd.DataFrame:
    """How each algorithm ended its runs, one column per termination label."""
    if "termination" not in df.columns or df.empty:
        return pd.DataFrame()
    return (df.groupby(["algorithm", "termination"]).size()
              .unstack(fill_value=0)
              .reset_index())


def to_markdown(table: pd.DataFrame, floatfmt: str = "{:.3g}") -> str:
    cols = list(table.columns)
    out = ["| " + " | ".join(cols) + " |", "|" + "---|" * len(cols)]
    for _, row in table.iterrows():
        cells = []
        for c in cols:
            v = row[c]
            cells.append(floatfmt.format(v) if isinstance(v, float) else str(v))
        out.append("| " + " | ".join(cells) + " |")
    return "\n".join(out) + "\n"


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs with mean/std/count tables.")
    ap.add_argument("csv", nargs="+", type=Path, help="One or more CSV result files")
    ap.add_argument("--outdir", type=Path, default=Path("results/tables"))
    ap.add_argument("--all_runs", action="store_true", help="Include runs that did not terminate with a solution")
    args = ap.parse_args(argv)

    df = load(args.csv)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return

    table = summarize(df, solved_only=not args.all_runs)
    args.outdir.mkdir(parents=True, exist_ok=True)
    base = "combo" if len(args.csv) > 1 else args.csv[0].stem
    csv_path = args.outdir / f"{base}_summary.csv"
    md_path = args.outdir / f"{base}_summary.md"
    table.to_csv(csv_path, index=False)
    md = to_markdown(table)
    term = termination_counts(df)
    if not term.empty:
        md += "\n" + to_markdown(term)
    md_path.write_text(md)
    print(f"Saved: {csv_path}")
    print(f"Saved: {md_path}")


if __name__ == "__main__":
    main()
