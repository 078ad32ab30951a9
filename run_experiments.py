#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

PY = sys.executable


def run(cmd):
    print("Running:", " ".join(cmd))
    r = subprocess.run(cmd)
    if r.returncode != 0:
        sys.exit(r.returncode)


def main():
    Path("results").mkdir(exist_ok=True)
    runner = [PY, "-m", "tilesolver.experiments.runner", "--depths", "6", "10", "14", "--per_depth", "10"]
    run(runner + ["--algo", "bfs", "idfs", "--orders", "UDLR", "RDUL", "--out", "results/uninformed.csv"])
    run(runner + ["--algo", "astar", "ida", "bestfs", "--heuristic", "MD", "LC", "ID", "--out", "results/informed.csv"])
    run(runner + ["--algo", "sma", "--heuristic", "MD", "--memory", "200", "--out", "results/sma.csv"])
    run([PY, "-m", "tilesolver.experiments.summarize", "results/uninformed.csv", "results/informed.csv", "results/sma.csv"])
    run([PY, "-m", "tilesolver.experiments.plot", "results/informed.csv"])


if __name__ == "__main__":
    main()
