from __future__ import annotations

import math

import pandas as pd
import pytest

from tilesolver.domains.parity import is_solvable
from tilesolver.experiments import plot, runner, summarize


@pytest.fixture
def results_csv(tmp_path):
    insts = runner.generate_instances(3, 3, [4, 8], per_depth=2)
    out = tmp_path / "results" / "run.csv"
    n = runner.run_batch(out, insts, ["bfs", "astar", "sma"], ["MD", "LC"], ["UDLR"],
                         include_unsolvable=True, memory=100)
    # 4 instances x 2 variants x (bfs + 2 astar + 2 sma)
    assert n == 40
    return out


def test_generate_instances_are_solvable_and_seeded():
    a = runner.generate_instances(3, 4, [5, 10], per_depth=3, start_seed=7)
    b = runner.generate_instances(3, 4, [5, 10], per_depth=3, start_seed=7)
    assert [i.board for i in a] == [i.board for i in b]
    assert [i.depth for i in a] == [5, 5, 5, 10, 10, 10]
    assert [i.seed for i in a] == list(range(7, 13))
    assert all(is_solvable(i.board) for i in a)


def test_unsolvable_variant_flips_parity():
    inst = runner.generate_instances(3, 3, [6], per_depth=1)[0]
    assert not is_solvable(runner.make_unsolvable_variant(inst.board))


def test_run_batch_writes_one_row_per_run(results_csv):
    df = pd.read_csv(results_csv)
    assert list(df.columns) == runner.HEADER
    assert set(df["algorithm"]) == {"BFS", "A*", "SMA*"}
    solved = df[df["solvable"] == 1]
    unsolved = df[df["solvable"] == 0]
    assert (solved["termination"] == "ok").all()
    assert (unsolved["termination"] == "unsolvable").all()
    # optimal strategies agree on every instance
    lengths = solved.groupby("seed")["g"].nunique()
    assert (lengths == 1).all()
    assert solved[solved["algorithm"] == "BFS"]["heuristic"].isna().all()


def test_runner_main(tmp_path, capsys):
    out = tmp_path / "main.csv"
    runner.main(["--algo", "ida", "idfs", "--depths", "6", "--per_depth", "2", "--out", str(out)])
    assert "Wrote" in capsys.readouterr().out
    df = pd.read_csv(out)
    assert len(df) == 4


def test_runner_rejects_bad_order(tmp_path):
    with pytest.raises(SystemExit):
        runner.main(["--orders", "UDLX", "--out", str(tmp_path / "x.csv")])


def test_summarize_groups_solved_runs(results_csv):
    df = summarize.load([results_csv])
    table = summarize.summarize(df)
    assert {"expanded_mean", "expanded_std", "expanded_count", "time_gmean"} <= set(table.columns)
    # 2 depths x (bfs + 2 astar + 2 sma)
    assert len(table) == 10
    assert (table["expanded_count"] == 2).all()
    counts = summarize.termination_counts(df)
    assert set(counts.columns) >= {"algorithm", "ok", "unsolvable"}


def test_summarize_main_writes_tables(results_csv, tmp_path):
    outdir = tmp_path / "tables"
    summarize.main([str(results_csv), "--outdir", str(outdir)])
    assert (outdir / "run_summary.csv").exists()
    md = (outdir / "run_summary.md").read_text()
    assert md.startswith("| algorithm | heuristic |")


def test_geometric_mean_ignores_non_positive():
    assert summarize.geometric_mean([1.0, 4.0, 0.0, -1.0]) == pytest.approx(2.0)
    assert math.isnan(summarize.geometric_mean([]))


def test_plots_are_saved(results_csv, tmp_path):
    saved = plot.make_plots([results_csv], tmp_path / "plots")
    assert saved
    assert all(p.exists() and p.suffix == ".png" for p in saved)
