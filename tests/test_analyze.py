"""
Tests for puzzlegraph.experiments.analyze and plot over small hand-written result files.
"""

import math

import pandas as pd
import pytest

from puzzlegraph.experiments import analyze
from puzzlegraph.experiments.plot import plot_metric, save_fig, series

ROWS = """\
algorithm,domain,heuristic,depth,seed,expanded,generated,duplicates,stale,peak_frontier,reached,g,time_sec,tie_break,termination,solvable
A*,p8,manhattan,4,1,5,10,2,0,6,11,4,0.001,fifo,ok,1
A*,p8,manhattan,4,2,7,14,3,1,8,15,4,0.003,fifo,ok,1
BFS,p8,manhattan,4,1,20,40,10,0,15,35,4,0.010,,ok,1
BFS,p8,manhattan,4,2,30,60,14,0,21,45,4,0.020,,ok,1
BFS,p8,manhattan,6,3,90,180,40,0,70,130,,0.050,,timeout,1
"""


@pytest.fixture
def results(tmp_path):
    path = tmp_path / "rows.csv"
    path.write_text(ROWS)
    return str(path)


def test_load_keeps_only_finished_rows(results):
    df = analyze.load_results([results])
    assert len(df) == 4
    assert set(df["termination"]) == {"ok"}
    assert df["expanded"].dtype.kind in "if"


def test_load_all_rows(results):
    df = analyze.load_results([results], ok_only=False)
    assert len(df) == 5
    assert math.isnan(df["g"].iloc[-1])


def test_load_skips_missing_files(results, tmp_path, capsys):
    df = analyze.load_results([str(tmp_path / "nope.csv"), results])
    assert len(df) == 4
    assert "skip" in capsys.readouterr().out


def test_load_nothing_is_empty(tmp_path):
    assert analyze.load_results([str(tmp_path / "missing.csv")]).empty


def test_sem():
    assert analyze.sem([3.0]) == 0.0
    assert analyze.sem([1.0, 3.0]) == pytest.approx(1.0)
    assert analyze.sem([1.0, float("nan"), 3.0]) == pytest.approx(1.0)


def test_summarize_groups_by_algorithm_and_depth(results):
    table = analyze.summarize(analyze.load_results([results]))
    row = table.loc[("A*", "p8", "manhattan", 4)]
    assert row[("expanded", "mean")] == pytest.approx(6.0)
    assert row[("expanded", "min")] == 5
    assert row[("expanded", "max")] == 7


def test_summarize_empty():
    assert analyze.summarize(pd.DataFrame()).empty


def test_compare_ratio(results):
    table = analyze.compare(analyze.load_results([results]), "A*", "BFS")
    expanded = table[table["metric"] == "expanded"].iloc[0]
    assert expanded["depth"] == 4
    assert expanded["A*"] == pytest.approx(6.0)
    assert expanded["BFS"] == pytest.approx(25.0)
    assert expanded["ratio"] == pytest.approx(25.0 / 6.0)


def test_compare_unknown_algorithm_is_empty(results):
    assert analyze.compare(analyze.load_results([results]), "IDA*", "RBFS").empty


def test_series_and_saved_plot(results, tmp_path):
    import matplotlib.pyplot as plt

    df = analyze.load_results([results])
    s = series(df, "expanded")
    xs, ys, _ = s[("BFS", "manhattan")]
    assert list(xs) == [4]
    assert list(ys) == [25.0]

    fig, ax = plt.subplots()
    plot_metric(ax, df, "expanded", log=True)
    path = save_fig(fig, tmp_path / "plots", "expanded")
    plt.close(fig)
    assert path.exists()
