"""
Tests for puzzlegraph.experiments.runner: per-instance solving and CSV output.
"""

import csv

import pytest

from puzzlegraph.domains.crucible import CrucibleMap
from puzzlegraph.domains.grid import Grid
from puzzlegraph.domains.puzzlen import SlidingPuzzle
from puzzlegraph.experiments import runner
from puzzlegraph.heuristics.scaled import zero

CITY = """\
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
"""


@pytest.fixture
def p8():
    return SlidingPuzzle(3, 3)


def read_rows(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))


def test_instances_grouped_by_depth(p8):
    insts = runner._gen(p8, [4, 8], per_depth=3)
    assert [i.depth for i in insts] == [4, 4, 4, 8, 8, 8]
    assert [i.seed for i in insts] == [0, 1, 2, 3, 4, 5]


def test_instances_rebuild_from_recorded_seed(p8):
    for i in runner._gen(p8, [10, 14], per_depth=5, start_seed=7):
        assert p8.scramble(i.depth, i.seed) == i.state


def test_csv_seed_rebuilds_board(tmp_path):
    out = tmp_path / "seeds.csv"
    runner.main(["--algo", "bfs", "--rows", "2", "--cols", "3", "--depths", "5",
                 "--per_depth", "3", "--out", str(out)])
    p = SlidingPuzzle(2, 3)
    for r in read_rows(out):
        start = p.scramble(int(r["depth"]), int(r["seed"]))
        assert runner.solve_puzzle("bfs", p, start, zero)["g"] == int(r["g"])


@pytest.mark.parametrize("algo, name", [("a", "A*"), ("bfs", "BFS"), ("dfs", "DFS")])
def test_solve_puzzle_reports_ok(p8, algo, name):
    start = p8.scramble(6, seed=2)
    r = runner.solve_puzzle(algo, p8, start, p8.manhattan)
    assert r["algorithm"] == name
    assert r["termination"] == "ok"
    assert r["g"] is not None
    assert r["expanded"] >= 1
    assert r["time"] >= 0.0


def test_astar_and_bfs_agree_on_cost(p8):
    start = p8.scramble(12, seed=7)
    a = runner.solve_puzzle("a", p8, start, p8.linear_conflict)
    b = runner.solve_puzzle("bfs", p8, start, zero)
    assert a["g"] == b["g"]


def test_unsolvable_instance_is_exhausted():
    p = SlidingPuzzle(2, 2)
    r = runner.solve_puzzle("bfs", p, p.make_unsolvable(p.GOAL), zero)
    assert r["termination"] == "exhausted"
    assert r["g"] is None
    assert r["reached"] == 12


def test_deadline_in_the_past_times_out(p8):
    start = p8.neighbors(p8.GOAL)[0]
    r = runner.solve_puzzle("a", p8, start, zero, timeout_sec=-1.0, rounds=3)
    assert r["termination"] == "timeout"
    assert r["g"] is None
    assert r["expanded"] == 1


def test_rounds_keep_counters_from_first_round(p8):
    start = p8.scramble(8, seed=4)
    once = runner.solve_puzzle("a", p8, start, p8.manhattan)
    thrice = runner.solve_puzzle("a", p8, start, p8.manhattan, rounds=3)
    assert once["expanded"] == thrice["expanded"]
    assert once["g"] == thrice["g"]


def test_unknown_algorithm_rejected(p8):
    with pytest.raises(ValueError):
        runner.solve_puzzle("ida", p8, p8.GOAL, zero)


def test_crucible_heuristic_choices():
    m = CrucibleMap(Grid.parse(CITY))
    assert runner.choose_hfun("zero", crucible=m) is zero
    with pytest.raises(ValueError):
        runner.choose_hfun("linear_conflict", crucible=m)


def test_main_writes_puzzle_rows(tmp_path):
    out = tmp_path / "run.csv"
    runner.main(["--algo", "all", "--rows", "2", "--cols", "3", "--depths", "4", "6",
                 "--per_depth", "2", "--out", str(out)])
    rows = read_rows(out)
    assert list(rows[0].keys()) == runner.HEADER
    assert len(rows) == 2 * 2 * 3
    assert {r["algorithm"] for r in rows} == {"A*", "BFS", "DFS"}
    assert {r["domain"] for r in rows} == {"r2x3"}
    assert all(r["termination"] == "ok" for r in rows)
    assert all(r["tie_break"] == "fifo" for r in rows if r["algorithm"] == "A*")
    assert all(r["tie_break"] == "" for r in rows if r["algorithm"] != "A*")


def test_main_includes_unsolvable_variants(tmp_path):
    out = tmp_path / "unsolvable.csv"
    runner.main(["--algo", "bfs", "--rows", "2", "--cols", "2", "--depths", "3",
                 "--per_depth", "1", "--include_unsolvable", "--out", str(out)])
    rows = read_rows(out)
    assert [r["solvable"] for r in rows] == ["1", "0"]
    assert [r["termination"] for r in rows] == ["ok", "exhausted"]


def test_main_runs_crucible_grids(tmp_path):
    grid_file = tmp_path / "city.txt"
    grid_file.write_text(CITY)
    out = tmp_path / "grid.csv"
    runner.main(["--grid", str(grid_file), "--out", str(out)])
    (row,) = read_rows(out)
    assert row["g"] == "102"
    assert row["domain"] == "crucible1-3"
    assert row["seed"] == "city"
