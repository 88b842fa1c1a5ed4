from __future__ import annotations
import argparse, csv, statistics
from dataclasses import dataclass, asdict
from pathlib import Path
from time import perf_counter
from typing import Callable, Dict, List, Optional, Tuple

from puzzlegraph.domains.crucible import CrucibleMap
from puzzlegraph.domains.grid import Grid
from puzzlegraph.domains.puzzlen import SlidingPuzzle
from puzzlegraph.heuristics.scaled import scaled, zero
from puzzlegraph.search.a_star import TIE_BREAKS, astar
from puzzlegraph.search.bfs import breadth_first_search
from puzzlegraph.search.common import SearchStats
from puzzlegraph.search.dfs import depth_first_search

Board = Tuple[int, ...]

# returned by visitors once the wall-time budget is spent
TIMEOUT = object()

HEADER = [
    "algorithm", "domain", "heuristic", "depth", "seed",
    "expanded", "generated", "duplicates", "stale", "peak_frontier", "reached",
    "g", "time_sec", "tie_break", "termination", "solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: Board

def _gen(puzzle: SlidingPuzzle, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    """per_depth scrambles per depth; seeds run consecutively so each board is scramble(depth, seed)."""
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            # a walk from GOAL is always solvable
            out.append(Instance(seed=seed, depth=d, state=puzzle.scramble(d, seed)))
            seed += 1
    return out

def goal_visitor(is_goal: Callable[[object], bool], timeout_sec: Optional[float]):
    """Visitor accepting goal states with their depth/cost; gives up with TIMEOUT past the deadline."""
    deadline = None if timeout_sec is None else perf_counter() + timeout_sec
    def visit(s, g):
        if is_goal(s):
            return g
        if deadline is not None and perf_counter() > deadline:
            return TIMEOUT
        return None
    return visit

def run_one(algo: str, run: Callable[[Callable, SearchStats], object],
            is_goal: Callable[[object], bool], timeout_sec: Optional[float], rounds: int = 1) -> Dict:
    """Time `rounds` runs of one search; counters come from the first round, time is the median."""
    times: List[float] = []
    first: Optional[Dict] = None
    for _ in range(max(1, rounds)):
        stats = SearchStats()
        t0 = perf_counter()
        r = run(goal_visitor(is_goal, timeout_sec), stats)
        times.append(perf_counter() - t0)
        if first is None:
            if r is TIMEOUT:
                termination, g = "timeout", None
            elif r is None:
                termination, g = "exhausted", None
            else:
                termination, g = "ok", r
            first = {"algorithm": algo, "g": g, "termination": termination, **asdict(stats)}
        if first["termination"] == "timeout":
            break
    first["time"] = statistics.median(times)
    return first

def solve_puzzle(algo: str, puzzle: SlidingPuzzle, start: Board, hfun, tie_break: str = "fifo",
                 timeout_sec: Optional[float] = None, rounds: int = 1) -> Dict:
    is_goal = lambda s: s == puzzle.GOAL
    if algo == "a":
        run = lambda visit, stats: astar(puzzle.weighted_neighbors, visit, hfun, [start],
                                         tie_break=tie_break, stats=stats)
        return run_one("A*", run, is_goal, timeout_sec, rounds)
    if algo == "bfs":
        run = lambda visit, stats: breadth_first_search(puzzle.neighbors, visit, [start], stats=stats)
        return run_one("BFS", run, is_goal, timeout_sec, rounds)
    if algo == "dfs":
        run = lambda visit, stats: depth_first_search(puzzle.neighbors, visit, [start], stats=stats)
        return run_one("DFS", run, is_goal, timeout_sec, rounds)
    raise ValueError(f"unknown algorithm {algo!r}")

def solve_crucible(grid: Grid, min_run: int, max_run: int, hfun, tie_break: str = "fifo",
                   timeout_sec: Optional[float] = None, rounds: int = 1) -> Dict:
    m = CrucibleMap(grid, min_run, max_run)
    is_goal = lambda s: m.accept(s, 0) is not None
    run = lambda visit, stats: astar(m.neighbors, visit, hfun, m.starts(), tie_break=tie_break, stats=stats)
    return run_one("A*", run, is_goal, timeout_sec, rounds)

def choose_hfun(name: str, puzzle: Optional[SlidingPuzzle] = None, crucible: Optional[CrucibleMap] = None):
    if name == "zero":
        return zero
    if crucible is not None:
        if name == "manhattan":
            return crucible.heuristic()
        raise ValueError(f"heuristic {name!r} does not apply to crucible grids")
    if name == "manhattan":
        return puzzle.manhattan
    if name == "linear_conflict":
        return puzzle.linear_conflict
    raise ValueError(name)

def choose_puzzle(args) -> SlidingPuzzle:
    """--rows/--cols > --n > --domain (p8|p15)."""
    if args.rows is not None and args.cols is not None:
        return SlidingPuzzle(args.rows, args.cols)
    if args.n is not None:
        return SlidingPuzzle(args.n, args.n)
    return SlidingPuzzle(4, 4) if args.domain == "p15" else SlidingPuzzle(3, 3)

def write_row(w, res: Dict, domain: str, heur: str, depth, seed, tie_break: str, solvable_flag: int):
    w.writerow([
        res.get("algorithm", ""), domain, heur, depth, seed,
        res.get("expanded", ""), res.get("generated", ""), res.get("duplicates", ""),
        res.get("stale", ""), res.get("peak_frontier", ""), res.get("reached", ""),
        "" if res.get("g") is None else res["g"],
        f"{res.get('time', 0.0):.6f}",
        tie_break if res.get("algorithm") == "A*" else "",
        res.get("termination", "ok"), solvable_flag,
    ])

def run_puzzles(args, w) -> int:
    puzzle = choose_puzzle(args)
    hfun = choose_hfun(args.heuristic, puzzle=puzzle)
    if args.weight != 1.0:
        hfun = scaled(hfun, args.weight)
    algos = ["a", "bfs", "dfs"] if args.algo == "all" else [args.algo]
    insts = _gen(puzzle, args.depths, args.per_depth)

    for inst in insts:
        variants = [(inst.state, 1)]
        if args.include_unsolvable:
            variants.append((puzzle.make_unsolvable(inst.state), 0))
        for state, solvable_flag in variants:
            for algo in algos:
                r = solve_puzzle(algo, puzzle, state, hfun, tie_break=args.tie_break,
                                 timeout_sec=args.timeout_sec, rounds=args.rounds)
                write_row(w, r, puzzle.name, args.heuristic, inst.depth, inst.seed, args.tie_break, solvable_flag)
    return len(insts)

def run_grids(args, w) -> int:
    for path in args.grid:
        grid = Grid.parse(Path(path).read_text())
        m = CrucibleMap(grid, args.min_run, args.max_run)
        hfun = choose_hfun(args.heuristic, crucible=m)
        if args.weight != 1.0:
            hfun = scaled(hfun, args.weight)
        r = solve_crucible(grid, args.min_run, args.max_run, hfun, tie_break=args.tie_break,
                           timeout_sec=args.timeout_sec, rounds=args.rounds)
        write_row(w, r, f"crucible{args.min_run}-{args.max_run}", args.heuristic,
                  "", Path(path).stem, args.tie_break, 1)
    return len(args.grid)

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="A*/BFS/DFS experiment runner over sliding puzzles and crucible grids")
    ap.add_argument("--algo", choices=["a", "bfs", "dfs", "all"], default="a")
    ap.add_argument("--heuristic", choices=["manhattan", "linear_conflict", "zero"], default="manhattan")
    ap.add_argument("--weight", type=float, default=1.0, help="Scale the heuristic (w > 1 may overestimate)")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="fifo")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22, 26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--rounds", type=int, default=1, help="Repeat each search; time_sec is the median")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Per-instance wall time")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))

    # sliding puzzles
    ap.add_argument("--domain", choices=["p8", "p15"], default="p8", help="3x3 or 4x4 shortcut")
    ap.add_argument("--n", type=int, default=None, help="Square board size (N×N)")
    ap.add_argument("--rows", type=int, default=None, help="Rows for rectangular board")
    ap.add_argument("--cols", type=int, default=None, help="Cols for rectangular board")
    ap.add_argument("--include_unsolvable", action="store_true", help="Also run parity-flipped variants (p8 recommended)")

    # crucible grids
    ap.add_argument("--grid", nargs="+", default=None, help="Digit heat-loss map files; replaces puzzle instances")
    ap.add_argument("--min_run", type=int, default=1)
    ap.add_argument("--max_run", type=int, default=3)
    return ap

def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        if args.grid:
            n = run_grids(args, w)
            print(f"Wrote {args.out} ({n} grids)")
        else:
            n = run_puzzles(args, w)
            print(f"Wrote {args.out} ({n} instances)")

if __name__ == "__main__":
    main()
