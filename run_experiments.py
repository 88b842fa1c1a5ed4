#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

RUNNER = f"{sys.executable} -m puzzlegraph.experiments.runner"

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("p8 all algorithms", f"{RUNNER} --algo all --depths 6 10 14 --per_depth 10 --heuristic manhattan --out results/p8_all.csv")
    run("p8 A* linear conflict", f"{RUNNER} --depths 6 10 14 18 --per_depth 10 --heuristic linear_conflict --out results/p8_linear_conflict.csv")
    run("p8 uniform cost", f"{RUNNER} --depths 6 10 14 18 --per_depth 10 --heuristic zero --out results/p8_zero.csv")
    run("p8 unsolvable", f"{RUNNER} --algo bfs --depths 6 --per_depth 2 --include_unsolvable --out results/p8_unsolvable.csv")
    run("Summary", f"{sys.executable} -m puzzlegraph.experiments.analyze results/p8_all.csv --compare BFS A*")
    run("Plots", f"{sys.executable} -m puzzlegraph.experiments.plot results/p8_all.csv results/p8_linear_conflict.csv results/p8_zero.csv --log")

if __name__ == "__main__":
    main()
