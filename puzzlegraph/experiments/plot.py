#!/usr/bin/env python3
import argparse, os, sys
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from puzzlegraph.experiments.analyze import load_results, sem

# Okabe–Ito colors (color-blind friendly)
COLORS = {"A*": "#009E73", "BFS": "#0072B2", "DFS": "#E69F00"}
OFFSETS = {"A*": -0.12, "BFS": 0.0, "DFS": 0.12}

def series(df: pd.DataFrame, metric: str):
    """(algorithm, heuristic) -> (depths, means, sems) for rows that have a depth."""
    df = df.dropna(subset=["depth", metric])
    out = {}
    for (algo, heur), grp in df.groupby(["algorithm", "heuristic"]):
        agg = grp.groupby("depth")[metric].agg(["mean", sem]).sort_index()
        out[(algo, heur)] = (agg.index.to_numpy(), agg["mean"].to_numpy(), agg["sem"].to_numpy())
    return out

def plot_metric(ax, df: pd.DataFrame, metric: str, log: bool = False):
    for (algo, heur), (xs, ys, es) in sorted(series(df, metric).items()):
        # nudge algorithms apart so error bars don't overlap
        xs_off = xs + OFFSETS.get(algo, 0.0)
        ax.errorbar(xs_off, ys, yerr=es, marker="o", capsize=3,
                    color=COLORS.get(algo), label=f"{algo} | {heur or '-'}")
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± sem)")
    if log:
        ax.set_yscale("log")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main():
    ap = argparse.ArgumentParser(description="Plot runner CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--log", action="store_true", help="Log-scale y axis")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args()

    df = load_results(args.csv)
    if df.empty:
        print("No rows to plot. Are your CSVs empty?")
        sys.exit(0)

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    for ax, metric in zip(axes, ["expanded", "generated", "time_sec"]):
        plot_metric(ax, df, metric, log=args.log)
    plt.tight_layout()
    save_fig(fig, outdir, f"{base}_combined")

    for metric in ["expanded", "duplicates", "stale", "peak_frontier"]:
        if metric not in df.columns:
            continue
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, df, metric, log=args.log)
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        plt.close(fig)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
