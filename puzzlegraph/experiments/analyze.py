#!/usr/bin/env python3
import argparse, os
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

METRICS = ("expanded", "generated", "duplicates", "stale", "peak_frontier", "time_sec")
KEYS = ("algorithm", "domain", "heuristic", "depth")

def load_results(paths: Iterable[str], ok_only: bool = True) -> pd.DataFrame:
    """Concatenate runner CSVs; unreadable files are skipped with a notice."""
    dfs = []
    for fn in paths:
        try:
            df = pd.read_csv(fn)
        except Exception as e:
            print(f"skip {fn}: {e}")
            continue
        df["__src__"] = os.path.basename(fn)
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    if ok_only and "termination" in df.columns:
        df = df[df["termination"].fillna("ok") == "ok"]

    for c in ("depth", "seed", "g") + METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def sem(x) -> float:
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else float(np.nanstd(x, ddof=1) / np.sqrt(n))

def summarize(df: pd.DataFrame, metrics: Sequence[str] = METRICS) -> pd.DataFrame:
    """mean / median / min / max / std / sem per (algorithm, domain, heuristic, depth)."""
    keys = [k for k in KEYS if k in df.columns]
    metrics = [m for m in metrics if m in df.columns]
    if df.empty or not keys or not metrics:
        return pd.DataFrame()
    # crucible rows have no depth; keep them as their own group
    return df.groupby(keys, dropna=False)[metrics].agg(["mean", "median", "min", "max", "std", sem])

def compare(df: pd.DataFrame, base: str, other: str, metrics: Sequence[str] = ("expanded", "generated", "time_sec")) -> pd.DataFrame:
    """Mean of each metric for two algorithms side by side, with other/base ratio, per depth."""
    sub = df[df["algorithm"].isin([base, other])]
    if sub.empty:
        return pd.DataFrame()
    means = sub.groupby(["depth", "algorithm"])[list(metrics)].mean().unstack("algorithm")
    rows: List[dict] = []
    for depth, r in means.iterrows():
        for m in metrics:
            a, b = r.get((m, base), np.nan), r.get((m, other), np.nan)
            if pd.isna(a) or pd.isna(b):
                continue
            rows.append({"depth": depth, "metric": m, base: a, other: b,
                         "ratio": (b / a) if a > 0 else float("inf")})
    return pd.DataFrame(rows)

def print_comparison(table: pd.DataFrame, base: str, other: str):
    print("=" * 80)
    print(f"Comparison between {base} and {other}")
    print("=" * 80)
    if table.empty:
        print("(no overlapping depths)")
        return
    for depth, grp in table.groupby("depth"):
        print(f"\nDepth {depth:g}:")
        print("-" * 60)
        print(f"{'Metric':<15} {base + ' (avg)':<15} {other + ' (avg)':<15} {'Ratio':<15}")
        for _, r in grp.iterrows():
            print(f"{r['metric']:<15} {r[base]:<15.2f} {r[other]:<15.2f} {r['ratio']:<15.2f}")

def main():
    ap = argparse.ArgumentParser(description="Summary statistics for runner CSVs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--compare", nargs=2, metavar=("BASE", "OTHER"), default=None,
                    help="Two algorithm names, e.g. BFS A*")
    ap.add_argument("--all_rows", action="store_true", help="Keep timeout/exhausted rows")
    args = ap.parse_args()

    df = load_results(args.csv, ok_only=not args.all_rows)
    if df.empty:
        print("No rows to analyze. Are your CSVs empty?")
        return
    with pd.option_context("display.width", 200, "display.max_columns", None):
        print(summarize(df))
    if args.compare:
        base, other = args.compare
        print_comparison(compare(df, base, other), base, other)

if __name__ == "__main__":
    main()
