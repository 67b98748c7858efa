#!/usr/bin/env python3
"""
Benchmark the slab sweep across polygon families and sizes.

Writes one CSV row per run, then summarises with pandas and fits
T = a * n^b per family (the sweep is O(n^2) worst case).

Usage:
    python3 scripts/benchmark.py [--sizes N1,N2,...] [--runs R]
"""

from __future__ import annotations

import argparse
import sys
import time
from datetime import datetime
from pathlib import Path

import numpy as np
import pandas as pd

from slabsweep import SweepError, decompose, polygon_area
from slabsweep.polygons import GENERATORS, generate

ROOT = Path(__file__).resolve().parent.parent
RESULTS_DIR = ROOT / "results"


def log(msg: str) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def fit_power_law(x, y):
    """Fit T = a * n^b; returns (a, b) or (None, None) with too few points."""
    valid = (y > 0) & (x > 0)
    if np.sum(valid) < 2:
        return None, None
    coeffs = np.polyfit(np.log(x[valid]), np.log(y[valid]), 1)
    return float(np.exp(coeffs[1])), float(coeffs[0])


def run_once(pts):
    t0 = time.perf_counter()
    result = decompose(pts)
    time_ms = (time.perf_counter() - t0) * 1000
    area_err = abs(result.area - polygon_area(pts))
    return time_ms, len(result.regions), area_err


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark slab decomposition")
    parser.add_argument("--sizes", default="50,100,200,400",
                        help="Comma-separated polygon sizes (default: 50,100,200,400)")
    parser.add_argument("--runs", type=int, default=5,
                        help="Number of runs per configuration (default: 5)")
    parser.add_argument("--types", default="convex,random,star,spiral",
                        help="Comma-separated polygon families (default: convex,random,star,spiral)")
    parser.add_argument("--out-csv", default=str(RESULTS_DIR / "slab_benchmark_raw.csv"),
                        help="Output CSV path for per-run results")
    args = parser.parse_args()

    sizes = [int(s.strip()) for s in args.sizes.split(",")]
    selected_types = [t.strip() for t in args.types.split(",") if t.strip()]
    unknown = sorted(set(selected_types) - set(GENERATORS))
    if unknown:
        log(f"ERROR: Unknown polygon types: {unknown} (known: {sorted(GENERATORS)})")
        sys.exit(2)

    log(f"Starting benchmark: sizes={sizes}, runs={args.runs}, types={selected_types}")

    rows = []
    for ptype in selected_types:
        log(f"=== {ptype.upper()} polygons ===")
        for n in sizes:
            for seed in range(args.runs):
                pts = generate(ptype, n, seed=seed)
                try:
                    time_ms, regions, area_err = run_once(pts)
                except SweepError as e:
                    log(f"  n={n} seed={seed}: FAILED ({e})")
                    continue
                rows.append({
                    "polygon_type": ptype, "n": len(pts), "seed": seed,
                    "time_ms": time_ms, "regions": regions, "area_err": area_err,
                })

    if not rows:
        log("No successful runs.")
        sys.exit(1)

    df = pd.DataFrame(rows)
    out_csv_path = Path(args.out_csv)
    out_csv_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_csv_path, index=False)
    log(f"Raw per-run results saved to {out_csv_path}")

    summary = df.groupby(["polygon_type", "n"]).agg(
        time_ms=("time_ms", "mean"),
        std_ms=("time_ms", "std"),
        regions=("regions", "mean"),
        max_area_err=("area_err", "max"),
    ).reset_index()

    log("=" * 70)
    log(f"{'Type':<10} {'n':>8} {'mean (ms)':>12} {'std':>10} {'regions':>10} {'area err':>12}")
    log("-" * 70)
    for rec in summary.itertuples(index=False):
        std = 0.0 if pd.isna(rec.std_ms) else rec.std_ms
        log(f"{rec.polygon_type:<10} {rec.n:>8,} {rec.time_ms:>12.3f} {std:>10.3f} "
            f"{rec.regions:>10.1f} {rec.max_area_err:>12.2e}")

    log("-" * 70)
    for ptype, grp in summary.groupby("polygon_type"):
        a, b = fit_power_law(grp["n"].to_numpy(dtype=float), grp["time_ms"].to_numpy(dtype=float))
        if b is not None:
            log(f"{ptype:<10} T ~ {a:.3g} * n^{b:.2f}")
    log("Benchmark complete!")


if __name__ == "__main__":
    main()
