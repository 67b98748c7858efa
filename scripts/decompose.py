#!/usr/bin/env python3
"""
Decompose a .poly polygon into slab regions.

Usage:
    python3 scripts/decompose.py polygon.poly [--output out.slab] [--nudge] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

from slabsweep import SweepError, decompose, nudge_coincident_x, polygon_area
from slabsweep.config import NUDGE_STEP
from slabsweep.io import read_poly, write_regions


def log(msg: str) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Slab decomposition of a simple polygon")
    parser.add_argument("input", type=Path, help="Input .poly file")
    parser.add_argument("--output", type=Path, default=None,
                        help="Output .slab file (default: input with .slab suffix)")
    parser.add_argument("--nudge", action="store_true",
                        help="Separate coincident x values before sweeping")
    parser.add_argument("--step", type=float, default=NUDGE_STEP,
                        help=f"Nudge step (default: {NUDGE_STEP})")
    parser.add_argument("--verbose", action="store_true", help="Log every sweep event")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    pts = read_poly(args.input)
    if args.nudge:
        pts = nudge_coincident_x(pts, args.step)

    try:
        t0 = time.perf_counter()
        result = decompose(pts)
        elapsed_ms = (time.perf_counter() - t0) * 1000
    except SweepError as e:
        log(f"ERROR: {e}")
        return 1

    out_path = args.output or args.input.with_suffix(".slab")
    write_regions(result.regions, out_path)

    poly_area = polygon_area(pts)
    slab_area = result.area
    triangles = result.triangles()
    log(f"n={len(pts)} regions={len(result.regions)} cuts={len(result.cuts)} "
        f"triangles={len(triangles)} time={elapsed_ms:.3f}ms")
    status = "OK" if result.covers(pts) else "MISMATCH"
    log(f"area: polygon={poly_area:.6f} slabs={slab_area:.6f} [{status}]")
    log(f"Regions saved to {out_path}")
    return 0 if status == "OK" else 2


if __name__ == "__main__":
    sys.exit(main())
