#!/usr/bin/env python3
"""
Generate deterministic polygon datasets for the slab sweep.
The format is:
N
x0 y0
x1 y1
...
"""

import argparse
from pathlib import Path

from slabsweep.io import write_poly
from slabsweep.polygons import GENERATORS, generate, is_simple


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="polygons/generated", type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 50, 100, 500, 1000],
    )
    parser.add_argument("--types", nargs="+", default=sorted(GENERATORS))
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--no-rotate", action="store_true",
                        help="Keep raw coordinates (may contain equal x values)")
    args = parser.parse_args()

    for n in args.sizes:
        for kind in args.types:
            pts = generate(kind, n, seed=args.seed, rotate=not args.no_rotate)
            if not is_simple(pts):
                print(f"[WARN] {kind}_{n} is not simple, skipped")
                continue
            write_poly(pts, args.output / f"{kind}_{n}.poly")

    print(f"Generated polygons in {args.output}")


if __name__ == "__main__":
    main()
