#!/usr/bin/env python3
"""
Render a slab decomposition to PNG: regions, vertical cuts and the
derived triangulation, side by side.

Usage:
    python3 scripts/visualize.py polygon.poly [--output slabs.png] [--nudge]
    python3 scripts/visualize.py --family star --n 20
"""

import argparse
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from slabsweep import SweepError, decompose, nudge_coincident_x
from slabsweep.io import read_poly
from slabsweep.polygons import GENERATORS, generate

plt.rcParams['font.size'] = 10
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['figure.figsize'] = (12, 6)

COLORS = {
    'region': '#377eb8',    # Blue - slabs
    'triangle': '#4daf4a',  # Green - triangles
    'cut': '#e41a1c',       # Red - vertical cuts
}


def plot_outline(vertices, ax):
    poly_closed = np.vstack([vertices, vertices[0]])
    ax.plot(poly_closed[:, 0], poly_closed[:, 1], 'k-', linewidth=1.5)
    ax.scatter(vertices[:, 0], vertices[:, 1], c='black', s=20, zorder=5)


def plot_regions(vertices, result, ax):
    """Slabs with alternating shade plus vertical cuts."""
    patches = [MplPolygon(np.array(r.corners), closed=True) for r in result.regions]
    shades = np.arange(len(patches)) % 2
    p = PatchCollection(patches, alpha=0.45, cmap='Blues', edgecolor='#333333', linewidth=0.5)
    p.set_array(0.3 + 0.4 * shades)
    p.set_clim(0, 1)
    ax.add_collection(p)

    segments = [[c.vertex, c.endpoint] for c in result.cuts]
    if segments:
        ax.add_collection(LineCollection(segments, colors=COLORS['cut'], linewidths=1.0,
                                         linestyles='dashed'))

    plot_outline(vertices, ax)
    ax.set_aspect('equal')
    ax.set_title(f'{len(result.regions)} regions, {len(result.cuts)} cuts')


def plot_triangles(vertices, triangles, ax):
    patches = [MplPolygon(np.array(t), closed=True) for t in triangles]
    p = PatchCollection(patches, alpha=0.4, facecolor=COLORS['triangle'],
                        edgecolor='#333333', linewidth=0.5)
    ax.add_collection(p)
    plot_outline(vertices, ax)
    ax.set_aspect('equal')
    ax.set_title(f'{len(triangles)} triangles')


def main():
    parser = argparse.ArgumentParser(description="Visualize slab decomposition")
    parser.add_argument("input", nargs="?", type=Path, help="Input .poly file")
    parser.add_argument("--family", choices=sorted(GENERATORS), help="Use a generated polygon instead")
    parser.add_argument("--n", type=int, default=20, help="Vertex count for --family")
    parser.add_argument("--nudge", action="store_true", help="Separate coincident x values first")
    parser.add_argument("--output", type=Path, default=Path("slabs.png"))
    args = parser.parse_args()

    if args.family:
        pts = generate(args.family, args.n)
        name = f"{args.family}_{args.n}"
    elif args.input:
        pts = read_poly(args.input)
        name = args.input.stem
    else:
        parser.error("give an input file or --family")

    if args.nudge:
        pts = nudge_coincident_x(pts)

    try:
        result = decompose(pts)
    except SweepError as e:
        print(f"Error: {e}")
        sys.exit(1)

    vertices = np.array(pts)
    fig, axes = plt.subplots(1, 2)
    plot_regions(vertices, result, axes[0])
    plot_triangles(vertices, result.triangles(), axes[1])

    plt.suptitle(f'Slab decomposition: {name}', fontsize=16)
    plt.tight_layout()
    args.output.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(args.output, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"Figure saved to {args.output}")


if __name__ == '__main__':
    main()
