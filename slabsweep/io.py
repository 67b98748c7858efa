"""
Plain-text polygon and region files.

.poly   N, then N lines "x y"
.slab   M, then M lines of 8 floats: the four region corners in emitter order

Lines starting with '#' and blank lines are ignored on read.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from .geometry import Point
from .regions import Region

PathLike = Union[str, Path]


def _data_lines(path: PathLike) -> List[tuple]:
    with open(path, "r", encoding="utf-8") as f:
        return [(no, line.strip()) for no, line in enumerate(f, 1)
                if line.strip() and not line.lstrip().startswith("#")]


def _read_count(lines, path) -> int:
    if not lines:
        raise ValueError(f"{path}: empty file")
    no, text = lines[0]
    try:
        count = int(text)
    except ValueError:
        raise ValueError(f"{path}:{no}: expected a count, got {text!r}") from None
    if count < 0:
        raise ValueError(f"{path}:{no}: negative count {count}")
    if len(lines) - 1 < count:
        raise ValueError(f"{path}: header says {count} records, found {len(lines) - 1}")
    return count


def _floats(no: int, text: str, expected: int, path) -> List[float]:
    parts = text.split()
    if len(parts) != expected:
        raise ValueError(f"{path}:{no}: expected {expected} numbers, got {len(parts)}")
    try:
        return [float(p) for p in parts]
    except ValueError:
        raise ValueError(f"{path}:{no}: not a number in {text!r}") from None


def write_poly(points: Sequence[Point], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"{len(points)}\n")
        for x, y in points:
            # Full precision so a round trip cannot merge distinct x values.
            f.write(f"{x:.17g} {y:.17g}\n")


def read_poly(path: PathLike) -> List[Point]:
    lines = _data_lines(path)
    n = _read_count(lines, path)
    pts = []
    for no, text in lines[1:n + 1]:
        x, y = _floats(no, text, 2, path)
        pts.append((x, y))
    return pts


def write_regions(regions: Sequence[Region], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# slab regions: upper@prev upper@cur lower@cur lower@prev\n")
        f.write(f"{len(regions)}\n")
        for region in regions:
            f.write(" ".join(f"{c:.17g}" for corner in region.corners for c in corner) + "\n")


def read_regions(path: PathLike) -> List[Region]:
    lines = _data_lines(path)
    m = _read_count(lines, path)
    regions = []
    for no, text in lines[1:m + 1]:
        v = _floats(no, text, 8, path)
        regions.append(Region(((v[0], v[1]), (v[2], v[3]), (v[4], v[5]), (v[6], v[7]))))
    return regions
