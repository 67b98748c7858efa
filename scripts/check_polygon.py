#!/usr/bin/env python3
"""Report whether a .poly polygon can be swept as-is."""
import sys

from slabsweep import PreconditionError, check_sweepable
from slabsweep.io import read_poly
from slabsweep.polygons import find_self_intersections

if len(sys.argv) != 2:
    print(f"usage: {sys.argv[0]} polygon.poly")
    sys.exit(2)

pts = read_poly(sys.argv[1])
n = len(pts)

# Check for self-intersections
hits = find_self_intersections(pts)
for i, j in hits[:4]:
    print(f'Intersection: edge {i}-{(i+1)%n} with {j}-{(j+1)%n}')
print(f'Total intersections: {len(hits)}')
print(f'Polygon vertices: {n}')

try:
    check_sweepable(pts)
    print('Sweep preconditions: OK')
except PreconditionError as e:
    print(f'Sweep preconditions: FAIL ({e})')
    sys.exit(1)

sys.exit(1 if hits else 0)
