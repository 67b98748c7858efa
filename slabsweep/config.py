"""
Numeric tolerances and fixed constants shared by the sweep.

Approximate comparisons of y-coordinates use an absolute tolerance of
``ABS_TOL + REL_TOL * extent``, where extent is the largest x or y span of
the edges being compared. Functions that take a tolerance accept it as a
keyword and fall back to these values.
"""

# ---------------------------------------------------------------
# APPROXIMATE EQUALITY
# ---------------------------------------------------------------

REL_TOL = 1e-6      # relative part, scaled by edge extent
ABS_TOL = 1e-9      # absolute floor for values near zero

# Triangles at or below this area are dropped as degenerate
AREA_TOL = 1e-12

# Relative slack when checking slab area against polygon area
AREA_CHECK_TOL = 1e-6


# ---------------------------------------------------------------
# INPUT PREPARATION
# ---------------------------------------------------------------

# Default shift applied to vertices whose x repeats an earlier one
NUDGE_STEP = 1e-6

# Fixed rotation (radians) to avoid equal-x degeneracies in generated polygons.
ROT_ANGLE = 0.123456789
