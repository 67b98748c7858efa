"""
Exceptions raised by the slab sweep.

PreconditionError -- the caller supplied a polygon the sweep cannot take.
InvariantError    -- the sweep reached a state a simple polygon never produces.
"""


class SweepError(Exception):
    """Base class for every error raised by slabsweep."""


class PreconditionError(SweepError, ValueError):
    """Input polygon violates a sweep precondition (too few vertices, vertical edge, shared x)."""


class InvariantError(SweepError, RuntimeError):
    """Internal sweep state is inconsistent, usually because the input is not simple."""
