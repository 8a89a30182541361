"""Error taxonomy for the geometric and lighting core.

Every condition that would otherwise leak NaN or Inf into downstream
computation is raised as one of these exceptions instead. Each error also
derives from the builtin exception a caller would naturally expect, so
``except ValueError`` or ``except ZeroDivisionError`` keep working.

No-intersection is not an error: a ray that misses simply produces an
empty ``Intersections`` collection.
"""


class RayKernelError(Exception):
    """Base class for all errors raised by raykernel."""


class NotInvertibleError(RayKernelError, ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


class DegenerateDirectionError(RayKernelError, ValueError):
    """Raised when a ray with a zero-length direction is intersected."""


class ZeroMagnitudeError(RayKernelError, ZeroDivisionError):
    """Raised when normalizing a tuple of zero magnitude."""
