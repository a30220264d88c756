"""
errors.py — Exception types raised by shade_dist.

All of them derive from ShadeDistError so an enclosing tool can catch the
package's failures in one place and surface them as a user-facing message.
"""


class ShadeDistError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(ShadeDistError, ValueError):
    """Bad boundaries, region type or configuration. Raised before anything is drawn."""


class DensityEvaluationError(ShadeDistError, ValueError):
    """The density could not produce finite values for the requested points."""


class GraphicsSurfaceError(ShadeDistError, RuntimeError):
    """The drawing surface rejected a primitive (unknown colour, closed figure, ...)."""
