"""
regions.py — Which part of the curve gets shaded, and the polygons that shade it

This file contains ONLY:
- region type matching ("lower" / "middle" / "upper" / "two")
- boundary normalisation: (a, b, type, x_start, x_end) -> Region
- polygon construction under the density curve

It intentionally does NOT draw anything. Drawing order lives in draw_plan.py
and the actual matplotlib calls live in surface.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import numpy as np

from .densities import DensityFunction
from .errors import InvalidArgument
from .utils import fmt_num, safe_float, setup_logger

logger = setup_logger(__name__)

REGION_TYPES: Tuple[str, ...] = ("lower", "middle", "upper", "two")

# Polygon roles understood by the draw plan
SHADE = "shade"
ERASE = "erase"


# ============================================================================
# REGION TYPE
# ============================================================================

def match_region_type(value: Any) -> str:
    """
    Resolve a region type. Case-insensitive; a unique prefix is enough
    ("mid" -> "middle", "up" -> "upper").
    """
    key = str(value if value is not None else "").strip().lower()
    if key in REGION_TYPES:
        return key

    candidates = [t for t in REGION_TYPES if key and t.startswith(key)]
    if len(candidates) == 1:
        return candidates[0]

    raise InvalidArgument(
        f"Region type must be one of {', '.join(REGION_TYPES)}; got {value!r}"
    )


# ============================================================================
# BOUNDARY NORMALISATION
# ============================================================================

@dataclass(frozen=True)
class Region:
    """
    The fill region [lo, hi] plus the curve domain it was derived from.

    two_tailed=True means [lo, hi] is the middle that gets overpainted after
    the whole domain is shaded, so only the two tails stay coloured.
    """
    lo: float
    hi: float
    two_tailed: bool
    x_start: float
    x_end: float

    @property
    def bounds(self) -> Tuple[float, float]:
        return (self.lo, self.hi)

    @property
    def domain(self) -> Tuple[float, float]:
        return (self.x_start, self.x_end)


def _boundary(name: str, value: Any) -> Optional[float]:
    if value is None:
        return None
    v = safe_float(value)
    if v is None:
        raise InvalidArgument(f"Boundary '{name}' must be a finite number, got {value!r}")
    return v


def normalize_region(
    a: Any,
    b: Any,
    region_type: Any,
    x_start: float,
    x_end: float,
) -> Region:
    """
    Turn the user's (a, b, type) into the concrete region to fill.

    Order matters and is kept as-is: defaults are applied before the type
    expansion, so which error fires for a missing boundary does not depend on
    the type-specific rewrite.
    """
    rtype = match_region_type(region_type)
    a = _boundary("a", a)
    b = _boundary("b", b)

    if a is None and b is None:
        raise InvalidArgument("At least one boundary (a or b) must be given")

    supplied = [v for v in (a, b) if v is not None]
    if rtype in ("middle", "two") and len(supplied) <= 1:
        raise InvalidArgument(f"Region type '{rtype}' needs both a and b")

    if len(supplied) == 2:
        a, b = min(supplied), max(supplied)

    if a is None and b is not None:
        a = b

    if rtype == "lower":
        b = a
        a = x_start
    elif rtype == "upper":
        # only `a` given: it is the cut point
        a = b if b is not None else a
        b = x_end

    x_start = float(x_start)
    x_end = float(x_end)
    if not x_start < x_end:
        logger.warning("Curve domain is empty or reversed: from=%s to=%s", fmt_num(x_start), fmt_num(x_end))
    elif a < x_start or b > x_end:
        logger.warning(
            "Region [%s, %s] extends past the curve domain [%s, %s]",
            fmt_num(a), fmt_num(b), fmt_num(x_start), fmt_num(x_end),
        )

    region = Region(lo=float(a), hi=float(b), two_tailed=(rtype == "two"), x_start=x_start, x_end=x_end)
    logger.debug("Normalised %s region -> [%s, %s]", rtype, fmt_num(region.lo), fmt_num(region.hi))
    return region


# ============================================================================
# POLYGONS
# ============================================================================

@dataclass(frozen=True, eq=False)
class Polygon:
    """
    Closed outline under the density between xs[0] and xs[-1].

    Vertices run (lo, 0) -> samples along the curve -> (hi, 0), so the shape
    closes against the x axis.
    """
    xs: np.ndarray
    ys: np.ndarray

    def __len__(self) -> int:
        return int(self.xs.shape[0])

    @property
    def bounds(self) -> Tuple[float, float]:
        return (float(self.xs[0]), float(self.xs[-1]))

    @property
    def vertices(self) -> np.ndarray:
        return np.column_stack([self.xs, self.ys])

    @property
    def area(self) -> float:
        # shoelace; only approximates the integral, and only for display checks
        x, y = self.xs, self.ys
        return float(0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))


def sample_polygon(density: DensityFunction, lo: float, hi: float, break_count: int) -> Polygon:
    """
    break_count + 1 evenly spaced samples over [lo, hi], closed with zero-height ends.
    Low break counts give a visibly faceted outline; that is the caller's trade-off.
    """
    if break_count < 1:
        raise InvalidArgument(f"break_count must be >= 1, got {break_count}")

    x = np.linspace(lo, hi, break_count + 1)
    y = density.evaluate(x)

    xs = np.concatenate(([lo], x, [hi])).astype(float)
    ys = np.concatenate(([0.0], y, [0.0])).astype(float)
    xs.setflags(write=False)
    ys.setflags(write=False)
    return Polygon(xs=xs, ys=ys)


def build_polygons(density: DensityFunction, region: Region, break_count: int) -> List[Tuple[Polygon, str]]:
    """
    Polygons to fill, in paint order, each tagged SHADE or ERASE.

    Two-tailed regions are painted as "whole domain, then the middle in the
    background colour". Callers only see the roles, so a true two-piece fill
    can replace this without touching the draw order.
    """
    polygons: List[Tuple[Polygon, str]] = []

    if region.two_tailed:
        polygons.append((sample_polygon(density, region.x_start, region.x_end, break_count), SHADE))
        polygons.append((sample_polygon(density, region.lo, region.hi, break_count), ERASE))
    else:
        polygons.append((sample_polygon(density, region.lo, region.hi, break_count), SHADE))

    logger.debug(
        "Built %d polygon(s) with %d vertices each",
        len(polygons), len(polygons[0][0]),
    )
    return polygons
