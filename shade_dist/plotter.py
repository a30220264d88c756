"""
plotter.py — shade_dist entry points (controller/orchestrator)

This file contains ONLY:
- shade_region (main entry point: density + region -> drawn figure)
- plot_shaded_density (dict-config front end, returns a Figure)

Region maths lives in `regions.py`, draw order in `draw_plan.py`,
matplotlib calls in `surface.py`.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import matplotlib.pyplot as plt

from .densities import DensityLike, get_density
from .draw_plan import DrawPlan, build_draw_plan
from .errors import InvalidArgument
from .options import ShadeConfig
from .regions import normalize_region
from .surface import GraphicsSurface, MatplotlibSurface
from .utils import safe_float, setup_logger

logger = setup_logger(__name__)


# ============================================================================
# MAIN ENTRY POINT
# ============================================================================

def shade_region(
    dist: DensityLike = "dnorm",
    params: Optional[Mapping[str, Any]] = None,
    a: Optional[float] = None,
    b: Optional[float] = None,
    type: str = "lower",  # noqa: A002 - mirrors the usual lower/upper/middle/two wording
    *,
    x_start: float,
    x_end: float,
    config: Optional[ShadeConfig] = None,
    surface: Optional[GraphicsSurface] = None,
    **options: Any,
) -> DrawPlan:
    """
    Draw a continuous density over [x_start, x_end] and shade part of it.

    type:
      'lower'  -> [x_start, a]
      'upper'  -> [b, x_end]
      'middle' -> [a, b]
      'two'    -> both tails outside [a, b]

    ``a``/``b`` may be given in either order. Keyword overrides for
    ShadeConfig fields (shade_color, line_color, line_width, break_count,
    y_label, erase_color, curve_points) are folded into ``config``; anything
    else in ``options`` goes to the surface (title, x_label, x_lim, y_lim, grid).

    Returns the executed DrawPlan; ``plan.surface`` is the surface it was
    drawn on (for the default surface, ``plan.surface.fig`` is the new
    matplotlib Figure). Raises InvalidArgument before drawing for
    bad arguments, DensityEvaluationError if the density cannot be evaluated,
    and lets surface errors through unchanged.

    Example:
        shade_region("dnorm", {"mean": 0, "sd": 1}, a=0, b=1, type="middle",
                     x_start=-3, x_end=3)
    """
    config = config or ShadeConfig()
    overrides = {k: options.pop(k) for k in list(options) if k in ShadeConfig.field_names()}
    if overrides:
        config = config.replace(**overrides)
    config.validate()

    density = get_density(dist, params)
    region = normalize_region(a, b, type, x_start, x_end)
    plan = build_draw_plan(density, region, config, options)

    owns_surface = surface is None
    if owns_surface:
        surface = MatplotlibSurface(curve_points=config.curve_points)

    logger.info(
        "Shading %s on [%s, %s] of %r",
        "two tails outside" if region.two_tailed else "region",
        region.lo, region.hi, density,
    )
    try:
        plan.execute(surface, density)
    except Exception:
        # The caller never saw this figure, so it must not stay open in pyplot.
        if owns_surface:
            surface.close()
        raise
    return plan.drawn_on(surface)


# ============================================================================
# DICT CONFIG FRONT END
# ============================================================================

def _first_present(config: Dict[str, Any], *keys: str) -> Any:
    for k in keys:
        if config.get(k) is not None:
            return config[k]
    return None


def plot_shaded_density(config: Dict[str, Any]) -> plt.Figure:
    """
    Build a shaded-density figure from a JSON-style config.

    Expected shape:
    {
      "distribution": "dnorm",
      "params": {"mean": 0, "sd": 1},
      "a": 0, "b": 1,                 // either may be omitted (see shade_region)
      "type": "middle",               // lower | upper | middle | two (default lower)
      "from": -3, "to": 3,            // or x_start / x_end
      "title": "P(0 < Z < 1)",        // optional
      "x_label": "z",                 // optional
      "x_lim": [-4, 4], "y_lim": [0, 0.5],   // optional
      "style": {"shade_color": "tomato", "break_count": 200}   // optional ShadeConfig fields
    }
    """
    if not isinstance(config, dict):
        raise TypeError("Config must be a dictionary")

    x_start = safe_float(_first_present(config, "from", "x_start", "x_min"))
    x_end = safe_float(_first_present(config, "to", "x_end", "x_max"))
    if x_start is None or x_end is None:
        raise InvalidArgument("Config must give numeric 'from' and 'to' for the curve domain")

    style = config.get("style") or {}
    if not isinstance(style, dict):
        raise TypeError("'style' must be a dictionary of ShadeConfig fields")
    shade_config = ShadeConfig.from_settings().replace(**style)

    options: Dict[str, Any] = {}
    for key in ("title", "x_label", "x_lim", "y_lim", "grid"):
        if config.get(key) is not None:
            options[key] = config[key]

    surface = MatplotlibSurface(curve_points=shade_config.curve_points)
    try:
        shade_region(
            config.get("distribution", "dnorm"),
            config.get("params"),
            a=config.get("a"),
            b=config.get("b"),
            type=str(config.get("type", "lower")),
            x_start=x_start,
            x_end=x_end,
            config=shade_config,
            surface=surface,
            **options,
        )
    except Exception:
        # No half-drawn figures left open in pyplot.
        surface.close()
        raise

    try:
        surface.fig.tight_layout()
    except Exception:
        # Never crash plotting due to layout.
        pass

    return surface.fig
