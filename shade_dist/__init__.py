"""
shade_dist — Shade regions under continuous probability densities.

Draws a density curve over an interval and shades the lower tail, the upper
tail, a middle interval, or both tails, for statistics teaching material.

    from shade_dist import shade_region
    shade_region("dnorm", {"mean": 0, "sd": 1}, a=0, b=1, type="two",
                 x_start=-3, x_end=3)

Requires: pip install numpy scipy matplotlib python-dotenv
"""

from .densities import CallableDensity, DensityFunction, ScipyDensity, get_density
from .draw_plan import DrawAxis, DrawBox, DrawCurve, DrawPlan, FillPolygon, build_draw_plan
from .errors import DensityEvaluationError, GraphicsSurfaceError, InvalidArgument, ShadeDistError
from .options import ShadeConfig
from .plotter import plot_shaded_density, shade_region
from .regions import REGION_TYPES, Polygon, Region, build_polygons, normalize_region, sample_polygon
from .surface import GraphicsSurface, MatplotlibSurface

__all__ = [
    "CallableDensity",
    "DensityEvaluationError",
    "DensityFunction",
    "DrawAxis",
    "DrawBox",
    "DrawCurve",
    "DrawPlan",
    "FillPolygon",
    "GraphicsSurface",
    "GraphicsSurfaceError",
    "InvalidArgument",
    "MatplotlibSurface",
    "Polygon",
    "REGION_TYPES",
    "Region",
    "ScipyDensity",
    "ShadeConfig",
    "ShadeDistError",
    "build_draw_plan",
    "build_polygons",
    "get_density",
    "normalize_region",
    "plot_shaded_density",
    "sample_polygon",
    "shade_region",
]
