"""
draw_plan.py — The ordered list of drawing calls that makes one shaded figure

This file contains ONLY:
- the draw operations (curve, polygon fill, axis, box)
- DrawPlan (an ordered, immutable list of operations + execute())
- build_draw_plan (region + polygons -> DrawPlan)

Order is fixed:
  1. density curve over the whole domain, no axes
  2. fills (for two-tailed regions: whole domain, then the middle erased)
  3. the curve again, stroked on top so fill edges are covered
  4. axis 1 (bottom), axis 2 (left)
  5. L-shaped box

Every polygon is evaluated while the plan is built, so density failures
surface before anything reaches the surface.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .densities import DensityFunction
from .options import ShadeConfig
from .regions import ERASE, Polygon, Region, build_polygons
from .surface import GraphicsSurface
from .utils import fmt_num, setup_logger

logger = setup_logger(__name__)


# ============================================================================
# OPERATIONS
# ============================================================================

@dataclass(frozen=True)
class DrawCurve:
    x_start: float
    x_end: float
    add: bool = False
    color: Optional[str] = None
    line_width: Optional[float] = None
    y_label: Optional[str] = None
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    kind = "curve"

    def apply(self, surface: GraphicsSurface, density: DensityFunction) -> None:
        surface.draw_curve(
            density,
            self.x_start,
            self.x_end,
            add=self.add,
            color=self.color,
            line_width=self.line_width,
            y_label=self.y_label,
            options=dict(self.options),
        )


@dataclass(frozen=True)
class FillPolygon:
    polygon: Polygon
    color: str
    role: str

    kind = "fill"

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.polygon.bounds

    def apply(self, surface: GraphicsSurface, density: DensityFunction) -> None:
        surface.fill_polygon(self.polygon.xs, self.polygon.ys, self.color)


@dataclass(frozen=True)
class DrawAxis:
    side: int

    kind = "axis"

    def apply(self, surface: GraphicsSurface, density: DensityFunction) -> None:
        surface.draw_axis(self.side)


@dataclass(frozen=True)
class DrawBox:
    style: str = "l"

    kind = "box"

    def apply(self, surface: GraphicsSurface, density: DensityFunction) -> None:
        surface.draw_box(self.style)


# ============================================================================
# PLAN
# ============================================================================

@dataclass(frozen=True)
class DrawPlan:
    region: Region
    ops: Tuple[Any, ...]
    # set once the plan has been executed; not part of the plan's identity
    surface: Optional[Any] = field(default=None, compare=False, repr=False)

    def __iter__(self):
        return iter(self.ops)

    def __len__(self) -> int:
        return len(self.ops)

    @property
    def fills(self) -> List[FillPolygon]:
        return [op for op in self.ops if isinstance(op, FillPolygon)]

    def kinds(self) -> List[str]:
        return [op.kind for op in self.ops]

    def execute(self, surface: GraphicsSurface, density: DensityFunction) -> None:
        """Apply every op in order. The first failure aborts the rest."""
        for i, op in enumerate(self.ops):
            logger.debug("Draw step %d/%d: %s", i + 1, len(self.ops), op.kind)
            op.apply(surface, density)

    def drawn_on(self, surface: GraphicsSurface) -> "DrawPlan":
        return dataclasses.replace(self, surface=surface)


def build_draw_plan(
    density: DensityFunction,
    region: Region,
    config: ShadeConfig,
    options: Optional[Dict[str, Any]] = None,
) -> DrawPlan:
    options = dict(options or {})

    def frozen_options() -> Mapping[str, Any]:
        return MappingProxyType(dict(options))

    ops: List[Any] = [
        DrawCurve(region.x_start, region.x_end, add=False, y_label=config.y_label, options=frozen_options()),
    ]

    for polygon, role in build_polygons(density, region, config.break_count):
        color = config.erase_color if role == ERASE else config.shade_color
        ops.append(FillPolygon(polygon=polygon, color=color, role=role))

    ops.append(
        DrawCurve(
            region.x_start,
            region.x_end,
            add=True,
            color=config.line_color,
            line_width=config.line_width,
            options=frozen_options(),
        )
    )
    ops.extend([DrawAxis(1), DrawAxis(2), DrawBox("l")])

    logger.debug(
        "Draw plan for [%s, %s]%s: %s",
        fmt_num(region.lo), fmt_num(region.hi),
        " (two-tailed)" if region.two_tailed else "",
        " -> ".join(op.kind for op in ops),
    )
    return DrawPlan(region=region, ops=tuple(ops))
