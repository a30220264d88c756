"""
surface.py — Where the drawing actually happens

This file contains ONLY:
- GraphicsSurface: the four primitives a draw plan needs
- MatplotlibSurface: those primitives on a matplotlib Axes

matplotlib normally layers by artist type (patches under lines). Here every
call gets the next zorder instead, so the figure is layered strictly in call
order, the same way a pen-on-paper device would paint it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import is_color_like
from matplotlib.patches import Polygon as PolygonPatch

from . import settings
from .errors import GraphicsSurfaceError
from .utils import setup_logger

logger = setup_logger(__name__)


class GraphicsSurface(Protocol):
    def draw_curve(
        self,
        density: Any,
        x_start: float,
        x_end: float,
        *,
        add: bool = False,
        color: Optional[str] = None,
        line_width: Optional[float] = None,
        y_label: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        ...

    def fill_polygon(self, xs: Sequence[float], ys: Sequence[float], color: str) -> None:
        ...

    def draw_axis(self, side: int) -> None:
        ...

    def draw_box(self, style: str) -> None:
        ...


# Figure options accepted by the first (non-add) curve call
CURVE_OPTIONS = frozenset({"title", "x_label", "x_lim", "y_lim", "grid"})

# side -> (tick_params axis, tick flag, label flag)
_AXIS_SIDES: Dict[int, Tuple[str, str, str]] = {
    1: ("x", "bottom", "labelbottom"),
    2: ("y", "left", "labelleft"),
    3: ("x", "top", "labeltop"),
    4: ("y", "right", "labelright"),
}

# box style -> visible spines (same letters as base R's bty)
_BOX_STYLES: Dict[str, Tuple[str, ...]] = {
    "o": ("left", "bottom", "right", "top"),
    "l": ("left", "bottom"),
    "7": ("top", "right"),
    "c": ("top", "left", "bottom"),
    "u": ("left", "bottom", "right"),
    "]": ("top", "right", "bottom"),
    "n": (),
}


class MatplotlibSurface:
    """
    GraphicsSurface backed by a matplotlib Axes.

    Pass ``ax`` to draw into an existing figure; otherwise a new figure is
    created with pyplot (sized from settings.FIGURE_WIDTH/HEIGHT).
    """

    def __init__(
        self,
        ax: Optional[plt.Axes] = None,
        figsize: Optional[Tuple[float, float]] = None,
        curve_points: int = settings.CURVE_POINTS,
        show_axis_numbers: bool = settings.SHOW_AXIS_NUMBERS,
    ) -> None:
        self._owns_figure = ax is None
        if ax is None:
            _, ax = plt.subplots(figsize=figsize or (settings.FIGURE_WIDTH, settings.FIGURE_HEIGHT))
        self.ax = ax
        self.fig = ax.figure
        self.curve_points = int(curve_points)
        self.show_axis_numbers = bool(show_axis_numbers)
        self._closed = False
        self._zorder = 2

    # ------------------------------------------------------------------ guards

    def _ensure_open(self) -> None:
        if self._closed:
            raise GraphicsSurfaceError("Surface has been closed")
        if self._owns_figure and not plt.fignum_exists(self.fig.number):
            raise GraphicsSurfaceError("Figure was closed outside the surface")

    @staticmethod
    def _ensure_color(color: Any) -> None:
        if not is_color_like(color):
            raise GraphicsSurfaceError(f"Not a matplotlib colour: {color!r}")

    def _next_zorder(self) -> int:
        self._zorder += 1
        return self._zorder

    # -------------------------------------------------------------- primitives

    def draw_curve(
        self,
        density: Any,
        x_start: float,
        x_end: float,
        *,
        add: bool = False,
        color: Optional[str] = None,
        line_width: Optional[float] = None,
        y_label: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._ensure_open()
        color = color or "black"
        self._ensure_color(color)
        options = dict(options or {})
        unknown = set(options) - CURVE_OPTIONS
        if unknown:
            raise GraphicsSurfaceError(f"Unsupported plot option(s): {', '.join(sorted(unknown))}")

        x = np.linspace(x_start, x_end, self.curve_points)
        y = density.evaluate(x)

        ax = self.ax
        ax.plot(x, y, color=color, linewidth=line_width or 1.0, zorder=self._next_zorder())

        if add:
            return

        # Fresh plot with axes hidden; draw_axis/draw_box bring them back at the end.
        for spine in ax.spines.values():
            spine.set_visible(False)
        ax.tick_params(
            bottom=False, left=False, top=False, right=False,
            labelbottom=False, labelleft=False, labeltop=False, labelright=False,
        )
        ax.set_xlabel(options.get("x_label", "x"))
        if y_label is not None:
            ax.set_ylabel(y_label)
        if "title" in options:
            ax.set_title(options["title"], fontweight="bold")
        if options.get("x_lim") is not None:
            ax.set_xlim(*options["x_lim"])
        if options.get("y_lim") is not None:
            ax.set_ylim(*options["y_lim"])
        if options.get("grid"):
            ax.grid(True, alpha=0.3)
            ax.set_axisbelow(True)

    def fill_polygon(self, xs: Sequence[float], ys: Sequence[float], color: str) -> None:
        self._ensure_open()
        self._ensure_color(color)
        xy = np.column_stack([np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)])
        patch = PolygonPatch(
            xy,
            closed=True,
            facecolor=color,
            edgecolor="black",
            linewidth=1.0,
            zorder=self._next_zorder(),
        )
        self.ax.add_patch(patch)

    def draw_axis(self, side: int) -> None:
        self._ensure_open()
        if side not in _AXIS_SIDES:
            raise GraphicsSurfaceError(f"Axis side must be 1-4, got {side!r}")
        axis, tick, label = _AXIS_SIDES[side]
        self.ax.tick_params(axis=axis, **{tick: True, label: self.show_axis_numbers})

    def draw_box(self, style: str = "l") -> None:
        self._ensure_open()
        if style not in _BOX_STYLES:
            raise GraphicsSurfaceError(f"Unknown box style {style!r}")
        visible = _BOX_STYLES[style]
        for name, spine in self.ax.spines.items():
            spine.set_visible(name in visible)
            spine.set_zorder(self._next_zorder())

    # ----------------------------------------------------------------- cleanup

    def close(self) -> None:
        if self._owns_figure and not self._closed:
            plt.close(self.fig)
        self._closed = True
