"""Shared test fixtures."""

from __future__ import annotations

import os

# Force headless backend before importing pyplot anywhere
os.environ.setdefault("MPLBACKEND", "Agg")

import matplotlib  # noqa: E402

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402

from shade_dist import CallableDensity, get_density  # noqa: E402


class RecordingSurface:
    """GraphicsSurface that only records what it was asked to draw."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def _record(self, name, *args):
        if name == self.fail_on:
            raise RuntimeError(f"surface refused {name}")
        self.calls.append((name,) + args)

    def draw_curve(self, density, x_start, x_end, *, add=False, color=None,
                   line_width=None, y_label=None, options=None):
        density.evaluate(np.linspace(x_start, x_end, 11))
        self._record("curve", x_start, x_end, add)

    def fill_polygon(self, xs, ys, color):
        self._record("fill", (float(xs[0]), float(xs[-1])), color, len(xs))

    def draw_axis(self, side):
        self._record("axis", side)

    def draw_box(self, style):
        self._record("box", style)

    @property
    def names(self):
        return [c[0] for c in self.calls]

    @property
    def fills(self):
        return [c for c in self.calls if c[0] == "fill"]


@pytest.fixture
def recorder():
    return RecordingSurface()


@pytest.fixture
def make_recorder():
    return RecordingSurface


@pytest.fixture
def std_normal():
    return get_density("dnorm", {"mean": 0, "sd": 1})


@pytest.fixture
def triangle():
    """Triangular density on [0, 2], peak 1 at x = 1."""
    return CallableDensity(lambda x: np.clip(1.0 - np.abs(x - 1.0), 0.0, None), name="triangle")


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
