"""Tests for the matplotlib surface primitives."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pytest

from shade_dist import GraphicsSurfaceError, MatplotlibSurface


@pytest.fixture
def surface():
    fig, ax = plt.subplots()
    return MatplotlibSurface(ax=ax, curve_points=51)


def test_first_curve_hides_axes(surface, std_normal):
    surface.draw_curve(std_normal, -3, 3, y_label="Density", options={"title": "Z", "x_label": "z"})
    ax = surface.ax
    line = ax.lines[0]
    assert len(line.get_xdata()) == 51
    assert not any(s.get_visible() for s in ax.spines.values())
    assert (ax.get_title(), ax.get_xlabel(), ax.get_ylabel()) == ("Z", "z", "Density")


def test_added_curve_keeps_labels(surface, std_normal):
    surface.draw_curve(std_normal, -3, 3, y_label="Density")
    surface.draw_curve(std_normal, -3, 3, add=True, color="navy", line_width=3)
    second = surface.ax.lines[1]
    assert second.get_linewidth() == 3
    assert second.get_color() == "navy"
    assert surface.ax.get_ylabel() == "Density"


def test_calls_layer_in_order(surface, std_normal):
    surface.draw_curve(std_normal, -3, 3)
    surface.fill_polygon([0, 0, 1, 1], [0, 0.4, 0.24, 0], "skyblue")
    surface.draw_curve(std_normal, -3, 3, add=True)
    first, second = surface.ax.lines
    patch = surface.ax.patches[0]
    assert first.get_zorder() < patch.get_zorder() < second.get_zorder()


def test_fill_polygon_vertices(surface):
    xs = np.array([0.0, 0.0, 0.5, 1.0, 1.0])
    ys = np.array([0.0, 0.3, 0.35, 0.2, 0.0])
    surface.fill_polygon(xs, ys, "#87ceeb")
    patch = surface.ax.patches[0]
    np.testing.assert_allclose(patch.get_xy()[:5], np.column_stack([xs, ys]))


def test_zero_area_polygon_is_fine(surface):
    surface.fill_polygon([1, 1, 1], [0, 0.2, 0], "skyblue")
    assert len(surface.ax.patches) == 1


def test_axes_and_box(surface, std_normal):
    surface.draw_curve(std_normal, -3, 3)
    surface.draw_axis(1)
    surface.draw_axis(2)
    surface.draw_box("l")
    spines = surface.ax.spines
    assert spines["left"].get_visible() and spines["bottom"].get_visible()
    assert not spines["top"].get_visible() and not spines["right"].get_visible()


def test_full_box(surface):
    surface.draw_box("o")
    assert all(s.get_visible() for s in surface.ax.spines.values())


@pytest.mark.parametrize("call", [
    lambda s: s.fill_polygon([0, 1], [0, 0], "not-a-colour"),
    lambda s: s.draw_axis(5),
    lambda s: s.draw_box("x"),
])
def test_rejected_primitives(surface, call):
    with pytest.raises(GraphicsSurfaceError):
        call(surface)


def test_unknown_curve_option(surface, std_normal):
    with pytest.raises(GraphicsSurfaceError, match="main"):
        surface.draw_curve(std_normal, -3, 3, options={"main": "title"})


def test_closed_surface():
    surface = MatplotlibSurface()
    surface.close()
    with pytest.raises(GraphicsSurfaceError, match="closed"):
        surface.draw_axis(1)


def test_figure_closed_elsewhere():
    surface = MatplotlibSurface(figsize=(4, 3))
    assert tuple(surface.fig.get_size_inches()) == (4, 3)
    plt.close(surface.fig)
    with pytest.raises(GraphicsSurfaceError, match="closed"):
        surface.draw_box("l")
