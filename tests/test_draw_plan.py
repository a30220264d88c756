"""Tests for the draw plan: op order, fills and abort-on-failure."""

from __future__ import annotations

import pytest

from shade_dist import (
    DensityEvaluationError,
    DrawAxis,
    DrawBox,
    DrawCurve,
    FillPolygon,
    ShadeConfig,
    build_draw_plan,
    get_density,
    normalize_region,
)
from shade_dist.regions import ERASE, SHADE

CONFIG = ShadeConfig(break_count=50)


def _plan(density, a, b, rtype, config=CONFIG, options=None):
    return build_draw_plan(density, normalize_region(a, b, rtype, -3, 3), config, options)


@pytest.mark.parametrize("rtype,a,b", [("lower", 0, None), ("upper", None, 1), ("middle", 0, 1)])
def test_one_sided_and_middle_have_one_fill(std_normal, rtype, a, b):
    plan = _plan(std_normal, a, b, rtype)
    assert plan.kinds() == ["curve", "fill", "curve", "axis", "axis", "box"]
    assert len(plan.fills) == 1
    assert plan.fills[0].role == SHADE
    assert plan.fills[0].color == "skyblue"


def test_two_tailed_has_two_fills_before_restroke(std_normal):
    plan = _plan(std_normal, 0, 1, "two")
    assert plan.kinds() == ["curve", "fill", "fill", "curve", "axis", "axis", "box"]
    full, middle = plan.fills
    assert (full.bounds, full.color, full.role) == ((-3.0, 3.0), "skyblue", SHADE)
    assert (middle.bounds, middle.color, middle.role) == ((0.0, 1.0), "white", ERASE)


def test_curve_and_decoration_ops(std_normal):
    plan = _plan(std_normal, 0, 1, "middle", options={"title": "P(0 < Z < 1)"})
    first, restroke = plan.ops[0], plan.ops[-4]
    assert isinstance(first, DrawCurve) and not first.add
    assert (first.x_start, first.x_end, first.y_label) == (-3.0, 3.0, "Density")
    assert first.options == {"title": "P(0 < Z < 1)"}
    assert isinstance(restroke, DrawCurve) and restroke.add
    assert (restroke.color, restroke.line_width) == ("black", 3.0)
    assert list(plan.ops[-3:]) == [DrawAxis(1), DrawAxis(2), DrawBox("l")]


def test_config_colours_flow_into_fills(std_normal):
    config = ShadeConfig(shade_color="tomato", erase_color="#fafafa", break_count=10)
    plan = _plan(std_normal, -1, 1, "two", config=config)
    assert [f.color for f in plan.fills] == ["tomato", "#fafafa"]
    assert all(len(f.polygon) == 13 for f in plan.fills)


def test_region_is_kept_on_plan(std_normal):
    plan = _plan(std_normal, None, 1, "upper")
    assert plan.region.bounds == (1.0, 3.0)
    assert isinstance(plan.fills[0], FillPolygon)


def test_density_failure_raises_while_building():
    bad = get_density("dnorm", {"sd": 0})
    with pytest.raises(DensityEvaluationError):
        _plan(bad, 0, 1, "middle")


def test_execute_in_order(std_normal, recorder):
    plan = _plan(std_normal, 0, 1, "two")
    plan.execute(recorder, std_normal)
    assert recorder.names == ["curve", "fill", "fill", "curve", "axis", "axis", "box"]
    assert recorder.calls[0] == ("curve", -3.0, 3.0, False)
    assert recorder.calls[3] == ("curve", -3.0, 3.0, True)
    assert recorder.calls[-1] == ("box", "l")


def test_surface_failure_aborts_remaining_steps(std_normal, make_recorder):
    surface = make_recorder(fail_on="axis")
    plan = _plan(std_normal, 0, 1, "middle")
    with pytest.raises(RuntimeError, match="refused axis"):
        plan.execute(surface, std_normal)
    assert surface.names == ["curve", "fill", "curve"]


def test_curve_options_are_read_only_and_not_shared(std_normal):
    options = {"title": "P(Z < 0)"}
    plan = _plan(std_normal, 0, None, "lower", options=options)
    first, restroke = plan.ops[0], plan.ops[-4]
    options["title"] = "changed"
    assert first.options["title"] == "P(Z < 0)"
    assert first.options is not restroke.options
    with pytest.raises(TypeError):
        first.options["title"] = "x"  # type: ignore[index]
