"""Tests for fill color resolution."""

from dataclasses import replace

from spinforge.config import DEFAULT_CONFIG, ColorStop, GradientType
from spinforge.spinner.colors import (
    GradientRef,
    LiteralColor,
    build_gradient,
    pick_color,
    resolve_fill,
)

COLORS = ("#ff0000", "#00ff00", "#0000ff")


def test_per_duplicate_uses_duplicate_index():
    assert resolve_fill(5, 1, COLORS, None, GradientType.PER_DUPLICATE) == LiteralColor("#00ff00")


def test_sweep_cycles_colors_by_angular_slot():
    assert resolve_fill(4, 0, COLORS, None, GradientType.SWEEP) == LiteralColor("#00ff00")


def test_single_color_mode_uses_first_color():
    assert resolve_fill(4, 2, COLORS, None, GradientType.NONE) == LiteralColor("#ff0000")


def test_continuous_modes_reference_gradient():
    config = replace(DEFAULT_CONFIG, gradient_type=GradientType.RADIAL)
    gradient = build_gradient(config)

    fill = resolve_fill(0, 0, COLORS, gradient, GradientType.RADIAL)

    assert isinstance(fill, GradientRef)
    assert fill.kind == GradientType.RADIAL


def test_pick_color_falls_back():
    """Missing colors fall back to the first color, then to black."""
    assert pick_color(("#123456", ""), 1) == "#123456"
    assert pick_color((), 3) == "#000000"
    assert pick_color(("",), 0) == "#000000"


def test_build_gradient_only_for_continuous_modes():
    assert build_gradient(DEFAULT_CONFIG) is None
    assert build_gradient(replace(DEFAULT_CONFIG, gradient_type=GradientType.SWEEP)) is None


def test_build_gradient_sorts_and_caps_stops():
    stops = tuple(
        ColorStop(id=f"s{i}", color="#ffffff", position=100 - i * 5) for i in range(12)
    )
    config = replace(DEFAULT_CONFIG, gradient_type=GradientType.LINEAR, gradient_stops=stops)

    gradient = build_gradient(config)

    positions = [stop.position for stop in gradient.stops]
    assert len(positions) == 10
    assert positions == sorted(positions)


def test_build_gradient_pads_short_stop_lists():
    config = replace(
        DEFAULT_CONFIG,
        gradient_type=GradientType.RADIAL,
        gradient_stops=(ColorStop(id="only", color="#abcdef", position=20),),
    )

    gradient = build_gradient(config)

    assert [stop.color for stop in gradient.stops] == ["#abcdef", "#abcdef"]
    assert [stop.position for stop in gradient.stops] == [20, 100]
