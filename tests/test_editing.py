"""Tests for configuration state transitions."""

from dataclasses import replace

from spinforge.config import DEFAULT_CONFIG, ColorStop, GradientType
from spinforge.constants import MAX_GRADIENT_STOPS
from spinforge.editing import (
    add_gradient_stop,
    apply_overrides,
    remove_gradient_stop,
    set_color,
    set_copies,
    set_gradient_type,
    update_gradient_stop,
)


def test_set_copies_pads_colors_with_last_color():
    """Growing the copy count should repeat the last color."""
    config = set_copies(DEFAULT_CONFIG, 4)

    assert config.copies == 4
    assert config.colors == ("#6366f1", "#a5b4fc", "#a5b4fc", "#a5b4fc")


def test_set_copies_truncates_colors():
    config = set_copies(DEFAULT_CONFIG, 1)

    assert config.colors == ("#6366f1",)


def test_entering_gradient_mode_builds_stops_from_colors():
    config = replace(DEFAULT_CONFIG, colors=("#000000", "#888888", "#ffffff"), copies=3)

    updated = set_gradient_type(config, GradientType.LINEAR)

    assert updated.gradient_type == GradientType.LINEAR
    assert [stop.color for stop in updated.gradient_stops] == ["#000000", "#888888", "#ffffff"]
    assert [stop.position for stop in updated.gradient_stops] == [0, 50, 100]


def test_entering_gradient_mode_with_one_color_adds_second_stop():
    config = replace(DEFAULT_CONFIG, colors=("#123456",), copies=1)

    updated = set_gradient_type(config, GradientType.RADIAL)

    assert len(updated.gradient_stops) == 2


def test_leaving_gradient_mode_takes_colors_from_stops():
    config = replace(
        DEFAULT_CONFIG,
        gradient_type=GradientType.LINEAR,
        copies=3,
        gradient_stops=(
            ColorStop(id="a", color="#000000", position=0),
            ColorStop(id="b", color="#ffffff", position=100),
        ),
    )

    updated = set_gradient_type(config, GradientType.PER_DUPLICATE)

    assert updated.colors == ("#000000", "#ffffff", "#ffffff")


def test_switching_between_gradient_kinds_keeps_stops():
    config = replace(DEFAULT_CONFIG, gradient_type=GradientType.LINEAR)

    updated = set_gradient_type(config, GradientType.RADIAL)

    assert updated.gradient_stops == config.gradient_stops


def test_set_color_replaces_one_entry():
    config = set_color(DEFAULT_CONFIG, 1, "#ff0000")

    assert config.colors == ("#6366f1", "#ff0000")


def test_update_gradient_stop_keeps_stops_sorted():
    config = update_gradient_stop(DEFAULT_CONFIG, "stop-start", position=90)

    assert [stop.id for stop in config.gradient_stops] == ["stop-start", "stop-end"]
    config = update_gradient_stop(config, "stop-end", color="#00ff00", position=10)
    assert [stop.id for stop in config.gradient_stops] == ["stop-end", "stop-start"]
    assert config.gradient_stops[0].color == "#00ff00"


def test_add_gradient_stop_inserts_white_midpoint():
    config = add_gradient_stop(DEFAULT_CONFIG)

    assert [stop.position for stop in config.gradient_stops] == [0, 50, 100]
    assert config.gradient_stops[1].color == "#ffffff"


def test_add_gradient_stop_respects_limit():
    config = DEFAULT_CONFIG
    for _ in range(MAX_GRADIENT_STOPS + 3):
        config = add_gradient_stop(config)

    assert len(config.gradient_stops) == MAX_GRADIENT_STOPS


def test_remove_gradient_stop_never_drops_below_two():
    assert remove_gradient_stop(DEFAULT_CONFIG, "stop-end") == DEFAULT_CONFIG

    config = add_gradient_stop(DEFAULT_CONFIG)
    config = remove_gradient_stop(config, "stop-end")
    assert [stop.id for stop in config.gradient_stops][0] == "stop-start"
    assert len(config.gradient_stops) == 2


def test_apply_overrides_routes_through_transitions():
    """Copies and gradient type overrides should keep auxiliary arrays in sync."""
    config = apply_overrides(DEFAULT_CONFIG, {"copies": "3", "count": "5", "shape": "square"})

    assert config.copies == 3
    assert len(config.colors) == 3
    assert config.count == 5
    assert config.shape.value == "square"
