"""Tests for the configuration model and its JSON boundary."""

import json

import pytest

from spinforge.config import (
    DEFAULT_CONFIG,
    AnimationType,
    ConfigError,
    Easing,
    GradientType,
    ShapeType,
    config_from_dict,
    config_to_dict,
    load_config,
    normalize_key,
    parse_easing,
    parse_field,
)


def test_defaults_match_designer_initial_state():
    """Default configuration should describe a 12-slot, two-copy circle spinner."""
    assert DEFAULT_CONFIG.shape == ShapeType.CIRCLE
    assert DEFAULT_CONFIG.count == 12
    assert DEFAULT_CONFIG.copies == 2
    assert DEFAULT_CONFIG.colors == ("#6366f1", "#a5b4fc")
    assert [stop.position for stop in DEFAULT_CONFIG.gradient_stops] == [0, 100]
    assert DEFAULT_CONFIG.animation_type == AnimationType.NONE


def test_config_from_dict_accepts_camel_and_snake_case():
    """Both key styles should map onto the same fields."""
    config = config_from_dict({"animationType": "pulse", "copy_spread": 4, "count": "8"})

    assert config.animation_type == AnimationType.PULSE
    assert config.copy_spread == 4.0
    assert config.count == 8
    assert config.radius == DEFAULT_CONFIG.radius


def test_config_from_dict_rejects_unknown_key():
    with pytest.raises(ConfigError, match="Unknown configuration field"):
        config_from_dict({"wobble": 3})


def test_config_from_dict_rejects_unknown_enum_value():
    with pytest.raises(ConfigError, match="Unknown shape"):
        config_from_dict({"shape": "hexagon"})


def test_config_from_dict_rejects_non_mapping():
    with pytest.raises(ConfigError):
        config_from_dict([1, 2, 3])


def test_gradient_stops_are_sorted_on_parse():
    """Stops given out of order should be stored by ascending position."""
    config = config_from_dict(
        {
            "gradientStops": [
                {"id": "b", "color": "#ffffff", "position": 80},
                {"id": "a", "color": "#000000", "position": 10},
            ]
        }
    )

    assert [stop.id for stop in config.gradient_stops] == ["a", "b"]


def test_parse_easing_accepts_css_timing_function():
    assert parse_easing("cubic-bezier(0.68, -0.55, 0.27, 1.55)") == Easing.SPRING
    assert parse_easing("ease-in") == Easing.EASE_IN
    with pytest.raises(ConfigError):
        parse_easing("bouncy")


def test_parse_field_handles_command_line_strings():
    assert parse_field("shadow", "yes") is True
    assert parse_field("colors", "#111111, #222222") == ("#111111", "#222222")
    assert parse_field("gradient_type", "radial") == GradientType.RADIAL
    with pytest.raises(ConfigError):
        parse_field("stroke", "maybe")


def test_normalize_key():
    assert normalize_key("repeatCount") == "repeat_count"
    assert normalize_key("copy-spread") == "copy_spread"
    with pytest.raises(ConfigError):
        normalize_key("nope")


def test_config_to_dict_uses_camel_case_and_plain_values():
    data = config_to_dict(DEFAULT_CONFIG)

    assert data["animationType"] == "none"
    assert data["gradientType"] == "per-duplicate"
    assert data["colors"] == ["#6366f1", "#a5b4fc"]
    assert data["gradientStops"][0]["id"] == "stop-start"
    assert config_from_dict(data) == DEFAULT_CONFIG


def test_load_config_reads_json_file(tmp_path):
    path = tmp_path / "spinner.json"
    path.write_text(json.dumps({"shape": "star", "count": 6}))

    config = load_config(path)

    assert config.shape == ShapeType.STAR
    assert config.count == 6


def test_load_config_reports_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_config(path)
