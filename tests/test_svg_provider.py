"""Tests for the standalone animated SVG export."""

import xml.etree.ElementTree as ET
from dataclasses import replace
from pathlib import Path

import pytest

from spinforge.config import (
    DEFAULT_CONFIG,
    AnimationType,
    ColorStop,
    GradientType,
    PlaybackMode,
    ShapeType,
)
from spinforge.output import SvgExportProvider, resolve_export_provider
from spinforge.spinner import compile_spinner

NS = {"svg": "http://www.w3.org/2000/svg"}
PRIMITIVE_TAGS = ("circle", "rect", "polygon", "path")


def render(config):
    compiled = compile_spinner(config, seed=7)
    return SvgExportProvider().render(compiled, config)


def parse(config):
    return ET.fromstring(render(config).html)


def primitives(root):
    group = root.find("svg:g", NS)
    return [child for child in group if child.tag.split("}")[1] in PRIMITIVE_TAGS]


def test_document_is_well_formed_with_centered_view_box():
    root = parse(DEFAULT_CONFIG)

    assert root.tag == "{http://www.w3.org/2000/svg}svg"
    assert root.get("width") == "250"
    assert root.get("height") == "250"
    assert root.get("viewBox") == "-100 -100 200 200"
    assert root.find("svg:defs", NS) is not None


def test_one_primitive_per_element():
    root = parse(DEFAULT_CONFIG)

    circles = primitives(root)
    assert len(circles) == 24
    assert circles[0].get("cx") == "75"
    assert circles[0].get("cy") == "0"
    assert circles[0].get("r") == "7.5"
    assert circles[0].get("stroke") == "none"


def test_static_spinner_has_no_style_block():
    root = parse(DEFAULT_CONFIG)

    assert root.find("svg:style", NS) is None
    assert all(child.get("style") is None for child in primitives(root))


def test_animated_elements_carry_inline_animation():
    config = replace(
        DEFAULT_CONFIG,
        animation_type=AnimationType.CHASE,
        playback_mode=PlaybackMode.REPEAT,
        repeat_count=4,
    )

    root = parse(config)

    assert "@keyframes chase" in root.find("svg:style", NS).text
    styles = [child.get("style") for child in primitives(root)]
    assert "animation-name: chase;" in styles[0]
    assert "animation-iteration-count: 4;" in styles[0]
    assert "animation-delay: 0s;" in styles[0]
    assert "animation-delay: 0.1s;" in styles[2]
    assert "transform-box: fill-box;" in styles[0]


def test_orbit_animates_group_around_origin():
    root = parse(replace(DEFAULT_CONFIG, animation_type=AnimationType.ORBIT))

    group_style = root.find("svg:g", NS).get("style")
    assert "animation-name: orbit;" in group_style
    assert "transform-origin: 0 0;" in group_style
    assert all(child.get("style") is None for child in primitives(root))


def test_linear_gradient_stops_are_emitted_in_position_order():
    config = replace(
        DEFAULT_CONFIG,
        gradient_type=GradientType.LINEAR,
        gradient_stops=(
            ColorStop(id="c", color="#0000ff", position=100),
            ColorStop(id="a", color="#ff0000", position=0),
            ColorStop(id="b", color="#00ff00", position=40),
        ),
    )

    root = parse(config)

    gradient = root.find("svg:defs/svg:linearGradient", NS)
    assert gradient.get("id") == "spinner-gradient"
    offsets = [stop.get("offset") for stop in gradient.findall("svg:stop", NS)]
    assert offsets == ["0%", "40%", "100%"]
    assert all(child.get("fill") == "url(#spinner-gradient)" for child in primitives(root))


def test_radial_gradient_definition():
    root = parse(replace(DEFAULT_CONFIG, gradient_type=GradientType.RADIAL))

    gradient = root.find("svg:defs/svg:radialGradient", NS)
    assert gradient is not None
    assert gradient.get("r") == "50%"


def test_shadow_filter_is_defined_and_referenced():
    root = parse(replace(DEFAULT_CONFIG, shadow=True))

    drop = root.find("svg:defs/svg:filter/svg:feDropShadow", NS)
    assert drop.get("dx") == "2"
    assert drop.get("flood-opacity") == "0.3"
    assert all(child.get("filter") == "url(#spinner-shadow)" for child in primitives(root))


@pytest.mark.parametrize(
    "shape, tag",
    [
        (ShapeType.SQUARE, "rect"),
        (ShapeType.LINE, "rect"),
        (ShapeType.TRIANGLE, "polygon"),
        (ShapeType.STAR, "polygon"),
        (ShapeType.HEART, "path"),
    ],
)
def test_shapes_map_to_svg_primitives(shape, tag):
    root = parse(replace(DEFAULT_CONFIG, shape=shape))

    assert {child.tag.split("}")[1] for child in primitives(root)} == {tag}


def test_line_rotation_moves_to_style_when_transform_is_animated():
    static = parse(replace(DEFAULT_CONFIG, shape=ShapeType.LINE, count=4, copies=1))
    animated = parse(
        replace(
            DEFAULT_CONFIG,
            shape=ShapeType.LINE,
            count=4,
            copies=1,
            animation_type=AnimationType.PULSE,
        )
    )

    assert primitives(static)[1].get("transform").startswith("rotate(90 ")
    assert primitives(animated)[1].get("transform") is None
    assert "rotate: 90deg;" in primitives(animated)[1].get("style")


def test_stroke_attributes():
    root = parse(replace(DEFAULT_CONFIG, stroke=True, stroke_width=3, stroke_color="#ff00ff"))

    first = primitives(root)[0]
    assert first.get("stroke") == "#ff00ff"
    assert first.get("stroke-width") == "3"


def test_registry_resolves_svg_provider():
    provider = resolve_export_provider("SVG", "out/spinner")

    assert isinstance(provider, SvgExportProvider)
    artifact = render(DEFAULT_CONFIG)
    assert list(artifact.files("out/spinner")) == [Path("out/spinner.svg")]


def test_unknown_format_is_rejected():
    with pytest.raises(ValueError, match="Unsupported export format"):
        resolve_export_provider("png")
