"""Tests for the GSAP timeline export."""

import xml.etree.ElementTree as ET
from dataclasses import replace

from spinforge.config import (
    DEFAULT_CONFIG,
    AnimationType,
    Easing,
    PlaybackMode,
    ShapeType,
    config_from_dict,
)
from spinforge.output import GsapExportProvider, build_live_model
from spinforge.output.gsap_provider import NO_ANIMATION_SCRIPT, gsap_ease, gsap_repeat
from spinforge.spinner import compile_spinner

NS = {"svg": "http://www.w3.org/2000/svg"}


def render(config):
    compiled = compile_spinner(config, seed=7)
    return GsapExportProvider().render(compiled, config)


def test_static_spinner_explains_missing_script():
    artifact = render(DEFAULT_CONFIG)

    assert artifact.js == NO_ANIMATION_SCRIPT


def test_markup_is_unanimated_and_classed():
    artifact = render(replace(DEFAULT_CONFIG, animation_type=AnimationType.PULSE))

    root = ET.fromstring(artifact.html)
    assert root.find("svg:style", NS) is None
    group = root.find("svg:g", NS)
    assert group.get("class") == "spinner-group"
    assert all(child.get("class") == "spinner-element" for child in group)
    assert all(child.get("style") is None for child in group)


def test_gsap_repeat_counts_extra_plays():
    assert gsap_repeat(PlaybackMode.LOOP, 3) == -1
    assert gsap_repeat(PlaybackMode.ALTERNATE, 3) == -1
    assert gsap_repeat(PlaybackMode.ONCE, 3) == 0
    assert gsap_repeat(PlaybackMode.REPEAT, 4) == 3
    assert gsap_repeat(PlaybackMode.REPEAT, 0) == 0


def test_gsap_ease_mapping_and_fallback():
    assert gsap_ease(Easing.LINEAR) == "none"
    assert gsap_ease(Easing.SPRING) == "back.inOut(1.7)"
    assert gsap_ease("cubic-bezier(0.1, 0.2, 0.3, 0.4)") == "power1.inOut"


def test_element_timeline_uses_slot_delays():
    config = replace(
        DEFAULT_CONFIG,
        animation_type=AnimationType.WAVE,
        count=3,
        copies=2,
        stagger=0.2,
        playback_mode=PlaybackMode.ALTERNATE,
    )

    script = render(config).js

    assert "const delays = [0, 0, 0.2, 0.2, 0.4, 0.4];" in script
    assert "gsap.timeline({ repeat: -1, yoyo: true })" in script
    assert "y: -20" in script
    assert "stagger: slotDelay" in script


def test_fade_only_touches_opacity():
    script = render(replace(DEFAULT_CONFIG, animation_type=AnimationType.FADE)).js

    assert "opacity: 0.2" in script
    assert "scale" not in script


def test_square_distort_animates_corner_radius():
    config = replace(DEFAULT_CONFIG, animation_type=AnimationType.DISTORT, shape=ShapeType.SQUARE)

    script = render(config).js

    assert "attr: { rx: 15 }" in script
    assert "rotation: 180" in script


def test_group_animations_rotate_about_origin():
    config = replace(
        DEFAULT_CONFIG,
        animation_type=AnimationType.SPIRAL,
        playback_mode=PlaybackMode.REPEAT,
        repeat_count=2,
    )

    script = render(config).js

    assert "gsap.timeline({ repeat: 1, yoyo: false })" in script
    assert "tl.to(group, { rotation: 360, scale: 0, opacity: 0," in script
    assert 'svgOrigin: "0 0"' in script
    assert "delays" not in script


def test_live_model_and_gsap_share_the_gradient_stops():
    """A white-to-black linear gradient is defined once and used by every primitive."""
    config = config_from_dict(
        {
            "gradientType": "linear",
            "gradientStops": [
                {"id": "start", "color": "#fff", "position": 0},
                {"id": "end", "color": "#000", "position": 100},
            ],
        }
    )
    compiled = compile_spinner(config, seed=7)

    model = build_live_model(compiled, config)
    artifact = GsapExportProvider().render(compiled, config)

    assert [(stop.position, stop.color) for stop in model.gradient.stops] == [(0, "#fff"), (100, "#000")]
    root = ET.fromstring(artifact.html)
    gradients = root.findall("svg:defs/svg:linearGradient", NS)
    assert len(gradients) == 1
    stops = [(stop.get("offset"), stop.get("stop-color")) for stop in gradients[0].findall("svg:stop", NS)]
    assert stops == [("0%", "#fff"), ("100%", "#000")]
    primitives = list(root.find("svg:g", NS))
    assert len(primitives) == len(compiled.elements)
    assert all(child.get("fill") == "url(#spinner-gradient)" for child in primitives)


def test_single_repeat_plays_once_like_the_stylesheet():
    """repeat_count=1 maps to one GSAP play, matching animation-iteration-count: 1."""
    config = replace(
        DEFAULT_CONFIG,
        animation_type=AnimationType.PULSE,
        playback_mode=PlaybackMode.REPEAT,
        repeat_count=1,
    )

    script = render(config).js
    compiled = compile_spinner(config, seed=7)

    assert "gsap.timeline({ repeat: 0, yoyo: false })" in script
    assert compiled.elements[0].animation.iteration_count == 1
