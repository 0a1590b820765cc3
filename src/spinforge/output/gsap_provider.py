"""SVG fragment + GSAP timeline script export provider."""

from ..config import (
    AnimationType,
    ConfigError,
    Easing,
    PlaybackMode,
    ShapeType,
    SpinnerConfig,
    parse_easing,
)
from ..constants import DISTORT_SQUARE_RX, GSAP_CDN_URL, GSAP_DEFAULT_EASE, WAVE_LIFT
from ..spinner.animation import is_grouped
from ..spinner.geometry import CompiledSpinner
from ._svg_shared import fmt_num
from .base import ExportArtifact, ExportProvider
from .live_model import build_live_model
from .svg_provider import render_svg_document

ELEMENT_CLASS = "spinner-element"
GROUP_CLASS = "spinner-group"

GSAP_EASES: dict[Easing, str] = {
    Easing.LINEAR: "none",
    Easing.EASE_IN: "power1.in",
    Easing.EASE_OUT: "power1.out",
    Easing.EASE_IN_OUT: "power1.inOut",
    Easing.SPRING: "back.inOut(1.7)",
    Easing.EASE_IN_BACK: "back.in(1.7)",
}

NO_ANIMATION_SCRIPT = "// Animation type is set to 'None'. No JavaScript is needed for a static image."


class _Raw(str):
    """JavaScript expression emitted without quoting."""


def gsap_ease(easing: Easing | str) -> str:
    """Nearest GSAP ease for an easing identifier; unknown names ease in and out."""
    try:
        return GSAP_EASES[parse_easing(easing)]
    except (ConfigError, KeyError):
        return GSAP_DEFAULT_EASE


def gsap_repeat(mode: PlaybackMode, repeat_count: int) -> int:
    """
    GSAP ``repeat`` value: extra plays after the first, -1 for forever.

    ``repeat_count`` is expected to be at least 1, matching
    ``animation-iteration-count`` in the stylesheet exports.
    """
    if mode in (PlaybackMode.LOOP, PlaybackMode.ALTERNATE):
        return -1
    if mode == PlaybackMode.ONCE:
        return 0
    return max(repeat_count - 1, 0)


def _js_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return fmt_num(value)
    if isinstance(value, dict):
        return "{ " + ", ".join(f"{key}: {_js_value(item)}" for key, item in value.items()) + " }"
    if isinstance(value, _Raw):
        return str(value)
    return f'"{value}"'


def _element_steps(config: SpinnerConfig) -> tuple[dict[str, object], dict[str, object]]:
    """Tween properties for the middle and the end of a per-element cycle."""
    animation = config.animation_type
    if animation == AnimationType.CHASE:
        return {"scale": 0.3, "opacity": 0.3}, {"scale": 1, "opacity": 1}
    if animation == AnimationType.PULSE:
        return {"scale": 1.3}, {"scale": 1}
    if animation == AnimationType.WAVE:
        return {"y": -WAVE_LIFT}, {"y": 0}
    if animation == AnimationType.FADE:
        return {"opacity": 0.2}, {"opacity": 1}
    if config.shape == ShapeType.SQUARE:
        return (
            {"rotation": 180, "scale": 0.7, "attr": {"rx": DISTORT_SQUARE_RX}},
            {"rotation": 0, "scale": 1, "attr": {"rx": 0}},
        )
    return {"scale": 0.7, "skewX": 30}, {"scale": 1, "skewX": 0}


def _group_step(config: SpinnerConfig) -> dict[str, object]:
    if config.animation_type == AnimationType.SPIRAL:
        return {"rotation": 360, "scale": 0, "opacity": 0}
    return {"rotation": 360}


def _tween(target: str, properties: dict[str, object]) -> str:
    return f"to({target}, {_js_value(properties)})"


def timeline_script(compiled: CompiledSpinner, config: SpinnerConfig) -> str:
    """Build the GSAP script reproducing the spinner's keyframe animation."""
    if config.animation_type == AnimationType.NONE:
        return NO_ANIMATION_SCRIPT

    ease = gsap_ease(config.easing)
    timeline = {
        "repeat": gsap_repeat(config.playback_mode, config.repeat_count),
        "yoyo": config.playback_mode == PlaybackMode.ALTERNATE,
    }
    lines = [
        "// Make sure to include the GSAP library, e.g., from a CDN:",
        f'// <script src="{GSAP_CDN_URL}"></script>',
        "",
        f'const elements = gsap.utils.toArray(".{ELEMENT_CLASS}");',
        f'const group = ".{GROUP_CLASS}";',
        f"const tl = gsap.timeline({_js_value(timeline)});",
        "",
    ]

    if is_grouped(config.animation_type):
        step = {
            **_group_step(config),
            "duration": config.duration,
            "ease": ease,
            "svgOrigin": "0 0",
        }
        lines.append(f"tl.{_tween('group', step)};")
        return "\n".join(lines)

    # Duplicates share the delay of their angular slot
    delays = ", ".join(
        fmt_num(element.animation.delay_seconds if element.animation else 0)
        for element in compiled.elements
    )
    lines.extend(
        [
            f"const delays = [{delays}];",
            "const slotDelay = (index) => delays[index];",
            "",
        ]
    )
    half = config.duration / 2
    middle, end = _element_steps(config)
    first = {
        **middle,
        "duration": half,
        "ease": ease,
        "stagger": _Raw("slotDelay"),
        "transformOrigin": "50% 50%",
    }
    second = {**end, "duration": half, "ease": ease, "stagger": _Raw("slotDelay")}
    lines.append(f"tl.{_tween('elements', first)}")
    lines.append(f"  .{_tween('elements', second)};")
    return "\n".join(lines)


class GsapExportProvider(ExportProvider):
    """Export provider for an SVG fragment animated by a GSAP timeline."""

    format_name = "gsap"

    def render(self, compiled: CompiledSpinner, config: SpinnerConfig) -> ExportArtifact:
        model = build_live_model(
            compiled,
            config,
            animated=False,
            element_class=ELEMENT_CLASS,
            group_class=GROUP_CLASS,
        )
        return self.artifact(
            html=render_svg_document(model),
            js=timeline_script(compiled, config),
        )
