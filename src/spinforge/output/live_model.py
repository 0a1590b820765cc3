"""Structured draw instructions for on-screen display of a compiled spinner."""

from dataclasses import dataclass

from ..config import SpinnerConfig
from ..constants import CANVAS_SIZE
from ..spinner.animation import AnimationDescriptor
from ..spinner.colors import GradientDefinition, GradientRef
from ..spinner.geometry import CompiledSpinner, Element, ShadowFilter
from ..spinner.shapes import RectPrimitive
from ._keyframes import TRANSFORM_ANIMATIONS, keyframes_css
from ._svg_shared import fmt_num, fmt_seconds, primitive_markup


@dataclass(frozen=True)
class DrawInstruction:
    """One primitive to draw, with its SVG attributes and inline style."""

    index: int
    duplicate_index: int
    tag: str
    attributes: dict[str, str]
    style: dict[str, str]


@dataclass(frozen=True)
class LiveRenderModel:
    width: int
    height: int
    view_box: str
    keyframes: str
    gradient: GradientDefinition | None
    shadow: ShadowFilter | None
    group_attributes: dict[str, str]
    group_style: dict[str, str]
    instructions: tuple[DrawInstruction, ...]


def animation_style(animation: AnimationDescriptor) -> dict[str, str]:
    """CSS animation longhands for an animation descriptor."""
    return {
        "animation-name": animation.name.value,
        "animation-duration": fmt_seconds(animation.duration_seconds),
        "animation-timing-function": animation.easing.css,
        "animation-iteration-count": str(animation.iteration_count),
        "animation-direction": animation.direction,
        "animation-delay": fmt_seconds(animation.delay_seconds),
    }


def fill_value(element: Element) -> str:
    if isinstance(element.fill, GradientRef):
        return f"url(#{element.fill.gradient.id})"
    return element.fill.color


def _moves_transform(element: Element, animated: bool) -> bool:
    return (
        animated
        and element.animation is not None
        and element.animation.name in TRANSFORM_ANIMATIONS
    )


def _instruction(
    element: Element,
    compiled: CompiledSpinner,
    animated: bool,
    element_class: str | None,
) -> DrawInstruction:
    # An animated CSS transform replaces the transform attribute, so a
    # rotated line keeps its rotation in the independent `rotate` property.
    rotate_in_style = _moves_transform(element, animated)
    tag, attributes = primitive_markup(element.primitive, rotate_attribute=not rotate_in_style)
    if element_class:
        attributes["class"] = element_class
    attributes["fill"] = fill_value(element)
    if compiled.shadow is not None:
        attributes["filter"] = f"url(#{compiled.shadow.id})"
    attributes["stroke"] = element.stroke_color or "none"
    attributes["stroke-width"] = fmt_num(element.stroke_width)

    style: dict[str, str] = {}
    if animated and element.animation is not None:
        style.update(animation_style(element.animation))
        style["transform-box"] = "fill-box"
        style["transform-origin"] = "center"
    primitive = element.primitive
    if rotate_in_style and isinstance(primitive, RectPrimitive) and primitive.rotation:
        style["rotate"] = f"{fmt_num(primitive.rotation)}deg"

    return DrawInstruction(
        index=element.index,
        duplicate_index=element.duplicate_index,
        tag=tag,
        attributes=attributes,
        style=style,
    )


def view_box(compiled: CompiledSpinner) -> str:
    layout = compiled.layout
    origin = fmt_num(layout.origin)
    extent = fmt_num(layout.extent)
    return f"{origin} {origin} {extent} {extent}"


def build_live_model(
    compiled: CompiledSpinner,
    config: SpinnerConfig,
    *,
    animated: bool = True,
    element_class: str | None = None,
    group_class: str | None = None,
) -> LiveRenderModel:
    """
    Build draw instructions for a compiled spinner.

    Args:
        compiled: Output of the geometry engine
        config: Configuration the spinner was compiled from
        animated: Include keyframes and inline animation styles
        element_class: Optional class attribute for every primitive
        group_class: Optional class attribute for the element group

    Returns:
        The live render model
    """
    instructions = tuple(
        _instruction(element, compiled, animated, element_class)
        for element in compiled.elements
    )

    group_style: dict[str, str] = {}
    if animated and compiled.group_animation is not None:
        group_style.update(animation_style(compiled.group_animation))
        # The view box is centered on the spinner origin
        group_style["transform-box"] = "view-box"
        group_style["transform-origin"] = "0 0"

    keyframes = ""
    if animated and compiled.is_animated:
        keyframes = keyframes_css(config.animation_type, config.shape)

    return LiveRenderModel(
        width=CANVAS_SIZE,
        height=CANVAS_SIZE,
        view_box=view_box(compiled),
        keyframes=keyframes,
        gradient=compiled.gradient,
        shadow=compiled.shadow,
        group_attributes={"class": group_class} if group_class else {},
        group_style=group_style,
        instructions=instructions,
    )
