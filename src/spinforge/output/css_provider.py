"""HTML + CSS keyframe export provider.

Elements are plain boxes, so only circles, squares and lines can be
represented. Other shapes and stroked spinners produce a placeholder
comment instead of an approximation.
"""

from ..config import ColorStop, GradientType, ShapeType, SpinnerConfig
from ..constants import CANVAS_SIZE, WAVE_LIFT
from ..spinner.colors import GradientDefinition, LiteralColor, pick_color
from ..spinner.geometry import CompiledSpinner, Element
from ._keyframes import keyframes_css
from ._svg_shared import fmt_num, fmt_seconds, rgba
from .base import ExportArtifact, ExportProvider
from .live_model import animation_style

UNSUPPORTED_SHAPES: frozenset[ShapeType] = frozenset(
    {ShapeType.STAR, ShapeType.HEART, ShapeType.TRIANGLE, ShapeType.RANDOM}
)


def unsupported_reason(config: SpinnerConfig) -> str | None:
    """Placeholder comment when the configuration cannot be exported as CSS."""
    if config.shape in UNSUPPORTED_SHAPES:
        return (
            f"<!-- CSS export for '{config.shape.value}' shape is not supported due to its "
            "complexity. Please use the Animated SVG export. -->"
        )
    if config.stroke:
        return (
            "<!-- CSS export with 'stroke' is not supported. "
            "Please use the Animated SVG export for this effect. -->"
        )
    return None


def _px(value: float) -> str:
    return f"{fmt_num(value)}px"


def _box_size(shape: ShapeType, size: float) -> tuple[float, float]:
    if shape == ShapeType.LINE:
        return size / 4, size
    return size, size


def _stop_list(stops: tuple[ColorStop, ...]) -> str:
    return ", ".join(f"{stop.color} {fmt_num(stop.position)}%" for stop in stops)


def css_gradient(gradient: GradientDefinition) -> str:
    """CSS background matching the SVG gradient over each element's box."""
    if gradient.kind == GradientType.LINEAR:
        return f"linear-gradient(to bottom right, {_stop_list(gradient.stops)})"
    return f"radial-gradient(closest-side, {_stop_list(gradient.stops)})"


def _rule(selector: str, declarations: list[str]) -> str:
    body = "".join(f"  {declaration}\n" for declaration in declarations)
    return f"{selector} {{\n{body}}}\n"


class CssExportProvider(ExportProvider):
    """Export provider for an HTML fragment plus a keyframe stylesheet."""

    format_name = "css"

    def render(self, compiled: CompiledSpinner, config: SpinnerConfig) -> ExportArtifact:
        reason = unsupported_reason(config)
        if reason is not None:
            return self.artifact(html=reason, supported=False)

        extent = compiled.layout.extent
        scale = CANVAS_SIZE / extent if extent > 0 else 1.0
        html = self._html(compiled)
        css = "\n".join(
            part
            for part in (
                self._keyframes(compiled, config, scale),
                self._container_rule(compiled),
                self._shared_rule(compiled, config, scale),
                *self._element_rules(compiled, config, scale),
            )
            if part
        )
        return self.artifact(html=html, css=css)

    def _html(self, compiled: CompiledSpinner) -> str:
        children = "".join(
            f'\n  <div class="spinner-element spinner-element-{number}"></div>'
            for number in range(1, len(compiled.elements) + 1)
        )
        return f'<div class="spinner-container">{children}\n</div>'

    def _keyframes(self, compiled: CompiledSpinner, config: SpinnerConfig, scale: float) -> str:
        if not compiled.is_animated:
            return ""
        return keyframes_css(
            config.animation_type, config.shape, target="box", wave_lift=WAVE_LIFT * scale
        ) + "\n"

    def _container_rule(self, compiled: CompiledSpinner) -> str:
        declarations = [
            f"width: {CANVAS_SIZE}px;",
            f"height: {CANVAS_SIZE}px;",
            "position: relative;",
            "margin: 0 auto;",
        ]
        if compiled.group_animation is not None:
            declarations.extend(
                f"{name}: {value};" for name, value in animation_style(compiled.group_animation).items()
            )
            declarations.append("transform-origin: center;")
        return _rule(".spinner-container", declarations)

    def _shared_rule(self, compiled: CompiledSpinner, config: SpinnerConfig, scale: float) -> str:
        width, height = _box_size(config.shape, config.size * scale)
        declarations = [
            "position: absolute;",
            "top: 50%;",
            "left: 50%;",
            f"width: {_px(width)};",
            f"height: {_px(height)};",
            f"margin-left: {_px(-width / 2)};",
            f"margin-top: {_px(-height / 2)};",
        ]
        element_animation = next(
            (element.animation for element in compiled.elements if element.animation), None
        )
        if element_animation is not None:
            style = animation_style(element_animation)
            style.pop("animation-delay")
            declarations.extend(f"{name}: {value};" for name, value in style.items())

        if compiled.gradient is not None:
            declarations.append(f"background: {css_gradient(compiled.gradient)};")
        else:
            declarations.append(f"background-color: {pick_color(config.colors, 0)};")
        if config.shape == ShapeType.CIRCLE:
            declarations.append("border-radius: 50%;")
        if compiled.shadow is not None:
            shadow = compiled.shadow
            declarations.append(
                "filter: drop-shadow("
                f"{_px(shadow.dx * scale)} {_px(shadow.dy * scale)} {_px(shadow.blur * 2 * scale)} "
                f"{rgba(shadow.color, shadow.opacity)});"
            )
        return _rule(".spinner-element", declarations)

    def _element_rules(
        self, compiled: CompiledSpinner, config: SpinnerConfig, scale: float
    ) -> list[str]:
        rules = []
        for number, element in enumerate(compiled.elements, start=1):
            rules.append(
                _rule(f".spinner-element-{number}", self._element_declarations(element, config, scale))
            )
        return rules

    def _element_declarations(
        self, element: Element, config: SpinnerConfig, scale: float
    ) -> list[str]:
        x, y = element.center
        declarations = [f"translate: {_px(x * scale)} {_px(y * scale)};"]
        if element.size != config.size:
            width, height = _box_size(element.shape, element.size * scale)
            declarations.extend(
                [
                    f"width: {_px(width)};",
                    f"height: {_px(height)};",
                    f"margin-left: {_px(-width / 2)};",
                    f"margin-top: {_px(-height / 2)};",
                ]
            )
        if element.rotation:
            declarations.append(f"rotate: {fmt_num(element.rotation)}deg;")
        if element.animation is not None:
            declarations.append(f"animation-delay: {fmt_seconds(element.animation.delay_seconds)};")
        if isinstance(element.fill, LiteralColor) and config.gradient_type != GradientType.NONE:
            declarations.append(f"background-color: {element.fill.color};")
        return declarations
