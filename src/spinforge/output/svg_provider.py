"""Standalone animated SVG export provider."""

from ..config import GradientType, SpinnerConfig
from ..spinner.colors import GradientDefinition
from ..spinner.geometry import CompiledSpinner, ShadowFilter
from ._svg_shared import fmt_attributes, fmt_num, fmt_style
from .base import ExportArtifact, ExportProvider
from .live_model import DrawInstruction, LiveRenderModel, build_live_model

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _stop_markup(position: float, color: str) -> str:
    attributes = {"offset": f"{fmt_num(position)}%", "stop-color": color}
    return f"<stop {fmt_attributes(attributes)} />"


def gradient_markup(gradient: GradientDefinition) -> str:
    stops = "".join(_stop_markup(stop.position, stop.color) for stop in gradient.stops)
    if gradient.kind == GradientType.LINEAR:
        attributes = {"id": gradient.id, "x1": "0%", "y1": "0%", "x2": "100%", "y2": "100%"}
        return f"<linearGradient {fmt_attributes(attributes)}>{stops}</linearGradient>"
    attributes = {"id": gradient.id, "cx": "50%", "cy": "50%", "r": "50%"}
    return f"<radialGradient {fmt_attributes(attributes)}>{stops}</radialGradient>"


def shadow_markup(shadow: ShadowFilter) -> str:
    region = {"id": shadow.id, "x": "-50%", "y": "-50%", "width": "200%", "height": "200%"}
    drop = {
        "dx": fmt_num(shadow.dx),
        "dy": fmt_num(shadow.dy),
        "stdDeviation": fmt_num(shadow.blur),
        "flood-color": shadow.color,
        "flood-opacity": fmt_num(shadow.opacity),
    }
    return f"<filter {fmt_attributes(region)}><feDropShadow {fmt_attributes(drop)} /></filter>"


def _instruction_markup(instruction: DrawInstruction) -> str:
    attributes = dict(instruction.attributes)
    if instruction.style:
        attributes["style"] = fmt_style(instruction.style)
    return f"<{instruction.tag} {fmt_attributes(attributes)} />"


def render_svg_document(model: LiveRenderModel) -> str:
    """Serialize a live render model as a self-contained SVG document."""
    root = {
        "width": str(model.width),
        "height": str(model.height),
        "viewBox": model.view_box,
        "xmlns": SVG_NAMESPACE,
        "style": "overflow: visible;",
    }
    lines = [f"<svg {fmt_attributes(root)}>"]
    if model.keyframes:
        lines.extend(["  <style>", f"    {model.keyframes}", "  </style>"])

    lines.append("  <defs>")
    if model.gradient is not None:
        lines.append(f"    {gradient_markup(model.gradient)}")
    if model.shadow is not None:
        lines.append(f"    {shadow_markup(model.shadow)}")
    lines.append("  </defs>")

    group = dict(model.group_attributes)
    if model.group_style:
        group["style"] = fmt_style(model.group_style)
    lines.append(f"  <g {fmt_attributes(group)}>" if group else "  <g>")
    lines.extend(f"    {_instruction_markup(instruction)}" for instruction in model.instructions)
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines)


class SvgExportProvider(ExportProvider):
    """Export provider for a self-contained animated SVG document."""

    format_name = "svg"
    html_suffix = ".svg"

    def render(self, compiled: CompiledSpinner, config: SpinnerConfig) -> ExportArtifact:
        model = build_live_model(compiled, config)
        return self.artifact(html=render_svg_document(model))
