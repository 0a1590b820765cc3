"""Export providers for the supported spinner code formats."""

from dataclasses import dataclass

from .base import ExportArtifact, ExportProvider
from .css_provider import CssExportProvider
from .gsap_provider import GsapExportProvider
from .live_model import DrawInstruction, LiveRenderModel, build_live_model
from .svg_provider import SvgExportProvider, render_svg_document


@dataclass(frozen=True)
class ExportFormatSpec:
    label: str
    media_type: str
    provider_class: type[ExportProvider]


_EXPORT_FORMATS: dict[str, ExportFormatSpec] = {
    "svg": ExportFormatSpec(
        label="Animated SVG",
        media_type="image/svg+xml",
        provider_class=SvgExportProvider,
    ),
    "css": ExportFormatSpec(
        label="HTML + CSS",
        media_type="text/html",
        provider_class=CssExportProvider,
    ),
    "gsap": ExportFormatSpec(
        label="GSAP (JS)",
        media_type="text/html",
        provider_class=GsapExportProvider,
    ),
}


def resolve_export_provider(export_format: str, path: str = "") -> ExportProvider:
    """
    Resolve the export provider for a format name.

    Args:
        export_format: Format name (case-insensitive)
        path: Optional base path the provider writes to

    Returns:
        An ExportProvider instance

    Raises:
        ValueError: If the format is not supported
    """
    spec = _export_spec(export_format)
    return spec.provider_class(path)


def supported_export_formats() -> tuple[str, ...]:
    """Return supported export format names."""
    return tuple(_EXPORT_FORMATS.keys())


def export_format_label(export_format: str) -> str:
    return _export_spec(export_format).label


def media_type_for_export_format(export_format: str) -> str:
    return _export_spec(export_format).media_type


def _export_spec(export_format: str) -> ExportFormatSpec:
    spec = _EXPORT_FORMATS.get(export_format.lower())
    if spec is not None:
        return spec
    supported = ", ".join(supported_export_formats())
    raise ValueError(f"Unsupported export format: {export_format}. Supported formats: {supported}")


__all__ = [
    "ExportArtifact",
    "ExportFormatSpec",
    "ExportProvider",
    "CssExportProvider",
    "GsapExportProvider",
    "SvgExportProvider",
    "DrawInstruction",
    "LiveRenderModel",
    "build_live_model",
    "render_svg_document",
    "resolve_export_provider",
    "supported_export_formats",
    "export_format_label",
    "media_type_for_export_format",
]
