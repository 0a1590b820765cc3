"""Shared compile-and-emit orchestration used by CLI and web app entry points."""

from .config import SpinnerConfig
from .constants import CANVAS_SIZE
from .output import resolve_export_provider
from .output.base import ExportArtifact, ExportProvider
from .renderer import PreviewRenderer, encode_png
from .spinner import compile_spinner


def export_spinner(
    config: SpinnerConfig,
    export_format: str,
    *,
    seed: int | None = None,
    provider: ExportProvider | None = None,
) -> ExportArtifact:
    """Compile the configuration and render it with the provider for ``export_format``."""
    target_provider = provider or resolve_export_provider(export_format)
    compiled = compile_spinner(config, seed=seed)
    return target_provider.render(compiled, config)


def preview_spinner(
    config: SpinnerConfig,
    *,
    size: int = CANVAS_SIZE,
    background: str | None = None,
    seed: int | None = None,
) -> bytes:
    """Render the first frame of the spinner as PNG bytes."""
    compiled = compile_spinner(config, seed=seed)
    renderer = PreviewRenderer(compiled, config, size=size, background=background)
    return encode_png(renderer.render_frame())
