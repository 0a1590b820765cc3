"""CLI interface for spinforge."""

import json
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import (
    DEFAULT_CONFIG,
    ConfigError,
    SpinnerConfig,
    config_to_dict,
    load_config,
    normalize_key,
)
from .constants import DEFAULT_PREVIEW_BACKGROUND, PREVIEW_QUALITY
from .editing import apply_overrides
from .export_pipeline import export_spinner, preview_spinner
from .output import export_format_label, resolve_export_provider, supported_export_formats
from .output.base import ExportArtifact, ExportProvider

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_EXPORT_FORMATS_TEXT = ", ".join(supported_export_formats())
SEED_ENVVAR = "SPINFORGE_SEED"

app = typer.Typer(help="Design radial loading spinners and export them as code.")


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


@app.command()
def export(
    config_path: str = typer.Argument(
        ..., help="Spinner configuration JSON file ('-' for the defaults)"
    ),
    export_format: str = typer.Option(
        "svg",
        "--format",
        "-f",
        help=f"Export format ({SUPPORTED_EXPORT_FORMATS_TEXT})",
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Base path for the exported files (prints to stdout when omitted)",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        envvar=SEED_ENVVAR,
        help="Seed for the random shape and radius draws",
    ),
    overrides: list[str] = typer.Option(
        None,
        "--set",
        help="Override a configuration field, e.g. --set count=8 --set shape=star",
    ),
) -> None:
    """
    Export a spinner as an animated SVG, HTML + CSS, or an SVG with a GSAP timeline.

    Examples:
      # Standalone SVG from the built-in defaults
      spinforge export - --format svg --output spinner.svg

      # CSS version with a different shape
      spinforge export spinner.json --format css --set shape=square
    """
    try:
        config = _load_config(config_path, overrides)
        provider = _resolve_provider(export_format, out or "")
        if out:
            console.print(
                f"[bold blue]Generating {export_format_label(export_format)} export...[/bold blue]"
            )
        artifact = export_spinner(config, export_format, seed=seed, provider=provider)

        if not artifact.supported:
            err_console.print(
                f"[yellow]Warning:[/yellow] {export_format_label(export_format)} cannot represent "
                "this configuration; only a placeholder was produced"
            )

        if out:
            for path in provider.write(artifact):
                console.print(f"[green]✓[/green] Saved {path}")
        else:
            _print_artifact(artifact)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def preview(
    config_path: str = typer.Argument(
        ..., help="Spinner configuration JSON file ('-' for the defaults)"
    ),
    out: str = typer.Option(
        "spinner.png",
        "--output",
        "-o",
        help="PNG file to write",
    ),
    quality: str = typer.Option(
        "medium",
        "--quality",
        "-q",
        help=f"Preview resolution ({', '.join(PREVIEW_QUALITY)})",
    ),
    background: str = typer.Option(
        DEFAULT_PREVIEW_BACKGROUND,
        "--background",
        "-b",
        help="Background color, or 'transparent'",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        envvar=SEED_ENVVAR,
        help="Seed for the random shape and radius draws",
    ),
    overrides: list[str] = typer.Option(
        None,
        "--set",
        help="Override a configuration field, e.g. --set count=8",
    ),
) -> None:
    """Render the first frame of a spinner to a PNG image."""
    try:
        config = _load_config(config_path, overrides)
        size = PREVIEW_QUALITY.get(quality.lower())
        if size is None:
            raise CLIError(
                f"Unknown quality '{quality}'. Available: {', '.join(PREVIEW_QUALITY)}"
            )
        fill = None if background.lower() == "transparent" else background

        console.print(f"[bold blue]Rendering {size}x{size} preview...[/bold blue]")
        try:
            encoded = preview_spinner(config, size=size, background=fill, seed=seed)
        except ValueError as e:
            raise CLIError(f"Failed to render preview: {e}")

        _write_bytes(encoded, out)
        console.print(f"[green]✓[/green] PNG saved to {out}")

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


@app.command()
def defaults(
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the default configuration to this JSON file",
    ),
) -> None:
    """Print or save the default spinner configuration."""
    text = json.dumps(config_to_dict(DEFAULT_CONFIG), indent=2)
    if not out:
        console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return
    try:
        with open(out, "w") as f:
            f.write(text + "\n")
        console.print(f"[green]✓[/green] Defaults saved to {out}")
    except IOError as e:
        err_console.print(f"[bold red]Error:[/bold red] Failed to save file '{out}': {e}")
        sys.exit(1)


def _load_config(config_path: str, overrides: list[str] | None) -> SpinnerConfig:
    """Load the configuration file and apply ``key=value`` overrides."""
    try:
        if config_path == "-":
            config = DEFAULT_CONFIG
        else:
            config = load_config(config_path)
        return apply_overrides(config, _parse_overrides(overrides or []))
    except FileNotFoundError:
        raise CLIError(f"File '{config_path}' not found")
    except ConfigError as e:
        raise CLIError(f"Invalid configuration: {e}")


def _parse_overrides(items: list[str]) -> dict[str, str]:
    overrides = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise CLIError(f"Override '{item}' must look like key=value")
        overrides[normalize_key(key.strip())] = value.strip()
    return overrides


def _resolve_provider(export_format: str, out: str) -> ExportProvider:
    try:
        return resolve_export_provider(export_format, out)
    except ValueError as exc:
        raise CLIError(str(exc))


def _print_artifact(artifact: ExportArtifact) -> None:
    """Print each non-empty part of the artifact under a heading."""
    parts = [("HTML", artifact.html), ("CSS", artifact.css), ("JavaScript", artifact.js)]
    for title, content in parts:
        if not content:
            continue
        console.print(f"[bold]/* {title} */[/bold]")
        console.print(content, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _write_bytes(encoded: bytes, output_path: str) -> None:
    try:
        Path(output_path).write_bytes(encoded)
    except IOError as e:
        raise CLIError(f"Failed to save file '{output_path}': {e}")


if __name__ == "__main__":
    app()
