"""Base class for spinner export providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from ..config import SpinnerConfig
from ..spinner.geometry import CompiledSpinner


@dataclass(frozen=True)
class ExportArtifact:
    """Text produced by an export provider.

    ``supported`` is False when the provider cannot represent the
    configuration; ``html`` then holds an explanatory placeholder comment.
    """

    format: str
    html: str = ""
    css: str = ""
    js: str = ""
    supported: bool = True
    html_suffix: str = ".html"

    def files(self, base_path: str | Path) -> dict[Path, str]:
        """Map output paths (derived from ``base_path``) to their contents."""
        base = Path(base_path)
        stem = base.with_suffix("") if base.suffix else base
        parts = {
            self.html_suffix: self.html,
            ".css": self.css,
            ".js": self.js,
        }
        return {
            stem.with_name(stem.name + suffix): content
            for suffix, content in parts.items()
            if content
        }

    def as_dict(self) -> dict[str, object]:
        return {
            "format": self.format,
            "html": self.html,
            "css": self.css,
            "js": self.js,
            "supported": self.supported,
        }


class ExportProvider(ABC):
    """Abstract base class for export providers."""

    format_name: str = ""
    html_suffix: str = ".html"

    def __init__(self, path: str = ""):
        """
        Initialize the provider with an output base path.

        Args:
            path: Base path for the written files (suffixes are replaced)
        """
        self.path = path

    @abstractmethod
    def render(self, compiled: CompiledSpinner, config: SpinnerConfig) -> ExportArtifact:
        """
        Format a compiled spinner.

        Args:
            compiled: Output of the geometry engine
            config: Configuration the spinner was compiled from

        Returns:
            The export artifact
        """
        raise NotImplementedError

    def artifact(
        self, html: str = "", css: str = "", js: str = "", supported: bool = True
    ) -> ExportArtifact:
        return ExportArtifact(
            format=self.format_name,
            html=html,
            css=css,
            js=js,
            supported=supported,
            html_suffix=self.html_suffix,
        )

    def write(self, artifact: ExportArtifact) -> list[Path]:
        """
        Write every non-empty artifact part next to the base path.

        Returns:
            The written paths
        """
        if not self.path:
            raise ValueError("Output path not set")
        written = []
        for path, content in artifact.files(self.path).items():
            with open(path, "w") as f:
                f.write(content)
            written.append(path)
        return written
