"""Site output interface."""

from pathlib import Path
from typing import Protocol


class SiteWriter(Protocol):
    """Interface for emitting generated files."""

    def write_page(self, relative_path: str, html: str) -> Path:
        """Write an HTML page, returning where it landed."""
        ...

    def copy_static(self, source_dir: Path) -> list[Path]:
        """Copy static assets into the output root."""
        ...
