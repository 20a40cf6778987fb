"""File-based site writer adapter."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class FileSiteWriter:
    """
    Writes generated pages under an output directory.

    Implements SiteWriter protocol.
    """

    def __init__(self, output_dir: Path | str):
        self.output_dir = Path(output_dir).expanduser()

    def write_page(self, relative_path: str, html: str) -> Path:
        """Write an HTML page relative to the output directory."""
        path = self.output_dir / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        logger.debug(f"Wrote {path}")
        return path

    def copy_static(self, source_dir: Path) -> list[Path]:
        """Copy every file under source_dir into the output root."""
        if not source_dir.is_dir():
            return []

        copied = []
        for source in sorted(source_dir.rglob("*")):
            if not source.is_file():
                continue
            target = self.output_dir / source.relative_to(source_dir)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(source, target)
            copied.append(target)
        logger.debug(f"Copied {len(copied)} static files from {source_dir}")
        return copied
