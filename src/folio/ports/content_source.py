"""Content source interface."""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from folio.core.errors import FrontMatterError


@dataclass(frozen=True)
class SourceFile:
    """Raw bytes of a content file, not yet decoded or parsed."""

    slug: str
    data: bytes
    path: Path | None = None

    @property
    def text(self) -> str:
        """UTF-8 text of the file. Raises FrontMatterError if it doesn't decode."""
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FrontMatterError(f"not valid UTF-8 (byte {e.start})", slug=self.slug) from e


class ContentSource(Protocol):
    """Interface for reading markdown content from any backend."""

    def read_home(self) -> SourceFile | None:
        """Read the home page source. Returns None if there is none."""
        ...

    def list_posts(self) -> list[SourceFile]:
        """Read every blog post source."""
        ...
