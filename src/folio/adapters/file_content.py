"""File-based content source adapter."""

from pathlib import Path

from folio.core.collection import BLOG_PATH
from folio.ports.content_source import SourceFile

HOME_FILE = "index.md"


class FileContentSource:
    """
    File-based content source.

    Implements ContentSource protocol. The home page is `index.md` at the
    top of the content directory; posts are the markdown files under `blog/`.
    """

    def __init__(self, content_dir: Path | str):
        self.content_dir = Path(content_dir).expanduser()

    @property
    def posts_dir(self) -> Path:
        return self.content_dir / BLOG_PATH

    def _read(self, path: Path) -> SourceFile:
        return SourceFile(slug=path.stem, data=path.read_bytes(), path=path)

    def read_home(self) -> SourceFile | None:
        """Read the home page source. Returns None if not found."""
        path = self.content_dir / HOME_FILE
        if not path.exists():
            return None
        return self._read(path)

    def list_posts(self) -> list[SourceFile]:
        """Read every post, ordered by file name."""
        if not self.posts_dir.is_dir():
            return []
        return [
            self._read(path)
            for path in sorted(self.posts_dir.glob("*.md"))
            if path.name != HOME_FILE
        ]

    def post_path(self, slug: str) -> Path:
        """Where a post with the given slug lives on disk."""
        return self.posts_dir / f"{slug}.md"
