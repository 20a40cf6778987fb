"""Content document model and front-matter parsing - no I/O."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime

import yaml

from .errors import FrontMatterError

FRONT_MATTER_DELIMITER = "---"

_SLUG_PATTERN = re.compile(r"[^a-z0-9\-]")


@dataclass(frozen=True)
class Document:
    """A markdown page with its front-matter."""

    body: str
    title: str | None = None
    date: date | None = None
    updated: date | None = None
    slug: str = ""
    layout: str = "page"
    description: str | None = None
    draft: bool = False

    @property
    def sort_key(self) -> tuple:
        """Newest first when sorted ascending; undated documents last, by title."""
        if self.date is None:
            return (1, 0, (self.title or self.slug).lower())
        return (0, -self.date.toordinal(), (self.title or self.slug).lower())


def normalize_slug(value: str) -> str:
    """Lowercase a name into a URL-safe slug."""
    raw = value.strip().lower().replace(" ", "-").replace("_", "-")
    sanitized = _SLUG_PATTERN.sub("-", raw)
    sanitized = re.sub(r"-+", "-", sanitized)
    return sanitized.strip("-")


def split_front_matter(text: str) -> tuple[str | None, str]:
    """
    Separate a leading front-matter block from the body.

    Returns (raw front-matter or None, body). Raises FrontMatterError if the
    opening delimiter is never closed.
    """
    text = text.lstrip("\ufeff")
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return None, text

    for i in range(1, len(lines)):
        if lines[i].strip() == FRONT_MATTER_DELIMITER:
            return "".join(lines[1:i]), "".join(lines[i + 1 :])

    raise FrontMatterError("front-matter block is not terminated")


def _parse_date(value, field_name: str, slug: str) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    # A time suffix ("T10:30" or " 10:30") is allowed and dropped
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise FrontMatterError(f"invalid {field_name} '{value}'", slug=slug)


def _parse_flag(value, field_name: str, slug: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise FrontMatterError(f"{field_name} must be true or false, got '{value}'", slug=slug)


def _optional_str(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_document(text: str, slug: str = "") -> Document:
    """
    Parse a markdown file with an optional YAML front-matter block.

    Pure function - no I/O.
    """
    try:
        raw, body = split_front_matter(text)
    except FrontMatterError as e:
        raise FrontMatterError(str(e), slug=slug) from e

    if raw is None:
        return Document(body=body, slug=normalize_slug(slug))

    try:
        meta = yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise FrontMatterError(f"invalid YAML: {e}", slug=slug) from e

    if not isinstance(meta, dict):
        raise FrontMatterError("front-matter must be a mapping", slug=slug)

    return Document(
        body=body,
        title=_optional_str(meta.get("title")),
        date=_parse_date(meta.get("date"), "date", slug),
        updated=_parse_date(meta.get("updated"), "updated", slug),
        slug=normalize_slug(str(meta.get("slug") or slug)),
        layout=_optional_str(meta.get("layout")) or "page",
        description=_optional_str(meta.get("description")),
        draft=_parse_flag(meta.get("draft"), "draft", slug),
    )


def format_front_matter(title: str, post_date: date, layout: str = "post") -> str:
    """Front-matter block for a freshly scaffolded post."""
    meta = {"layout": layout, "title": title, "date": post_date}
    dumped = yaml.safe_dump(meta, sort_keys=False, allow_unicode=True)
    return f"{FRONT_MATTER_DELIMITER}\n{dumped}{FRONT_MATTER_DELIMITER}\n"
