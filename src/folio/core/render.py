"""Page rendering - substitutes document metadata into the shell template.

Pure functions - no I/O. A ShellTemplate is compiled once and can be reused
for every page of a build.
"""

import re
from dataclasses import dataclass
from datetime import date

from jinja2 import Environment, StrictUndefined, TemplateSyntaxError, UndefinedError, meta
from markupsafe import Markup

from .document import Document
from .errors import MissingTemplateSlot
from .markup import summarize, to_html

DEFAULT_DATE_FORMAT = "%B %d, %Y"

# Top-level names a shell template may refer to
KNOWN_SLOTS = frozenset({"page", "site"})
REQUIRED_SLOTS = frozenset({"page"})

_UNDEFINED_RE = re.compile(r"'(\w+)'(?: is undefined)?$")

jinja_env = Environment(
    autoescape=True,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


@dataclass(frozen=True)
class SiteInfo:
    """Site-wide values available to every page as `site`."""

    title: str = "Home"
    description: str = ""
    base_url: str = ""
    author: str = ""


@dataclass(frozen=True)
class NavLink:
    """A link to a neighbouring page."""

    title: str
    url: str


@dataclass(frozen=True)
class Navigation:
    """Previous (older) and next (newer) links for a post."""

    previous: NavLink | None = None
    next: NavLink | None = None


@dataclass(frozen=True)
class PageView:
    """Per-page values available to the shell as `page`."""

    title: str
    description: str
    content: Markup
    url: str = ""
    layout: str = "page"
    date: str | None = None
    date_iso: str | None = None
    updated: str | None = None
    updated_iso: str | None = None
    previous: NavLink | None = None
    next: NavLink | None = None


class ShellTemplate:
    """
    A compiled shell template.

    Raises MissingTemplateSlot on construction if the source doesn't parse,
    refers to a slot other than `page`/`site`, or never uses `page`.
    """

    def __init__(self, source: str, name: str = "shell"):
        self.name = name
        try:
            ast = jinja_env.parse(source)
        except TemplateSyntaxError as e:
            raise MissingTemplateSlot(name, f"line {e.lineno}: {e.message}") from e

        slots = meta.find_undeclared_variables(ast) - set(jinja_env.globals)
        unknown = sorted(slots - KNOWN_SLOTS)
        if unknown:
            raise MissingTemplateSlot(unknown[0], f"not provided to {name}")
        missing = sorted(REQUIRED_SLOTS - slots)
        if missing:
            raise MissingTemplateSlot(missing[0], f"never used by {name}")

        self._template = jinja_env.from_string(source)

    def fill(self, page: PageView, site: SiteInfo) -> str:
        """Render the shell with the given values."""
        try:
            return self._template.render(page=page, site=site)
        except UndefinedError as e:
            match = _UNDEFINED_RE.search(str(e))
            slot = match.group(1) if match else "unknown"
            raise MissingTemplateSlot(slot, str(e)) from e


def format_date(value: date | None, date_format: str = DEFAULT_DATE_FORMAT) -> str | None:
    """Format an optional date for display."""
    if value is None:
        return None
    return value.strftime(date_format)


def page_description(document: Document, site: SiteInfo) -> str:
    """
    Short plain-text description used for metadata tags.

    Explicit front-matter description first, then the text before the
    summary marker, then the site description.
    """
    if document.description:
        return document.description
    summary = summarize(document.body)
    if summary:
        return summary
    return site.description


def render(
    document: Document,
    template: ShellTemplate,
    *,
    site: SiteInfo | None = None,
    nav: Navigation | None = None,
    url: str = "",
    date_format: str = DEFAULT_DATE_FORMAT,
    extra_html: str = "",
) -> str:
    """
    Render a document into a complete HTML page.

    Pure function - no I/O. Optional blocks (date, updated, navigation) are
    suppressed when their values are absent. `extra_html` is appended after
    the rendered body, e.g. a post listing.
    """
    site = site or SiteInfo()
    nav = nav or Navigation()

    page = PageView(
        title=document.title or site.title,
        description=page_description(document, site),
        content=Markup(to_html(document.body)) + Markup(extra_html),
        url=url,
        layout=document.layout,
        date=format_date(document.date, date_format),
        date_iso=document.date.isoformat() if document.date else None,
        updated=format_date(document.updated, date_format),
        updated_iso=document.updated.isoformat() if document.updated else None,
        previous=nav.previous,
        next=nav.next,
    )
    return template.fill(page, site)
