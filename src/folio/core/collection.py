"""Post collection logic - ordering, drafts, neighbours and listings. No I/O."""

from dataclasses import dataclass
from typing import Callable, Iterable

from markupsafe import Markup

from .document import Document
from .errors import FrontMatterError
from .markup import summarize
from .render import DEFAULT_DATE_FORMAT, NavLink, Navigation, jinja_env, format_date

BLOG_PATH = "blog"

# Post slugs that would land on top of the listing page
RESERVED_SLUGS = frozenset({"", "index"})

LISTING_TEMPLATE = """\
<ul class="post-list">
{%- for entry in entries %}
  <li class="post-list__item">
    <a href="{{ entry.url }}">{{ entry.title }}</a>
    {%- if entry.date %}
    <time datetime="{{ entry.date_iso }}">{{ entry.date }}</time>
    {%- endif %}
    {%- if entry.summary %}
    <p>{{ entry.summary }}</p>
    {%- endif %}
  </li>
{%- else %}
  <li class="post-list__item post-list__item--empty">Nothing here yet.</li>
{%- endfor %}
</ul>
"""

_listing = jinja_env.from_string(LISTING_TEMPLATE)


@dataclass(frozen=True)
class ListingEntry:
    """One line of the blog listing."""

    title: str
    url: str
    date: str | None
    date_iso: str | None
    summary: str


def post_url(document: Document) -> str:
    """Site-relative URL of a post."""
    return f"/{BLOG_PATH}/{document.slug}/"


def check_post_slug(document: Document, name: str) -> Document:
    """Reject posts whose slug is empty or collides with the listing page."""
    if document.slug in RESERVED_SLUGS:
        raise FrontMatterError(
            f"cannot derive a usable slug (got '{document.slug}'); set a `slug` field",
            slug=name,
        )
    return document


def display_title(document: Document) -> str:
    return document.title or document.slug


def publishable(documents: Iterable[Document], include_drafts: bool = False) -> list[Document]:
    """Drop drafts unless asked to keep them."""
    return [d for d in documents if include_drafts or not d.draft]


def sort_by_date(documents: Iterable[Document]) -> list[Document]:
    """Newest first. Undated documents go last, ordered by title."""
    return sorted(documents, key=lambda d: d.sort_key)


def link_neighbours(
    documents: Iterable[Document],
    url_for: Callable[[Document], str] = post_url,
) -> dict[str, Navigation]:
    """
    Pair each post with its chronological neighbours.

    Returns {slug: Navigation}; `previous` is the older post, `next` the newer.
    """
    ordered = sort_by_date(documents)
    links = [NavLink(title=display_title(d), url=url_for(d)) for d in ordered]

    navigation = {}
    for i, doc in enumerate(ordered):
        newer = links[i - 1] if i > 0 else None
        older = links[i + 1] if i + 1 < len(ordered) else None
        navigation[doc.slug] = Navigation(previous=older, next=newer)
    return navigation


def listing_entries(
    documents: Iterable[Document],
    url_for: Callable[[Document], str] = post_url,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> list[ListingEntry]:
    """Listing entries in date order."""
    return [
        ListingEntry(
            title=display_title(d),
            url=url_for(d),
            date=format_date(d.date, date_format),
            date_iso=d.date.isoformat() if d.date else None,
            summary=d.description or summarize(d.body) or "",
        )
        for d in sort_by_date(documents)
    ]


def render_listing(
    documents: Iterable[Document],
    url_for: Callable[[Document], str] = post_url,
    date_format: str = DEFAULT_DATE_FORMAT,
    limit: int | None = None,
) -> Markup:
    """Render the blog listing fragment, optionally only the `limit` newest posts."""
    entries = listing_entries(documents, url_for, date_format)
    if limit is not None:
        entries = entries[:limit]
    return Markup(_listing.render(entries=entries))


def duplicate_slugs(documents: Iterable[Document]) -> set[str]:
    """Slugs used by more than one document."""
    seen = set()
    duplicates = set()
    for doc in documents:
        if doc.slug in seen:
            duplicates.add(doc.slug)
        seen.add(doc.slug)
    return duplicates
