"""Functional core - pure rendering logic with no I/O."""

from .errors import FolioError, FrontMatterError, MissingTemplateSlot
from .markup import SUMMARY_MARKER, split_summary, strip_markup, summarize, to_html
from .document import Document, parse_document, normalize_slug
from .render import NavLink, Navigation, SiteInfo, ShellTemplate, render, page_description
from .collection import link_neighbours, publishable, render_listing, sort_by_date, post_url

__all__ = [
    # Errors
    "FolioError",
    "FrontMatterError",
    "MissingTemplateSlot",
    # Markup
    "SUMMARY_MARKER",
    "split_summary",
    "strip_markup",
    "summarize",
    "to_html",
    # Documents
    "Document",
    "parse_document",
    "normalize_slug",
    # Rendering
    "NavLink",
    "Navigation",
    "SiteInfo",
    "ShellTemplate",
    "render",
    "page_description",
    # Collection
    "link_neighbours",
    "publishable",
    "render_listing",
    "sort_by_date",
    "post_url",
]
