"""Markdown conversion and summary extraction - no I/O."""

import html
import re

import markdown

SUMMARY_MARKER = "<!--more-->"
MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def to_html(text: str) -> str:
    """
    Convert markdown to HTML.

    A fresh converter is built per call so no state (footnotes, header ids)
    leaks between documents.
    """
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def split_summary(body: str) -> tuple[str, bool]:
    """
    Split a body on the summary marker.

    Returns (text before the marker, whether the marker was found). When there
    is no marker the whole body is returned with False.
    """
    head, marker, _ = body.partition(SUMMARY_MARKER)
    return head, bool(marker)


def strip_markup(text: str) -> str:
    """Render markdown, drop all tags and return collapsed plain text."""
    rendered = to_html(text)
    plain = html.unescape(_TAG_RE.sub("", rendered))
    return _WHITESPACE_RE.sub(" ", plain).strip()


def summarize(body: str) -> str | None:
    """Plain-text summary of a body, or None if it has no summary marker."""
    head, found = split_summary(body)
    if not found:
        return None
    return strip_markup(head)
