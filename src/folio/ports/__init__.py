"""Ports - interfaces/protocols for external dependencies."""

from .content_source import ContentSource, SourceFile
from .site_writer import SiteWriter

__all__ = [
    "ContentSource",
    "SourceFile",
    "SiteWriter",
]
