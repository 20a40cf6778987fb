"""Adapters - I/O implementations of ports."""

from .file_content import FileContentSource
from .file_output import FileSiteWriter

__all__ = [
    "FileContentSource",
    "FileSiteWriter",
]
