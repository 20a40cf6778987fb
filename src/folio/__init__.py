"""Folio - a small static site generator for a personal website."""

__version__ = "0.1.0"
