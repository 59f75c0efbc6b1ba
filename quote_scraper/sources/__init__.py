"""Quote source definitions."""

from .registry import GOOGLE_FINANCE, SEEKING_ALPHA, SOURCES, YAHOO, get_source

__all__ = ["GOOGLE_FINANCE", "SEEKING_ALPHA", "SOURCES", "YAHOO", "get_source"]
