"""Attribute resolution across quote sources."""

from .resolver import DocumentProvider, resolve_from_source
from .robust import resolve_all, visit_order

__all__ = ["DocumentProvider", "resolve_all", "resolve_from_source", "visit_order"]
