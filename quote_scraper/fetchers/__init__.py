"""Page fetching and field extraction."""

from .client import DocumentClient
from .extractor import extract_field, select_text

__all__ = ["DocumentClient", "extract_field", "select_text"]
