"""Metadata sources: DOI registry, JSON-LD, and meta tags."""

from .doi import DOIResolver, match_doi
from .meta_tags import extract_from_meta_tags
from .selectors import select_text
from .structured_data import extract_from_schema

__all__ = [
    "DOIResolver",
    "match_doi",
    "extract_from_meta_tags",
    "select_text",
    "extract_from_schema",
]
