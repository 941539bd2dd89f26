"""BibTeX extraction from web pages and DOI links."""

from .errors import (
    BibtexError,
    ExtractionError,
    MalformedURLError,
    NoTitleFoundError,
    TransportError,
)
from .models import ExtractionResult
from .pipeline import BibtexExtractor, fetch_and_generate_bibtex

__all__ = [
    "BibtexError",
    "ExtractionError",
    "MalformedURLError",
    "NoTitleFoundError",
    "TransportError",
    "ExtractionResult",
    "BibtexExtractor",
    "fetch_and_generate_bibtex",
]
