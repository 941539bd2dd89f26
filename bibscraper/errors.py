"""Errors surfaced to callers of the BibTeX extraction pipeline.

Only these reach the caller; failures inside the DOI lookup and the
JSON-LD scan are absorbed where they happen.
"""


class BibtexError(Exception):
    """Base class for extraction failures.

    Each subclass carries a ``status_code`` and a ``category`` so that a
    rendering layer can tell bad input from an unreachable target from a
    page with nothing extractable.
    """

    status_code = 500
    category = "error"
    prefix = "BibTeX extraction failed"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")

    @property
    def message(self) -> str:
        return str(self)


class TransportError(BibtexError):
    """The underlying HTTP request failed (DNS, connection, TLS, timeout)."""

    status_code = 500
    category = "transport"
    prefix = "Failed to fetch the URL"


class MalformedURLError(BibtexError):
    """The input could not be parsed as an http(s) URL."""

    status_code = 400
    category = "bad_input"
    prefix = "Invalid URL provided"


class ExtractionError(BibtexError):
    """The page was reachable but yielded no usable citation data."""

    status_code = 404
    category = "extraction"
    prefix = "Could not extract BibTeX data"


class NoTitleFoundError(ExtractionError):
    """Neither structured data nor meta tags produced a title."""
