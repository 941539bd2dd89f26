"""Configuration settings for the BibTeX extractor.

Handles the outbound HTTP identity, timeouts, and the DOI registry endpoint.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/137.0.0.0 Safari/537.36"
)


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError as e:
        raise ValueError(f"{name} must be a number of seconds, got {value!r}") from e


class Settings(BaseModel):
    """Application settings loaded from environment variables."""

    # HTTP client
    user_agent: str = os.getenv("BIBTEX_USER_AGENT", DEFAULT_USER_AGENT)
    # None leaves the transport default in place
    request_timeout: Optional[float] = _optional_float("REQUEST_TIMEOUT")

    # DOI content negotiation
    doi_resolver_url: str = os.getenv("DOI_RESOLVER_URL", "https://doi.org")
    bibtex_accept: str = "application/x-bibtex; charset=utf-8"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
