"""
DOI content negotiation.

DOI registries can answer with a ready-made BibTeX entry when asked for
``application/x-bibtex``. That entry is returned untouched and the page is
never scraped.
"""

import logging
import re
from typing import Optional

from config.settings import settings
from ..errors import TransportError
from ..fetcher import HTMLFetcher, is_success

logger = logging.getLogger(__name__)

DOI_URL_RE = re.compile(r"^(?:https?://)?(?:dx\.)?doi\.org/(.+)")


def match_doi(url: str) -> Optional[str]:
    """Return the DOI suffix of a doi.org link, or None."""
    match = DOI_URL_RE.match(url)
    return match.group(1) if match else None


def is_bibtex(body: str) -> bool:
    stripped = body.strip()
    return bool(stripped) and stripped.startswith("@")


class DOIResolver:
    """Fetches registry-formatted BibTeX for doi.org URLs."""

    def __init__(
        self,
        fetcher: Optional[HTMLFetcher] = None,
        resolver_url: Optional[str] = None,
    ):
        self.fetcher = fetcher or HTMLFetcher()
        self.resolver_url = (resolver_url or settings.doi_resolver_url).rstrip("/")

    def resolve(self, url: str) -> Optional[str]:
        """
        Look up the BibTeX record for a DOI link.

        Args:
            url: The raw input URL

        Returns:
            The registry's response body verbatim, or None when the URL is
            not a DOI link or the registry gave nothing usable. Transport
            failures are logged and also give None.
        """
        doi = match_doi(url)
        if doi is None:
            return None

        doi_url = f"{self.resolver_url}/{doi}"
        try:
            response = self.fetcher.get(doi_url, headers={"Accept": settings.bibtex_accept})
            body = response.text
        except TransportError as e:
            logger.warning(f"DOI lookup failed for {doi}: {e.detail}")
            return None

        if not is_success(response):
            logger.info(f"DOI registry returned status {response.status_code} for {doi}")
            return None

        if not is_bibtex(body):
            logger.info(f"DOI registry response for {doi} is not BibTeX")
            return None

        logger.info("Found BibTeX via DOI content negotiation.")
        return body
