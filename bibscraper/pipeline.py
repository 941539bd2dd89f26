"""
Generate a BibTeX entry for an arbitrary web page.

Strategies are tried from most to least reliable:

1. DOI content negotiation (registry-formatted BibTeX, returned verbatim)
2. Schema.org JSON-LD embedded in the page
3. Open Graph / generic meta tags and the <title> element

Metadata from 2 or 3 is turned into a ``@misc`` entry with a synthesized
citation key.
"""

import logging
from typing import Callable, Optional, Sequence
from urllib.parse import SplitResult, urlsplit

import requests
from bs4 import BeautifulSoup

from .bibtex import render_misc_record
from .citation_key import generate_citation_key
from .errors import MalformedURLError, NoTitleFoundError
from .fetcher import HTMLFetcher
from .models import ExtractionResult
from .sources.doi import DOIResolver
from .sources.meta_tags import extract_from_meta_tags
from .sources.structured_data import extract_from_schema

logger = logging.getLogger(__name__)

MetadataStrategy = Callable[[BeautifulSoup], Optional[ExtractionResult]]

# Order matters: the first strategy returning a result wins
METADATA_STRATEGIES: Sequence[MetadataStrategy] = (
    extract_from_schema,
    extract_from_meta_tags,
)


def parse_source_url(url: str) -> SplitResult:
    """
    Parse the page URL.

    Raises:
        MalformedURLError: if it is not an absolute http(s) URL with a host.
    """
    try:
        parsed = urlsplit(url.strip())
    except ValueError as e:
        raise MalformedURLError(str(e)) from e

    if parsed.scheme not in ("http", "https"):
        raise MalformedURLError(f"unsupported or missing scheme in {url!r}")
    if not parsed.hostname:
        raise MalformedURLError(f"no host in {url!r}")
    return parsed


def extract_metadata(
    soup: BeautifulSoup,
    strategies: Sequence[MetadataStrategy] = METADATA_STRATEGIES,
) -> ExtractionResult:
    """Run the metadata strategies in order and return the first result."""
    results = (strategy(soup) for strategy in strategies)
    return next((r for r in results if r is not None), ExtractionResult())


class BibtexExtractor:
    """
    Produces BibTeX for a URL using DOI lookup, then page scraping.

    One instance can serve any number of concurrent requests; it holds
    no per-request state.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        strategies: Sequence[MetadataStrategy] = METADATA_STRATEGIES,
    ):
        self.fetcher = HTMLFetcher(session=session, timeout=timeout)
        self.doi_resolver = DOIResolver(fetcher=self.fetcher)
        self.strategies = tuple(strategies)

    def extract(self, url: str) -> str:
        """
        Generate a BibTeX entry for ``url``.

        Args:
            url: The page or DOI link to cite

        Returns:
            The DOI registry's entry verbatim, or a synthesized ``@misc`` entry

        Raises:
            MalformedURLError: the URL is not a usable http(s) URL
            TransportError: the page could not be fetched
            ExtractionError: the page returned a non-2xx status
            NoTitleFoundError: no strategy found a title
        """
        # Step 1: DOI content negotiation
        bibtex = self.doi_resolver.resolve(url)
        if bibtex is not None:
            return bibtex

        # Step 2: Scrape the page
        logger.info("DOI method failed or not applicable. Falling back to HTML scraping.")
        parsed = parse_source_url(url)
        html = self.fetcher.fetch(url)
        soup = BeautifulSoup(html, "html.parser")

        # Step 3: Metadata in order of preference
        result = extract_metadata(soup, self.strategies)
        if not result.title:
            raise NoTitleFoundError("Could not find a title for the page.")

        # Step 4: Assemble the entry
        citation_key = generate_citation_key(result.author, result.year, result.title)
        return render_misc_record(
            citation_key, result, url, hostname=parsed.hostname or ""
        )


def fetch_and_generate_bibtex(
    url: str, session: Optional[requests.Session] = None
) -> str:
    """
    Generate a BibTeX entry for a single URL.

    Uses the process-wide shared session unless one is given.
    """
    return BibtexExtractor(session=session).extract(url)
