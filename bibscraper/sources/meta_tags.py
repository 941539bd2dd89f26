"""Open Graph and generic meta tag fallback."""

import logging

from bs4 import BeautifulSoup

from ..models import ExtractionResult, year_from_date
from .selectors import TEXT, select_text

logger = logging.getLogger(__name__)

TITLE_SOURCES = [
    ("meta[property='og:title']", "content"),
    ("title", TEXT),
]
AUTHOR_SOURCES = [
    ("meta[name='author']", "content"),
    ("meta[property='article:author']", "content"),
]
PUBLISHED_TIME_SELECTOR = "meta[property='article:published_time']"


def first_value(soup: BeautifulSoup, sources) -> str:
    """Return the first value found among ``(selector, attr)`` pairs, or ""."""
    for selector, attr in sources:
        value = select_text(soup, selector, attr)
        if value is not None:
            return value
    return ""


def extract_from_meta_tags(soup: BeautifulSoup) -> ExtractionResult:
    """
    Extract citation metadata from meta tags and the <title> element.

    Each field is resolved on its own, so a page missing an author still
    yields its title and date. The title may come back empty.
    """
    title = first_value(soup, TITLE_SOURCES)
    author = first_value(soup, AUTHOR_SOURCES)
    year = year_from_date(select_text(soup, PUBLISHED_TIME_SELECTOR, "content"))

    logger.info("Extracted metadata from meta tags.")
    return ExtractionResult(title=title, author=author, year=year)
