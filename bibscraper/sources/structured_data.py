"""
Schema.org JSON-LD extraction.

Pages that embed an Article description in a
``<script type="application/ld+json">`` block give the most reliable
metadata short of a DOI, so this strategy runs before the meta tags.
"""

import logging
from typing import Iterable, Iterator, Optional

from bs4 import BeautifulSoup
from pydantic import ValidationError

from ..models import ExtractionResult, StructuredArticle, year_from_date

logger = logging.getLogger(__name__)

JSON_LD_SELECTOR = "script[type='application/ld+json']"
ARTICLE_TYPES = frozenset({"Article", "NewsArticle", "BlogPosting"})
AUTHOR_SEPARATOR = " and "


def decode_article(json_text: str) -> Optional[StructuredArticle]:
    """Decode one JSON-LD block, returning None if it is not Article-shaped."""
    try:
        return StructuredArticle.model_validate_json(json_text)
    except ValidationError as e:
        logger.debug(f"Skipping JSON-LD block: {e.error_count()} validation error(s)")
        return None


def to_result(article: StructuredArticle) -> Optional[ExtractionResult]:
    """Map an accepted article to an ExtractionResult, or None if rejected."""
    if article.type_of not in ARTICLE_TYPES:
        return None

    title = article.headline or ""
    if not title:
        return None

    return ExtractionResult(
        title=title,
        author=AUTHOR_SEPARATOR.join(article.author_names),
        year=year_from_date(article.date_published),
    )


def iter_json_ld_blocks(soup: BeautifulSoup) -> Iterator[str]:
    for element in soup.select(JSON_LD_SELECTOR):
        yield element.decode_contents()


def first_article(blocks: Iterable[str]) -> Optional[ExtractionResult]:
    """Return the first block that decodes to an accepted article."""
    articles = (decode_article(text) for text in blocks)
    results = (to_result(a) for a in articles if a is not None)
    return next((r for r in results if r is not None), None)


def extract_from_schema(soup: BeautifulSoup) -> Optional[ExtractionResult]:
    """
    Extract citation metadata from the page's JSON-LD blocks.

    Blocks are tried in document order; undecodable blocks are skipped.

    Returns:
        ExtractionResult for the first Article, NewsArticle or BlogPosting
        with a non-empty headline, or None if there is none.
    """
    result = first_article(iter_json_ld_blocks(soup))
    if result is not None:
        logger.info("Extracted metadata from Schema.org JSON-LD.")
    return result
