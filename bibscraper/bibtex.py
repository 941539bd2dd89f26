"""Rendering of scraped metadata as a BibTeX @misc entry.

Field values are written as-is. Braces or backslashes in a scraped title
are not escaped and can produce an unbalanced entry.
"""

from datetime import date
from typing import List, Optional, Tuple

from .models import ExtractionResult


def _fields(
    result: ExtractionResult, url: str, hostname: str, accessed: str
) -> List[Tuple[str, str]]:
    fields = [("title", result.title)]
    if result.author:
        fields.append(("author", result.author))
    fields.append(("howpublished", f"\\url{{{url}}}"))
    fields.append(("note", f"Accessed: {accessed}"))
    if result.year:
        fields.append(("year", result.year))
    fields.append(("urldate", accessed))
    fields.append(("publisher", hostname))
    return fields


def render_misc_record(
    citation_key: str,
    result: ExtractionResult,
    url: str,
    hostname: str,
    accessed: Optional[date] = None,
) -> str:
    """
    Assemble a ``@misc`` entry.

    Args:
        citation_key: Key placed after ``@misc{``
        result: Extracted title, author and year
        url: The page URL, wrapped in ``\\url{}`` as howpublished
        hostname: Site host used as publisher
        accessed: Access date; defaults to today's local date

    Returns:
        The entry text, ending with the closing brace and no newline.
    """
    accessed_on = (accessed or date.today()).strftime("%Y-%m-%d")

    lines = [f"@misc{{{citation_key},"]
    for name, value in _fields(result, url, hostname, accessed_on):
        lines.append(f"  {name} = {{{value}}},")
    lines.append("}")
    return "\n".join(lines)
