"""Single-value lookups on a parsed HTML document."""

from typing import Optional

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

TEXT = "text"


def select_text(soup: BeautifulSoup, selector: str, attr: str) -> Optional[str]:
    """
    Return one trimmed value from the first element matching ``selector``.

    With ``attr == "text"`` the element's inner HTML is returned, otherwise
    the named attribute. No match, a missing attribute, or a selector that
    soupsieve cannot parse or match all give None.
    """
    try:
        element = soup.select_one(selector)
    except (SelectorSyntaxError, NotImplementedError):
        # soupsieve parses pseudo-elements and at-rules but cannot match them
        return None

    if element is None:
        return None

    if attr == TEXT:
        return element.decode_contents().strip()

    value = element.get(attr)
    if value is None:
        return None
    # Multi-valued attributes (class, rel) come back as lists
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()
