"""Citation key synthesis, e.g. "Doe2025FirstWord"."""

UNKNOWN_AUTHOR = "Unknown"
NO_DATE = "ND"
NO_TITLE = "NoTitle"


def _first_token(value: str, default: str) -> str:
    tokens = value.split()
    return tokens[0] if tokens else default


def _alphanumeric(value: str) -> str:
    return "".join(c for c in value if c.isalnum())


def generate_citation_key(author: str, year: str, title: str) -> str:
    """
    Build a citation key from author surname-ish token, year, and title word.

    The first whitespace-delimited token of ``author`` and ``title`` is kept
    with non-alphanumerics removed; ``year`` is used verbatim. Missing parts
    become "Unknown", "ND" and "NoTitle". Keys are not unique across pages.
    """
    author_part = _alphanumeric(_first_token(author, UNKNOWN_AUTHOR))
    year_part = year if year else NO_DATE
    title_part = _alphanumeric(_first_token(title, NO_TITLE))
    return f"{author_part}{year_part}{title_part}"
