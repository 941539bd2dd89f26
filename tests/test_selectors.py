import pytest

from bibscraper.sources.selectors import select_text
from conftest import soup_of

PAGE = """
<html>
  <head>
    <title>
      Page Title
    </title>
    <meta property="og:title" content="  OG Title  ">
    <meta name="description" content="first">
    <meta name="description" content="second">
  </head>
  <body></body>
</html>
"""


def test_attribute_value_is_trimmed() -> None:
    assert select_text(soup_of(PAGE), "meta[property='og:title']", "content") == "OG Title"


def test_text_returns_trimmed_inner_html() -> None:
    assert select_text(soup_of(PAGE), "title", "text") == "Page Title"


def test_first_matching_element_wins() -> None:
    assert select_text(soup_of(PAGE), "meta[name='description']", "content") == "first"


def test_no_match_gives_none() -> None:
    assert select_text(soup_of(PAGE), "meta[name='author']", "content") is None


def test_missing_attribute_gives_none() -> None:
    assert select_text(soup_of(PAGE), "meta[property='og:title']", "href") is None


@pytest.mark.parametrize("selector", ["meta[[[", "::before", "@page", "title::after"])
def test_invalid_or_unsupported_selector_gives_none(selector: str) -> None:
    assert select_text(soup_of(PAGE), selector, "text") is None
