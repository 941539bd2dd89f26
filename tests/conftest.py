"""Shared fixtures for the extraction tests. No test touches the network."""

from unittest.mock import MagicMock

import pytest
import requests
from bs4 import BeautifulSoup


def make_response(
    status: int = 200,
    body: str = "",
    content_type: str = "text/html; charset=utf-8",
    reason: str = "",
) -> requests.Response:
    """Build a real requests.Response with preset content."""
    response = requests.Response()
    response.status_code = status
    response.reason = reason or ("OK" if status < 300 else "Error")
    response._content = body.encode("utf-8")
    response.headers["Content-Type"] = content_type
    response.encoding = "utf-8" if "charset" in content_type else None
    return response


def soup_of(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


@pytest.fixture
def session() -> MagicMock:
    """A stand-in for the shared requests.Session."""
    return MagicMock(spec=requests.Session)
