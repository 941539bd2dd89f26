"""
HTTP access for the extraction pipeline.

A single requests.Session carrying the configured User-Agent is shared by
every extraction in the process. Nothing here retries: a failed request is
reported once.
"""

import logging
from functools import lru_cache
from typing import Dict, Optional

import requests

from config.settings import settings
from .errors import ExtractionError, TransportError

logger = logging.getLogger(__name__)


def build_session(user_agent: Optional[str] = None) -> requests.Session:
    """Create a session that sends the fixed User-Agent on every request."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent or settings.user_agent})
    return session


@lru_cache(maxsize=None)
def get_default_session() -> requests.Session:
    """Return the process-wide session, building it on first use."""
    return build_session()


def is_success(response: requests.Response) -> bool:
    return 200 <= response.status_code < 300


class HTMLFetcher:
    """Issues GET requests on a shared session and decodes page bodies."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.session = session if session is not None else get_default_session()
        self.timeout = timeout if timeout is not None else settings.request_timeout

    def get(
        self, url: str, headers: Optional[Dict[str, str]] = None
    ) -> requests.Response:
        """
        Send a GET request.

        Raises:
            TransportError: if the request could not be completed.
        """
        try:
            return self.session.get(url, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e)) from e

    def fetch(self, url: str) -> str:
        """
        Fetch a page and return its body as text.

        Raises:
            TransportError: if the request or body download failed.
            ExtractionError: if the server answered with a non-2xx status.
        """
        response = self.get(url)

        if not is_success(response):
            status = f"{response.status_code} {response.reason or ''}".strip()
            raise ExtractionError(f"URL returned status {status}")

        # Pages that declare no charset are read as UTF-8
        content_type = response.headers.get("Content-Type", "")
        if "charset" not in content_type.lower():
            response.encoding = "utf-8"

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.text
