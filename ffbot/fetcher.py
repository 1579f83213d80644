import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .errors import FetchError
from .settings import DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


class DocumentFetcher:
    """Fetches a page and hands back a BeautifulSoup tree. No retries."""

    HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/118.0.0.0 Safari/537.36"
        )
    }

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_REQUEST_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout

    def fetch(self, url: str) -> BeautifulSoup:
        logger.debug("Fetching %s", url)
        try:
            response = self.session.get(url, headers=self.HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc

        return self.fetch_html(response.text, url=url)

    @staticmethod
    def fetch_html(html: str, url: Optional[str] = None) -> BeautifulSoup:
        """Parse an already retrieved document (e.g. a captured fixture)."""
        if html is None:
            raise FetchError("Empty response body", url=url)
        try:
            return BeautifulSoup(html, HTML_PARSER)
        except Exception as exc:
            raise FetchError(f"Could not parse document from {url or '<string>'}: {exc}", url=url) from exc
