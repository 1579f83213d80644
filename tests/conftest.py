"""
Pytest configuration and shared fixtures.

Pages are served from captured HTML under tests/fixtures through a fake
requests session, so nothing here talks to ESPN.
"""

from pathlib import Path
from typing import Dict, List, Optional

import pytest
import requests

from ffbot.fetcher import DocumentFetcher
from ffbot.league import LeagueService
from ffbot.settings import Settings

FIXTURES = Path(__file__).parent / "fixtures"
BASE_URL = "http://espn.test/ffl"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeResponse:
    def __init__(self, text: str, status_code: int = 200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Serves fixture pages keyed by ESPN page path (e.g. "/scoreboard")."""

    def __init__(self, pages: Dict[str, str], status_code: int = 200, error: Optional[Exception] = None):
        self.pages = pages
        self.status_code = status_code
        self.error = error
        self.requested: List[str] = []

    def get(self, url, headers=None, timeout=None):
        self.requested.append(url)
        if self.error is not None:
            raise self.error

        path = url[len(BASE_URL):].split("?", 1)[0]
        return FakeResponse(self.pages.get(path, "<html></html>"), status_code=self.status_code)


@pytest.fixture
def settings():
    return Settings(league_id="12345", season_id="2015", base_url=BASE_URL, request_timeout=5)


@pytest.fixture
def pages():
    return {
        "/freeagency": load_fixture("freeagency.html"),
        "/scoreboard": load_fixture("scoreboard.html"),
        "/recentactivity": load_fixture("recentactivity.html"),
    }


@pytest.fixture
def session(pages):
    return FakeSession(pages)


@pytest.fixture
def service(settings, session):
    return LeagueService(settings, session_factory=lambda: session)


@pytest.fixture
def parse_fixture():
    def _parse(name: str):
        return DocumentFetcher.fetch_html(load_fixture(name))

    return _parse


@pytest.fixture
def make_service(settings):
    def _make(session):
        return LeagueService(settings, session_factory=lambda: session)

    return _make
