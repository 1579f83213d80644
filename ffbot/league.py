import logging
from typing import Callable, List, Optional

import requests

from .extractors import ActivityExtractor, PlayerExtractor, ScoreboardExtractor
from .fetcher import DocumentFetcher
from .models import QueryParams, ResultSet
from .query import QueryBuilder
from .settings import Settings

logger = logging.getLogger(__name__)


class LeagueService:
    """Shared service that scrapes one ESPN league's pages on demand."""

    def __init__(self, settings: Settings, session_factory: Optional[Callable[[], requests.Session]] = None):
        self.settings = settings
        self.query_builder = QueryBuilder(settings.base_url)
        self.session_factory = session_factory or requests.Session

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def player_search(self, name: str, position: Optional[str] = None) -> ResultSet:
        params = self._params(search_term=name, position_filter=position)
        url = self.query_builder.build("player_search", params)
        logger.debug("Searching for player at %s", url)

        page = self._fetcher().fetch(url)
        return PlayerExtractor().extract(page, query=name)

    def scoreboard(self, week: Optional[int] = None) -> ResultSet:
        params = self._params(week=week)
        url = self.query_builder.build("scoreboard", params)
        logger.debug("Searching for score at %s", url)

        page = self._fetcher().fetch(url)
        return ScoreboardExtractor().extract(page)

    def recent_activity(self) -> List[str]:
        url = self.query_builder.build("activity", self._params())
        logger.debug("Searching for league activity at %s", url)

        page = self._fetcher().fetch(url)
        return ActivityExtractor().extract(page)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #
    def _params(self, **kwargs) -> QueryParams:
        return QueryParams(
            league_id=self.settings.league_id,
            season_id=self.settings.season_id,
            **kwargs,
        )

    def _fetcher(self) -> DocumentFetcher:
        # Fresh session per request, nothing parsed is shared between calls
        return DocumentFetcher(session=self.session_factory(), timeout=self.settings.request_timeout)
