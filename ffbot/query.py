import logging
from typing import List, Tuple

from .models import QueryParams
from .normalize import position_id
from .settings import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


class QueryBuilder:
    """Builds ESPN fantasy page URLs for a league and season."""

    ENDPOINT_PATHS = {
        "player_search": "/freeagency",
        "scoreboard": "/scoreboard",
        "activity": "/recentactivity",
    }

    def __init__(self, base_url: str = DEFAULT_BASE_URL):
        self.base_url = base_url.rstrip("/")

    def build(self, endpoint: str, params: QueryParams) -> str:
        try:
            path = self.ENDPOINT_PATHS[endpoint]
        except KeyError:
            raise ValueError(f"Unknown endpoint: {endpoint!r}") from None

        pairs: List[Tuple[str, object]] = [
            ("leagueId", params.league_id),
            ("seasonId", params.season_id),
        ]

        if endpoint == "player_search":
            pairs.extend(self._player_search_pairs(params))
        elif endpoint == "scoreboard" and params.week is not None:
            # Without a matchup period ESPN serves the current one
            pairs.append(("matchupPeriodId", params.week))

        # Values are substituted raw, ESPN expects the unescaped search term
        param_string = "&".join(f"{key}={value}" for key, value in pairs)
        return f"{self.base_url}{path}?{param_string}"

    def _player_search_pairs(self, params: QueryParams) -> List[Tuple[str, object]]:
        pairs: List[Tuple[str, object]] = [
            ("avail", -1),
            ("search", params.search_term or ""),
        ]

        if params.position_filter:
            position = position_id(params.position_filter)
            if position is None:
                logger.debug("Ignoring unknown position filter %r", params.position_filter)
            else:
                pairs.append(("position", position))
                pairs.append(("slotCategoryId", 2))
        return pairs
