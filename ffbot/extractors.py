"""
Extractors that pull typed records out of parsed ESPN fantasy pages.

Every CSS selector and positional cell index the extractors rely on lives in
a selector table at the top of this module. ESPN's markup is unversioned, so
when the site changes only these tables should need touching.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .errors import ExtractionWarning, MalformedRowWarning
from .models import MatchupRecord, PlayerRecord, ResultSet
from .normalize import normalize_status

logger = logging.getLogger(__name__)

PLAYER_HEADERS = ("player", "team", "position", "owner", "projection", "note")
SCOREBOARD_HEADERS = ("team", "score")


@dataclass(frozen=True)
class PlayerSelectors:
    row: str = "table.playerTableTable.tableBody tr.pncPlayerRow"
    bio_cell: str = "td.playertablePlayerName"
    cell: str = "td"
    owner_index: int = 2
    projection_index: int = 13


@dataclass(frozen=True)
class ScoreboardSelectors:
    matchup: str = ".ptsBased.matchup"
    row: str = "tr"
    team: str = "td.team div.name a"
    score: str = "td.score"


@dataclass(frozen=True)
class ActivitySelectors:
    row: str = ".games-fullcol.games-fullcol-extramargin > table > tr"
    cell: str = "td"
    header_rows: int = 2
    text_index: int = 2


def _select_text(node: Optional[Tag], selector: str) -> str:
    # Concatenate every match, an absent node reads as an empty string
    if node is None:
        return ""
    return "".join(match.get_text() for match in node.select(selector))


def _cell_text(cells: List[Tag], index: int) -> str:
    return cells[index].get_text() if index < len(cells) else ""


class PlayerExtractor:
    """Parses free-agency search result rows into PlayerRecords."""

    def __init__(self, selectors: PlayerSelectors = PlayerSelectors()):
        self.selectors = selectors

    def extract(self, page: BeautifulSoup, query: str = "") -> ResultSet:
        rows: List[PlayerRecord] = []
        warnings: List[ExtractionWarning] = []

        for row in page.select(self.selectors.row):
            record = self._parse_row(row, query, warnings)
            if record is not None:
                rows.append(record)

        return ResultSet(headers=PLAYER_HEADERS, rows=tuple(rows), warnings=tuple(warnings))

    def _parse_row(self, row: Tag, query: str, warnings: List[ExtractionWarning]) -> Optional[PlayerRecord]:
        bio_cell = row.select_one(self.selectors.bio_cell)
        if bio_cell is None:
            return None

        parts = bio_cell.get_text().split(", ")
        name = parts[0]
        chunks = parts[1].split() if len(parts) > 1 else []

        if len(chunks) < 2:
            warning = MalformedRowWarning(f"Got a weird cell for player query {query}")
            logger.warning("%s", warning)
            warnings.append(warning)
            return None

        team, position = chunks[0], chunks[1]
        note = None
        if len(chunks) > 2:
            note = normalize_status(chunks[2], warnings)

        cells = row.select(self.selectors.cell)
        return PlayerRecord(
            name=name,
            team=team,
            position=position,
            owner=_cell_text(cells, self.selectors.owner_index),
            projection=_cell_text(cells, self.selectors.projection_index),
            note=note,
        )


class ScoreboardExtractor:
    """Turns each head-to-head matchup box into a two-line MatchupRecord."""

    def __init__(self, selectors: ScoreboardSelectors = ScoreboardSelectors()):
        self.selectors = selectors

    def extract(self, page: BeautifulSoup) -> ResultSet:
        matchups = [self._parse_matchup(m) for m in page.select(self.selectors.matchup)]
        return ResultSet(headers=SCOREBOARD_HEADERS, rows=tuple(matchups))

    def _parse_matchup(self, matchup: Tag) -> MatchupRecord:
        rows = matchup.select(self.selectors.row)
        top = rows[0] if len(rows) > 0 else None
        bottom = rows[1] if len(rows) > 1 else None

        return MatchupRecord.from_rows(
            team_top=_select_text(top, self.selectors.team),
            team_bottom=_select_text(bottom, self.selectors.team),
            score_top=_select_text(top, self.selectors.score),
            score_bottom=_select_text(bottom, self.selectors.score),
        )


class ActivityExtractor:
    def __init__(self, selectors: ActivitySelectors = ActivitySelectors()):
        self.selectors = selectors

    def extract(self, page: BeautifulSoup) -> List[str]:
        # The first rows are the table title and column headings
        rows = page.select(self.selectors.row)[self.selectors.header_rows:]
        return [_cell_text(row.select(self.selectors.cell), self.selectors.text_index) for row in rows]
