from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, List, Optional, Sequence, Union

from .errors import ExtractionWarning


@dataclass(frozen=True)
class QueryParams:
    league_id: str
    season_id: str
    week: Optional[int] = None
    position_filter: Optional[str] = None
    search_term: Optional[str] = None

    def __post_init__(self):
        if self.week is not None and self.week < 1:
            raise ValueError(f"week must be a positive integer, got {self.week}")


@dataclass(frozen=True)
class PlayerRecord:
    name: str
    team: str
    position: str
    owner: str
    projection: str
    note: Optional[str] = None

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class MatchupRecord:
    teams: str
    scores: str

    @classmethod
    def from_rows(cls, team_top: str, team_bottom: str, score_top: str, score_bottom: str) -> "MatchupRecord":
        # Trailing blank line keeps a gap between matchups in the rendered table
        return cls(
            teams=f"{team_top}\n{team_bottom}\n ",
            scores=f"{score_top}\n{score_bottom}\n ",
        )

    def as_dict(self) -> Dict:
        return asdict(self)


Record = Union[PlayerRecord, MatchupRecord]


@dataclass(frozen=True)
class ResultSet:
    headers: Sequence[str]
    rows: Sequence[Record] = ()
    warnings: Sequence[ExtractionWarning] = field(default=())

    def __bool__(self) -> bool:
        return bool(self.rows)

    def table_rows(self) -> List[List[Any]]:
        """Return each record's values in header order."""
        return [[getattr(row, f.name) for f in fields(row)] for row in self.rows]

    def as_dicts(self) -> List[Dict]:
        return [row.as_dict() for row in self.rows]
