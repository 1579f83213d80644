import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_SEASON_ID = "2015"
DEFAULT_BASE_URL = "http://games.espn.go.com/ffl"
DEFAULT_REQUEST_TIMEOUT = 10  # seconds


@dataclass(frozen=True)
class Settings:
    league_id: str
    season_id: str = DEFAULT_SEASON_ID
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        """Read league settings from ESPN_* environment variables."""
        league_id = os.getenv("ESPN_LEAGUE_ID")
        if not league_id:
            raise ValueError("Missing required environment variable: ESPN_LEAGUE_ID")

        timeout = os.getenv("ESPN_REQUEST_TIMEOUT")
        try:
            request_timeout = float(timeout) if timeout else DEFAULT_REQUEST_TIMEOUT
        except ValueError:
            request_timeout = DEFAULT_REQUEST_TIMEOUT

        return cls(
            league_id=league_id,
            season_id=os.getenv("ESPN_SEASON_ID") or DEFAULT_SEASON_ID,
            base_url=(os.getenv("ESPN_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            request_timeout=request_timeout,
        )
