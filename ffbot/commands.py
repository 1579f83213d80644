"""
Chat command routing.

Turns a line of chat text into a call on the LeagueService and returns the
reply to post back. Users only ever see strings from here: validation errors
come back as corrective messages and fetch failures as a generic apology.
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from .errors import FetchError, ValidationError
from .formatter import format_lines, format_table
from .league import LeagueService

logger = logging.getLogger(__name__)

MIN_WEEK = 1
MAX_WEEK = 13
WEEK_RANGE_MESSAGE = f"Please specify a week from {MIN_WEEK} - {MAX_WEEK}"
FETCH_FAILURE_MESSAGE = "Sorry, I couldn't reach ESPN right now."
NO_ACTIVITY_MESSAGE = "No recent activity in the league."

TROLL_RESPONSES = (
    "Your request was bad and you should feel bad.",
    "Stop wasting my time with your bullshit.",
    "Was that even English?",
)


def validate_week(text: Optional[str]) -> Optional[int]:
    """Return the requested week, None for "current", or raise ValidationError."""
    text = (text or "").strip()
    if not text:
        return None
    if not (text.isascii() and text.isdigit()):
        raise ValidationError(WEEK_RANGE_MESSAGE)

    week = int(text)
    if week < MIN_WEEK or week > MAX_WEEK:
        raise ValidationError(WEEK_RANGE_MESSAGE)
    return week


@dataclass(frozen=True)
class Route:
    pattern: re.Pattern
    handler: str
    usage: str
    description: str


class CommandRouter:
    def __init__(self, service: LeagueService, choose: Callable[[List[str]], str] = random.choice):
        self.service = service
        self.choose = choose
        self.routes = [
            Route(
                re.compile(r"^player\s+(.+)$"),
                "command_player",
                "player PLAYER NAME",
                "Replies information about this football player",
            ),
            Route(
                re.compile(r"^score(?:board)?(?:\s+(.*))?$"),
                "command_scoreboard",
                "score WEEK",
                "Replies with the scoreboard for the specified week. "
                "If WEEK is empty, the current scoreboard is returned",
            ),
            Route(
                re.compile(r"^sup\b"),
                "command_sup",
                "sup",
                "Replies with the league's recent activity",
            ),
            Route(
                re.compile(r"^help$"),
                "command_help",
                "help",
                "Lists the available commands",
            ),
        ]

    def handle(self, text: str, user: Optional[str] = None) -> str:
        text = (text or "").strip()
        for route in self.routes:
            match = route.pattern.match(text)
            if match:
                handler = getattr(self, route.handler)
                try:
                    return handler(match, user or "someone")
                except ValidationError as exc:
                    logger.debug("Rejected %r from %s: %s", text, user, exc)
                    return str(exc)
                except FetchError:
                    logger.exception("Failed to handle %r", text)
                    return FETCH_FAILURE_MESSAGE

        logger.debug("No route for %r", text)
        return self.troll_response()

    def troll_response(self) -> str:
        return self.choose(list(TROLL_RESPONSES))

    # ------------------------------------------------------------------ #
    # Handlers
    # ------------------------------------------------------------------ #
    def command_player(self, match: re.Match, user: str) -> str:
        player = match.group(1).strip()
        logger.debug("%s asked about player %s", user, player)

        results = self.service.player_search(player)
        if results.rows:
            return format_table(results)
        return f"No results found for '{player}'"

    def command_scoreboard(self, match: re.Match, user: str) -> str:
        raw_week = match.group(1) or ""
        logger.debug("%s requested scoreboard for week '%s'", user, raw_week)

        week = validate_week(raw_week)
        return format_table(self.service.scoreboard(week))

    def command_sup(self, match: re.Match, user: str) -> str:
        logger.debug("%s asked what's up", user)
        activity = self.service.recent_activity()
        if activity:
            return format_lines(activity)
        return NO_ACTIVITY_MESSAGE

    def command_help(self, match: re.Match, user: str) -> str:
        return "\n".join(f"{route.usage} - {route.description}" for route in self.routes)
