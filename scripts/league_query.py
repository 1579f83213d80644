#!/usr/bin/env python3
"""
Command-line access to the league scraper.

Runs the same pipeline the chat bot uses and prints the rendered table, or
the raw records as JSON with --json.
"""

import argparse
import json
import logging
import sys

from ffbot import FetchError, LeagueService, Settings, ValidationError, validate_week
from ffbot.commands import NO_ACTIVITY_MESSAGE
from ffbot.formatter import format_lines, format_table

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Query an ESPN fantasy football league.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the extracted records as JSON instead of a table.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    player = subparsers.add_parser("player", help="Search free agency for a player.")
    player.add_argument("name", nargs="+", help="Player name to search for.")
    player.add_argument(
        "--position",
        default=None,
        help="Restrict the search to a position (qb, rb, wr, te, flex, d, k).",
    )

    score = subparsers.add_parser("score", help="Show the scoreboard for a week.")
    score.add_argument("week", nargs="?", default="", help="Week 1-13 (default: current week).")

    subparsers.add_parser("sup", help="Show recent league activity.")
    return parser.parse_args(argv)


def run(args: argparse.Namespace, service: LeagueService) -> str:
    if args.command == "player":
        name = " ".join(args.name)
        results = service.player_search(name, position=args.position)
        if args.json:
            return json.dumps(results.as_dicts(), indent=2)
        if not results.rows:
            return f"No results found for '{name}'"
        return format_table(results)

    if args.command == "score":
        results = service.scoreboard(validate_week(args.week))
        if args.json:
            return json.dumps(results.as_dicts(), indent=2)
        return format_table(results)

    activity = service.recent_activity()
    if args.json:
        return json.dumps(activity, indent=2)
    if not activity:
        return NO_ACTIVITY_MESSAGE
    return format_lines(activity)


def main(argv=None) -> int:
    args = parse_args(argv)
    service = LeagueService(Settings.from_env())

    try:
        print(run(args, service))
    except ValidationError as exc:
        print(exc, file=sys.stderr)
        return 1
    except FetchError as exc:
        logger.error("Could not fetch league data: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
