"""
Core utilities for the ESPN fantasy football league bot.

This package hosts the scrape, extract and format pipeline so the Flask
webhook and the command-line script can reuse the same ESPN integration.
"""

from .commands import CommandRouter, validate_week
from .errors import FetchError, MalformedRowWarning, UnknownCodeWarning, ValidationError
from .league import LeagueService
from .settings import Settings

__all__ = [
    "CommandRouter",
    "FetchError",
    "LeagueService",
    "MalformedRowWarning",
    "Settings",
    "UnknownCodeWarning",
    "ValidationError",
    "validate_week",
]
