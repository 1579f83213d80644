"""
Lookup tables for ESPN's short position and status codes.

Position ids are only used to build free-agency queries; scraped position
strings are passed through untouched. Status codes decode the trailing
injury/suspension marker in a player's bio cell.
"""

import logging
from types import MappingProxyType
from typing import List, Optional

from .errors import UnknownCodeWarning

logger = logging.getLogger(__name__)

POSITION_CODES = MappingProxyType(
    {
        "qb": 0,
        "rb": 2,
        "wr": 4,
        "te": 6,
        "flex": 23,
        "d": 16,
        "k": 17,
    }
)

STATUS_CODES = MappingProxyType(
    {
        "ir": "injured",
        "o": "out",
        "p": "probable",
        "q": "questionable",
        "sspd": "suspended",
    }
)


def position_id(code: Optional[str]) -> Optional[int]:
    if not code:
        return None
    return POSITION_CODES.get(code.lower())


def normalize_status(code: str, warnings: Optional[List[UnknownCodeWarning]] = None) -> str:
    """Decode a status code, keeping unknown codes as-is (lower-cased)."""
    code = code.lower()
    label = STATUS_CODES.get(code)
    if label is not None:
        return label

    warning = UnknownCodeWarning(code)
    logger.warning("%s", warning)
    if warnings is not None:
        warnings.append(warning)
    return code
