"""Error and warning types raised or recorded by the scrape pipeline."""

from typing import Optional


class FetchError(Exception):
    """A page could not be retrieved or parsed. Fatal to the current request."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ValidationError(ValueError):
    """User input was rejected; the message is safe to show in chat."""


class ExtractionWarning(UserWarning):
    """A row-level anomaly that was recovered from during extraction."""


class MalformedRowWarning(ExtractionWarning):
    pass


class UnknownCodeWarning(ExtractionWarning):
    def __init__(self, code: str):
        super().__init__(f"Status {code} missing from status map")
        self.code = code
