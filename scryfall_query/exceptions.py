"""
Exceptions raised by scryfall_query
"""
from typing import Optional


class ScryfallQueryError(Exception):
    """Base class for scryfall_query failures."""


class ScryfallLookupError(ScryfallQueryError):
    """Raised when a single-object lookup cannot produce a record."""

    def __init__(
        self,
        url: str,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[str] = None,
    ):
        self.url = url
        self.status_code = status_code
        self.details = details
        super().__init__(f"[{url}] {message}")
