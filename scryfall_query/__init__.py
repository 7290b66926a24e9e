"""
scryfall_query, a paginated client for the Scryfall card database
https://scryfall.com/docs/api
MIT License
"""

from .client import ScryfallClient, build_name_query, build_search_url, escape_query
from .exceptions import ScryfallLookupError, ScryfallQueryError
from .fetcher import FetchResult, PaginatedFetcher
from .models import ScryfallCard, ScryfallRecord, ScryfallSet
from .pacing import FixedDelayPacing, NoPacing, PacingPolicy

__all__ = [
    "FetchResult",
    "FixedDelayPacing",
    "NoPacing",
    "PacingPolicy",
    "PaginatedFetcher",
    "ScryfallCard",
    "ScryfallClient",
    "ScryfallLookupError",
    "ScryfallQueryError",
    "ScryfallRecord",
    "ScryfallSet",
    "build_name_query",
    "build_search_url",
    "escape_query",
]
