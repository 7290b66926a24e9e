"""
scryfall_query constants that cannot be changed and are hardcoded intentionally
"""

import pathlib

TOP_LEVEL_DIR: pathlib.Path = pathlib.Path(__file__).resolve().parent.parent
RESOURCE_PATH: pathlib.Path = TOP_LEVEL_DIR.joinpath("scryfall_query").joinpath(
    "resources"
)
CONFIG_PATH: pathlib.Path = RESOURCE_PATH.joinpath("scryfall_query.properties")
CONFIG_PATH_ENV: str = "SCRYFALL_QUERY_CONFIG"
DEBUG_ENV: str = "SCRYFALL_QUERY_DEBUG"

API_URI: str = "https://api.scryfall.com"

# Scryfall asks for 50-100 ms between requests
PAGE_DELAY_SECONDS: float = 0.05
CALLS_PER_SECOND: int = 10

REQUEST_TIMEOUT_SECONDS: int = 30
REQUEST_RETRIES: int = 3

USER_AGENT: str = "scryfall-query/1.0"

SEARCH_PATH: str = "/cards/search?unique=prints&q={0}"
CARD_PATH: str = "/cards/{0}"
SETS_PATH: str = "/sets"

EXACT_NAME_QUERY: str = '!"{0}"'
ALL_PRINTINGS_QUERY: str = '++!"{0}"'
