"""
Scryfall query client
"""
import logging
import threading
import urllib.parse
from typing import Any, Iterable, List, Optional

import pydantic
import requests
import requests.exceptions

from . import constants
from .exceptions import ScryfallLookupError
from .fetcher import FetchResult, PaginatedFetcher, parse_error
from .models import ScryfallCard, ScryfallSet
from .pacing import FixedDelayPacing, PacingPolicy
from .retryable_session import retryable_session
from .scryfall_query_config import ScryfallQueryConfig

LOGGER = logging.getLogger(__name__)


def escape_query(query: str) -> str:
    """
    Form-encode a search expression for use in a query string
    :param query: Search expression in Scryfall syntax
    :return: Escaped expression, or "" if it cannot be encoded
    """
    try:
        return urllib.parse.quote_plus(query, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as error:
        LOGGER.warning(f"Unable to escape query {query!r}: {error}")
        return ""


def build_name_query(card_name: str, list_duplicates: bool = False) -> str:
    """
    Build a search expression that exactly matches a card name
    :param card_name: Full card name
    :param list_duplicates: Match every printing instead of one per card
    :return: Search expression in Scryfall syntax
    """
    if list_duplicates:
        return constants.ALL_PRINTINGS_QUERY.format(card_name)
    return constants.EXACT_NAME_QUERY.format(card_name)


def build_search_url(query: str, base_url: str = constants.API_URI) -> str:
    """
    Build the search URL for a query, one result per printing
    :param query: Search expression in Scryfall syntax
    :param base_url: Scryfall API root
    :return: First page URL
    """
    return base_url + constants.SEARCH_PATH.format(escape_query(query))


class ScryfallClient:
    """
    Entry point for card and set queries against the Scryfall API.
    See https://scryfall.com/docs/syntax for the search syntax.
    """

    base_url: str
    session: requests.Session
    fetcher: PaginatedFetcher

    def __init__(
        self,
        base_url: Optional[str] = None,
        pacing: Optional[PacingPolicy] = None,
        session: Optional[requests.Session] = None,
        max_pages: Optional[int] = None,
    ) -> None:
        config = ScryfallQueryConfig()

        self.base_url = (base_url or config.base_url).rstrip("/")
        self.session = session if session is not None else retryable_session()
        self.fetcher = PaginatedFetcher(
            self.session,
            pacing if pacing is not None else FixedDelayPacing(config.page_delay),
            max_pages if max_pages is not None else config.max_pages,
        )

    def set_session(self, session: requests.Session) -> None:
        """
        Override the HTTP session (primarily for test injection).
        :param session: Custom session to use for HTTP requests
        """
        self.session = session
        self.fetcher.session = session

    def to_card_list(
        self, card_names: Iterable[str], list_duplicates: bool = False
    ) -> List[ScryfallCard]:
        """
        Get every card matching any of the given names, one search per name
        :param card_names: Card names to look up
        :param list_duplicates: Include every printing of each card
        :return: Matches for each name, in the order the names were given
        """
        cards: List[ScryfallCard] = []
        for card_name in card_names:
            cards.extend(self.search(build_name_query(card_name, list_duplicates)))
        return cards

    def search(
        self, query: str, cancel_event: Optional[threading.Event] = None
    ) -> List[ScryfallCard]:
        """
        Get all cards that match a query in Scryfall syntax
        :param query: Search expression
        :param cancel_event: Event that stops the search once set
        :return: Matching cards; partial or empty if a request failed
        """
        return self.search_result(query, cancel_event).records

    def search_result(
        self, query: str, cancel_event: Optional[threading.Event] = None
    ) -> FetchResult[ScryfallCard]:
        """
        Same as search, but keeps track of failures
        :param query: Search expression
        :param cancel_event: Event that stops the search once set
        :return: Matching cards and how the fetch ended
        """
        LOGGER.info(f"Searching Scryfall for {query}")
        return self.fetcher.fetch_all(
            build_search_url(query, self.base_url), ScryfallCard, cancel_event
        )

    def get_cards_from_uri(
        self, uri: str, cancel_event: Optional[threading.Event] = None
    ) -> List[ScryfallCard]:
        """
        Get all cards from a List URI, such as a card's prints_search_uri
        :param uri: First page URI
        :param cancel_event: Event that stops the fetch once set
        :return: Cards from every page; partial or empty if a request failed
        """
        return self.fetcher.fetch_all(uri, ScryfallCard, cancel_event).records

    def get_sets(self) -> List[ScryfallSet]:
        """
        Get every set Scryfall knows about
        :return: Sets; partial or empty if a request failed
        """
        return self.get_sets_result().records

    def get_sets_result(self) -> FetchResult[ScryfallSet]:
        return self.fetcher.fetch_all(
            self.base_url + constants.SETS_PATH, ScryfallSet
        )

    def get_card_by_scryfall_id(self, scryfall_id: str) -> ScryfallCard:
        """
        Get one card by its Scryfall ID
        :param scryfall_id: Scryfall UUID of the card
        :return: The card
        :raises ScryfallLookupError: If the card could not be downloaded
        """
        try:
            escaped_id = urllib.parse.quote(scryfall_id, safe="", errors="strict")
        except UnicodeEncodeError as error:
            LOGGER.error(f"Unable to escape Scryfall ID {scryfall_id!r}: {error}")
            raise ScryfallLookupError(
                self.base_url + constants.CARD_PATH.format(""), f"Invalid ID: {error}"
            ) from error

        return self.get_card_from_uri(
            self.base_url + constants.CARD_PATH.format(escaped_id)
        )

    def get_card_from_uri(self, uri: str) -> ScryfallCard:
        """
        Get one card from a card URI, such as a related card's uri
        :param uri: Card object URI
        :return: The card
        :raises ScryfallLookupError: If the card could not be downloaded
        """
        body = self.__download_object(uri)
        if body.get("object") not in (None, "card"):
            raise ScryfallLookupError(
                uri, f"Expected a card object, got {body.get('object')}"
            )
        try:
            return ScryfallCard.from_json(body)  # type: ignore[return-value]
        except pydantic.ValidationError as error:
            raise ScryfallLookupError(uri, f"Invalid card: {error}") from error

    def __download_object(self, uri: str) -> Any:
        """
        Download a single Scryfall object, failing loudly
        :param uri: Object URI
        :return: Decoded JSON object
        """
        try:
            response = self.fetcher.download(uri)
        except requests.exceptions.RequestException as error:
            LOGGER.error(f"Unable to download {uri}: {error}")
            raise ScryfallLookupError(uri, str(error)) from error

        if not response.ok:
            scryfall_error = parse_error(response)
            details = scryfall_error.details if scryfall_error else None
            LOGGER.error(f"Unable to download {uri}: HTTP {response.status_code}")
            raise ScryfallLookupError(
                uri,
                f"HTTP {response.status_code}: {details or response.reason}",
                status_code=response.status_code,
                details=details,
            )

        try:
            body = response.json()
        except ValueError as error:
            LOGGER.error(f"Unable to convert response to JSON for URL: {uri}")
            raise ScryfallLookupError(
                uri, f"Invalid JSON: {error}", status_code=response.status_code
            ) from error

        if not isinstance(body, dict):
            raise ScryfallLookupError(
                uri, "Expected a JSON object", status_code=response.status_code
            )
        return body
