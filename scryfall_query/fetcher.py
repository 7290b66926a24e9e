"""
Paginated fetch-and-aggregate over Scryfall List objects
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, Tuple, Type, TypeVar

import pydantic
import ratelimit
import requests
import requests.exceptions

from . import constants
from .models import ScryfallCard, ScryfallError, ScryfallPage, ScryfallRecord
from .pacing import FixedDelayPacing, PacingPolicy

LOGGER = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=ScryfallRecord)


@dataclass
class FetchResult(Generic[RecordT]):
    """Outcome of following a List object through all of its pages."""

    records: List[RecordT] = field(default_factory=list)
    pages_requested: int = 0
    error: Optional[str] = None
    cancelled: bool = False
    truncated: bool = False

    @property
    def ok(self) -> bool:
        """
        Did every request that was issued succeed
        :return: False if a request or decode failed along the way
        """
        return self.error is None

    @property
    def complete(self) -> bool:
        """
        Were all pages collected
        :return: True only if nothing failed, was cancelled, or was cut short
        """
        return self.ok and not self.cancelled and not self.truncated


class PaginatedFetcher:
    """
    Follows Scryfall's has_more/next_page links, one request at a time
    """

    session: requests.Session
    pacing: PacingPolicy
    max_pages: Optional[int]

    def __init__(
        self,
        session: requests.Session,
        pacing: Optional[PacingPolicy] = None,
        max_pages: Optional[int] = None,
    ) -> None:
        if max_pages is not None and max_pages < 1:
            raise ValueError(f"max_pages must be at least 1, got {max_pages}")

        self.session = session
        self.pacing = pacing if pacing is not None else FixedDelayPacing()
        self.max_pages = max_pages

    def fetch_all(
        self,
        starting_url: str,
        record_type: Type[RecordT] = ScryfallCard,  # type: ignore[assignment]
        cancel_event: Optional[threading.Event] = None,
    ) -> FetchResult[RecordT]:
        """
        Connects to Scryfall API and goes through all pages of a List object
        to get the records via multiple API calls
        :param starting_url: First Page URL
        :param record_type: Record class each data entry is decoded into
        :param cancel_event: Event that stops the fetch once set
        :return: Records from every page, in the order Scryfall returned them
        """
        result: FetchResult[RecordT] = FetchResult()
        next_url: Optional[str] = starting_url

        while next_url:
            if cancel_event is not None and cancel_event.is_set():
                LOGGER.info(f"Fetch cancelled before {next_url}")
                result.cancelled = True
                break

            LOGGER.debug(
                f"Downloading page {result.pages_requested + 1} -- {next_url}"
            )
            page, error = self.download_page(next_url)
            result.pages_requested += 1

            if error:
                result.error = error
                break
            if page is None:
                break

            try:
                records = [record_type.from_json(entry) for entry in page.data]
            except pydantic.ValidationError as error:
                LOGGER.warning(f"Unable to decode records from {next_url}: {error}")
                result.error = f"Invalid record: {error}"
                break
            result.records.extend(records)  # type: ignore[arg-type]

            # Go to the next page, if it exists
            if not page.has_more:
                break

            if not page.next_page:
                LOGGER.warning(f"{next_url} reported more pages without a next_page")
                break

            if self.max_pages is not None and result.pages_requested >= self.max_pages:
                LOGGER.warning(
                    f"Stopping after {result.pages_requested} pages, "
                    f"more remain at {page.next_page}"
                )
                result.truncated = True
                break

            if not self.pacing.wait(cancel_event):
                result.cancelled = True
                break

            next_url = page.next_page

        return result

    def download_page(
        self, url: str
    ) -> Tuple[Optional[ScryfallPage], Optional[str]]:
        """
        Download and decode a single page of a List object
        :param url: Page URL
        :return: (page, None) on success, (None, None) if Scryfall found
        nothing, and (None, reason) if the request or decode failed
        """
        try:
            response = self.download(url)
        except requests.exceptions.RequestException as error:
            LOGGER.warning(f"Unable to download {url}: {error}")
            return None, f"{type(error).__name__}: {error}"

        if not response.ok:
            scryfall_error = parse_error(response)
            if scryfall_error and scryfall_error.code == "not_found":
                LOGGER.debug(f"No results for {url}: {scryfall_error.details}")
                return None, None

            details = scryfall_error.details if scryfall_error else response.reason
            LOGGER.warning(
                f"Unable to download {url}: HTTP {response.status_code} {details}"
            )
            return None, f"HTTP {response.status_code}: {details}"

        try:
            body: Any = response.json()
        except ValueError as error:
            LOGGER.warning(
                f"Unable to convert response to JSON for URL: {url} -> {error}"
            )
            return None, f"Invalid JSON: {error}"

        if not isinstance(body, dict) or not isinstance(body.get("data"), list):
            LOGGER.warning(f"Response from {url} has no data array")
            return None, "Response has no data array"

        try:
            return ScryfallPage.model_validate(body), None
        except pydantic.ValidationError as error:
            LOGGER.warning(f"Unable to decode page from {url}: {error}")
            return None, f"Invalid page: {error}"

    @ratelimit.sleep_and_retry
    @ratelimit.limits(calls=constants.CALLS_PER_SECOND, period=1)
    def download(self, url: str) -> requests.Response:
        """
        Download content from Scryfall
        :param url: URL to download from
        :return: Raw response, whatever its status
        """
        response = self.session.get(url)
        log_download(response)
        return response


def parse_error(response: requests.Response) -> Optional[ScryfallError]:
    """
    Decode a Scryfall Error object from a failed response, if it sent one
    :param response: Response from Server
    :return: Error object, or None if the body is something else
    """
    try:
        body: Dict[str, Any] = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict) or body.get("object") != "error":
        return None

    try:
        return ScryfallError.model_validate(body)
    except pydantic.ValidationError:
        return None


def log_download(response: requests.Response) -> None:
    """
    Log how the URL was acquired
    :param response: Response from Server
    """
    LOGGER.debug(f"Downloaded {response.url} (Status = {response.status_code})")
