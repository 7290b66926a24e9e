"""
Pacing policies for consecutive requests against Scryfall
"""
import abc
import logging
import threading
from typing import Optional

from . import constants

LOGGER = logging.getLogger(__name__)


class PacingPolicy(abc.ABC):
    """
    Decides how long to wait before a continuation request
    """

    @abc.abstractmethod
    def wait(self, cancel_event: Optional[threading.Event] = None) -> bool:
        """
        Block until the next request may be issued
        :param cancel_event: Event that, once set, interrupts the wait
        :return: True if the wait completed, False if it was cancelled
        """


class FixedDelayPacing(PacingPolicy):
    """
    Waits the same minimum interval before every continuation request
    """

    delay: float

    def __init__(self, delay: float = constants.PAGE_DELAY_SECONDS) -> None:
        if delay < 0:
            raise ValueError(f"Pacing delay must not be negative, got {delay}")
        self.delay = delay

    def wait(self, cancel_event: Optional[threading.Event] = None) -> bool:
        if cancel_event is None:
            cancel_event = threading.Event()

        # Event.wait returns True only when the event was set mid-wait
        if cancel_event.wait(self.delay):
            LOGGER.debug("Pacing delay interrupted by cancellation")
            return False
        return True

    def __repr__(self) -> str:
        return f"FixedDelayPacing(delay={self.delay})"


class NoPacing(PacingPolicy):
    """
    Never waits; intended for tests and replayed responses
    """

    def wait(self, cancel_event: Optional[threading.Event] = None) -> bool:
        return not (cancel_event is not None and cancel_event.is_set())

    def __repr__(self) -> str:
        return "NoPacing()"
