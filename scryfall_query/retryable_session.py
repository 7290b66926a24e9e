"""
Retryable Session to download content
"""
import functools

import requests
import requests.adapters
import urllib3

from .scryfall_query_config import ScryfallQueryConfig


def retryable_session(retries: int = -1, timeout: int = -1) -> requests.Session:
    """
    Session with requests to allow for re-attempts at downloading missing data
    :param retries: How many retries to attempt (-1 to use configuration)
    :param timeout: Seconds to wait on each request (-1 to use configuration)
    :return: Session that does the downloading
    """
    config = ScryfallQueryConfig()
    if retries < 0:
        retries = config.retries
    if timeout < 0:
        timeout = config.timeout

    session = requests.Session()

    retry = urllib3.util.retry.Retry(
        total=retries,
        read=retries,
        connect=retries,
        backoff_factor=0.3,
        status_forcelist=(500, 502, 504),
        allowed_methods=("GET",),
        raise_on_status=False,
    )

    adapter = requests.adapters.HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.request = functools.partial(session.request, timeout=timeout)  # type: ignore

    session.headers.update(
        {
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        }
    )
    return session
