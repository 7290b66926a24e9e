"""
scryfall_query simple utilities
"""

import logging
import os
import pathlib
import time
from typing import List, Optional

from . import constants


def init_logger(log_path: Optional[pathlib.Path] = None) -> None:
    """
    Initialize the main system logger
    :param log_path: Directory to also write a log file to
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_path is not None:
        log_path.mkdir(parents=True, exist_ok=True)
        start_time = time.strftime("%Y-%m-%d_%H.%M.%S")
        handlers.append(
            logging.FileHandler(
                str(log_path.joinpath(f"scryfall_query_{start_time}.log"))
            )
        )

    logging.basicConfig(
        level=(
            logging.DEBUG
            if os.environ.get(constants.DEBUG_ENV, "").lower() in ["true", "1"]
            else logging.INFO
        ),
        format="[%(levelname)s] %(asctime)s: %(message)s",
        handlers=handlers,
    )
    logging.getLogger("urllib3").setLevel(logging.ERROR)
