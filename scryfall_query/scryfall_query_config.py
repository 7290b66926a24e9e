"""
scryfall_query Configuration Service
"""

import configparser
import logging
import os
import pathlib
from typing import Optional

from singleton_decorator import singleton

from . import constants


@singleton
class ScryfallQueryConfig:
    """
    Configuration Class that loads in the appropriate configuration file
    and provides the contents for the running program
    """

    logger: logging.Logger
    config_parser: configparser.ConfigParser
    version: str
    base_url: str
    page_delay: float
    timeout: int
    retries: int
    max_pages: Optional[int]
    user_agent: str

    def __init__(self, config_path: Optional[pathlib.Path] = None):
        self.logger = logging.getLogger(__name__)
        self.config_parser = configparser.ConfigParser()

        if config_path is None:
            config_path = pathlib.Path(
                os.environ.get(constants.CONFIG_PATH_ENV, constants.CONFIG_PATH)
            )
        self.logger.debug(f"Loading configuration from {config_path}")
        self.__load_config_from_local_file(config_path)

        self.version = self.get("ScryfallQuery", "version", "NO_VERSION_FOUND")
        self.base_url = self.get("Scryfall", "base_url", constants.API_URI).rstrip(
            "/"
        )
        self.page_delay = self.get_float(
            "Scryfall", "page_delay", constants.PAGE_DELAY_SECONDS
        )
        self.timeout = self.get_int(
            "Scryfall", "timeout", constants.REQUEST_TIMEOUT_SECONDS
        )
        self.retries = self.get_int("Scryfall", "retries", constants.REQUEST_RETRIES)
        self.max_pages = (
            self.get_int("Scryfall", "max_pages", 0)
            if self.has_option("Scryfall", "max_pages")
            else None
        )
        self.user_agent = self.get("Scryfall", "user_agent", constants.USER_AGENT)

    def __load_config_from_local_file(self, file_path: pathlib.Path) -> None:
        """
        Load local file as scryfall_query configuration file
        :param file_path: Path to Configuration file
        """
        if not file_path.is_file():
            self.logger.warning(
                f"Configuration file {file_path} not found. Using defaults"
            )
            return
        self.config_parser.read(str(file_path))

    def get(self, section: str, option: str, fallback: str = "") -> str:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use
        """
        if self.has_option(section, option):
            return self.config_parser.get(section, option, fallback=fallback)
        return fallback

    def get_int(self, section: str, option: str, fallback: int = 0) -> int:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as an Integer)
        """
        if self.has_option(section, option):
            return self.config_parser.getint(section, option, fallback=fallback)
        return fallback

    def get_float(self, section: str, option: str, fallback: float = 0.0) -> float:
        """
        Get a specific value from configuration
        :param section: Section header
        :param option: Key in section
        :param fallback: Default value to use if key not found in section
        :returns Configuration value to use (as a Float)
        """
        if self.has_option(section, option):
            return self.config_parser.getfloat(section, option, fallback=fallback)
        return fallback

    def has_option(self, section: str, option: str) -> bool:
        """
        Check if Configuration has a specific option in a specific section
        and has a defined value (ala not VAR=)
        :param section: Section header to find
        :param option: Option to find in section
        :return Does option exist in section
        """
        return (
            self.config_parser.has_option(section, option)
            and len(str(self.config_parser.get(section, option))) > 0
        )
