"""
Crawler configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass

from favicon_crawler.constants import (
    HEADER_ACCEPT,
    HEADER_ACCEPT_LANGUAGE,
    HEADER_USER_AGENT,
)


class ConfigurationError(ValueError):
    """
    Raised when required run configuration is missing or invalid.
    """


@dataclass(frozen=True)
class CrawlerSettings:
    """
    Runtime settings for one crawl run. Read once at startup.
    """

    input_path: str | None = None
    output_path: str = "output.csv"
    retries: int = 0
    timeout_seconds: float = 3.0
    workers: int = 10
    user_agent: str = HEADER_USER_AGENT
    accept: str = HEADER_ACCEPT
    accept_language: str = HEADER_ACCEPT_LANGUAGE
    dom_only: bool = False
    log_attempt_failures: bool = False

    def require_input_path(self) -> str:
        """
        Return the input path or raise when it was never configured.
        """

        if not self.input_path:
            raise ConfigurationError("Please specify an input file!")
        return self.input_path

    @property
    def request_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }
