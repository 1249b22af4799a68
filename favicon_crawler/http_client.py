"""
HTTP capability for favicon probing and page fetching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import requests
import urllib3

from favicon_crawler.config.models import CrawlerSettings

# requests lets some urllib3 errors through unwrapped, e.g. LocationParseError
# (a ValueError) for hosts with empty labels such as "www.example..com".
_TRANSPORT_ERRORS = (requests.RequestException, urllib3.exceptions.HTTPError, ValueError)


class FetchError(RuntimeError):
    """
    Raised when a request fails before yielding a status code.

    Covers timeouts, refused connections, DNS failures and any other
    transport-level error.
    """

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch {url}: {cause}")


@dataclass(frozen=True)
class FetchResponse:
    status_code: int
    text: str


class HttpFetcher(Protocol):
    def probe(self, url: str) -> int:
        """Return the status code for ``url`` without reading the body."""

    def fetch(self, url: str) -> FetchResponse:
        """Return the status code and decoded body for ``url``."""


class FaviconHttpClient:
    """
    Session-backed HTTP client with fixed timeout and browser-like headers.

    One instance per worker thread; sessions are not shared across workers.
    """

    def __init__(
        self,
        *,
        settings: CrawlerSettings,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout_seconds = settings.timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update(settings.request_headers)

    def probe(self, url: str) -> int:
        try:
            response = self._session.get(
                url,
                timeout=self._timeout_seconds,
                allow_redirects=True,
            )
            return response.status_code
        except _TRANSPORT_ERRORS as exc:
            raise FetchError(url, exc) from exc

    def fetch(self, url: str) -> FetchResponse:
        try:
            response = self._session.get(
                url,
                timeout=self._timeout_seconds,
                allow_redirects=True,
            )
            return FetchResponse(status_code=response.status_code, text=response.text)
        except _TRANSPORT_ERRORS as exc:
            raise FetchError(url, exc) from exc

    def close(self) -> None:
        self._session.close()
