"""
Per-domain favicon resolution strategy.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from bs4 import BeautifulSoup

from favicon_crawler.constants import (
    ABSOLUTE_HREF_MARKERS,
    FAVICON_LINK_PATTERNS,
    FAVICON_PATH,
    URL_PREFIXES,
)
from favicon_crawler.http_client import HttpFetcher
from favicon_crawler.logging_utils import log_event
from favicon_crawler.parsing import find_icon_href, parse_document

logger = logging.getLogger(__name__)

HTTP_OK = 200


def is_absolute_href(href: str) -> bool:
    """
    Heuristic absoluteness check by substring, not by URL parsing.

    A relative path containing one of the markers (e.g. ``/img/com.png``)
    is misclassified and returned as-is.
    """

    return any(marker in href for marker in ABSOLUTE_HREF_MARKERS)


class FaviconResolver:
    """
    Resolves one domain to a favicon URL using ordered URL prefixes.

    For each prefix the root ``/favicon.ico`` is probed first (unless
    ``dom_only``), then the home page is scanned for an icon ``<link>``.
    Network and parse failures move on to the next prefix; nothing raises.
    """

    def __init__(
        self,
        *,
        fetcher: HttpFetcher,
        dom_only: bool = False,
        log_attempt_failures: bool = False,
        prefixes: Sequence[str] = URL_PREFIXES,
        link_patterns: Sequence[str] = FAVICON_LINK_PATTERNS,
        document_parser: Callable[[str], BeautifulSoup] = parse_document,
    ) -> None:
        self._fetcher = fetcher
        self._dom_only = dom_only
        self._log_attempt_failures = log_attempt_failures
        self._prefixes = tuple(prefixes)
        self._link_patterns = tuple(link_patterns)
        self._document_parser = document_parser

    def resolve(self, domain: str) -> str | None:
        """
        Return a favicon URL for ``domain``, or None when every prefix failed.
        """

        for prefix in self._prefixes:
            if not self._dom_only:
                probe_url = self.probe_favicon(prefix, domain)
                if probe_url is not None:
                    return probe_url

            dom_url = self.scan_document(prefix, domain)
            if dom_url is not None:
                return dom_url
        return None

    def probe_favicon(self, prefix: str, domain: str) -> str | None:
        url = f"{prefix}{domain}{FAVICON_PATH}"
        try:
            status_code = self._fetcher.probe(url)
        except Exception as exc:
            self._log_failure(url, exc)
            return None
        if status_code == HTTP_OK:
            return url
        return None

    def scan_document(self, prefix: str, domain: str) -> str | None:
        page_url = f"{prefix}{domain}"
        try:
            response = self._fetcher.fetch(page_url)
            document = self._document_parser(response.text)
            href = find_icon_href(document, self._link_patterns)
        except Exception as exc:
            # Malformed markup or transport errors: try the next prefix.
            self._log_failure(page_url, exc)
            return None

        if href is None:
            return None
        if is_absolute_href(href):
            return href
        return f"{prefix}{domain}{href}"

    def _log_failure(self, url: str, exc: Exception) -> None:
        if not self._log_attempt_failures:
            return
        log_event(
            logger,
            logging.INFO,
            "favicon_attempt_failed",
            url=url,
            error=str(exc),
        )

    def close(self) -> None:
        close = getattr(self._fetcher, "close", None)
        if callable(close):
            close()
