"""
BeautifulSoup-based lookup of favicon <link> tags.
"""

from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup

from favicon_crawler.constants import FAVICON_LINK_PATTERNS


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def find_icon_href(
    document: BeautifulSoup,
    patterns: Sequence[str] = FAVICON_LINK_PATTERNS,
) -> str | None:
    """
    Return the href of the first pattern whose match carries a non-empty href.

    Patterns are evaluated in order and only the first matching element of
    each pattern is inspected.
    """

    for pattern in patterns:
        node = document.select_one(pattern)
        if node is None:
            continue
        href = node.get("href")
        if isinstance(href, list):
            href = " ".join(href)
        if href:
            return href
    return None
