"""
Immediate-retry wrapper around the favicon resolver.

A domain is attempted once, then again for every remaining retry while the
resolver keeps returning "not found". There is no delay between attempts.
"""

from __future__ import annotations

import logging
from typing import Protocol

from favicon_crawler.constants import FAILED_SENTINEL
from favicon_crawler.logging_utils import log_event
from favicon_crawler.types import DomainRecord, ResultRecord

logger = logging.getLogger(__name__)


class DomainResolver(Protocol):
    def resolve(self, domain: str) -> str | None: ...


def resolve_with_retry(resolver: DomainResolver, record: DomainRecord) -> ResultRecord:
    """Resolve ``record`` until success or until its retry budget is spent.

    Args:
        resolver: Any object exposing ``resolve(domain) -> str | None``.
        record: The domain being processed. ``retries_remaining`` is
            decremented once per failed attempt that is followed by a retry.

    Returns:
        A ``ResultRecord`` whose ``favicon_url`` is the resolved URL, or the
        ``FAILED`` sentinel when every attempt returned nothing.
    """
    attempts = 0
    favicon_url: str | None = None

    while True:
        favicon_url = resolver.resolve(record.url)
        attempts += 1
        if favicon_url is not None or record.retries_remaining <= 0:
            break
        record.retries_remaining -= 1
        logger.debug(
            "Retrying %s (%d retries left)",
            record.url,
            record.retries_remaining,
        )

    if favicon_url is None:
        log_event(
            logger,
            logging.ERROR,
            "favicon_lookup_failed",
            domain=record.url,
            rank=record.rank,
            attempts=attempts,
        )

    return ResultRecord(
        rank=record.rank,
        domain=record.url,
        favicon_url=favicon_url if favicon_url is not None else FAILED_SENTINEL,
        attempts=attempts,
    )
