"""
Shared crawl runtime data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from favicon_crawler.constants import FAILED_SENTINEL


@dataclass
class DomainRecord:
    """
    One input row plus its remaining retry budget.

    Owned by the single worker that dequeued it; only that worker mutates
    ``retries_remaining``.
    """

    rank: int
    url: str
    retries_remaining: int = 0


@dataclass(frozen=True)
class ResultRecord:
    """
    Final outcome for one domain.
    """

    rank: int
    domain: str
    favicon_url: str
    attempts: int = 1

    @property
    def failed(self) -> bool:
        return self.favicon_url == FAILED_SENTINEL


@dataclass(frozen=True)
class CrawlSummary:
    """
    Summary for one pipeline run.
    """

    processed: int
    failed: int
    elapsed_seconds: float
    output_path: str | None = None


class PipelineState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    DRAINING = "draining"
    FINALIZING = "finalizing"
    DONE = "done"
