"""
Fixed-size thread pool draining the domain queue.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from favicon_crawler.collector import ResultCollector
from favicon_crawler.config.models import CrawlerSettings
from favicon_crawler.constants import FAILED_SENTINEL
from favicon_crawler.domain_queue import DomainQueue
from favicon_crawler.http_client import FaviconHttpClient
from favicon_crawler.logging_utils import log_event
from favicon_crawler.resolver import FaviconResolver
from favicon_crawler.retry import DomainResolver, resolve_with_retry
from favicon_crawler.types import DomainRecord, ResultRecord

logger = logging.getLogger(__name__)

ResolverFactory = Callable[[], DomainResolver]


def http_resolver_factory(settings: CrawlerSettings) -> ResolverFactory:
    """
    Build a factory producing one resolver with a private HTTP client per call.
    """

    def factory() -> FaviconResolver:
        return FaviconResolver(
            fetcher=FaviconHttpClient(settings=settings),
            dom_only=settings.dom_only,
            log_attempt_failures=settings.log_attempt_failures,
        )

    return factory


class CrawlWorker(threading.Thread):
    """
    Pulls records until the queue is closed and empty.

    Every dequeued record yields exactly one result, even when processing
    raises unexpectedly.
    """

    def __init__(
        self,
        *,
        name: str,
        domain_queue: DomainQueue,
        collector: ResultCollector,
        resolver_factory: ResolverFactory,
    ) -> None:
        super().__init__(name=name, daemon=True)
        self._queue = domain_queue
        self._collector = collector
        self._resolver_factory = resolver_factory
        self.processed = 0

    def run(self) -> None:
        resolver = self._resolver_factory()
        try:
            for record in self._queue:
                self._collector.add(self._process(resolver, record))
                self.processed += 1
        finally:
            close = getattr(resolver, "close", None)
            if callable(close):
                close()
        logger.debug("[%s] finished after %d domains", self.name, self.processed)

    def _process(self, resolver: DomainResolver, record: DomainRecord) -> ResultRecord:
        try:
            return resolve_with_retry(resolver, record)
        except Exception as exc:
            log_event(
                logger,
                logging.ERROR,
                "domain_processing_crashed",
                worker=self.name,
                domain=record.url,
                rank=record.rank,
                error=str(exc),
            )
            return ResultRecord(
                rank=record.rank,
                domain=record.url,
                favicon_url=FAILED_SENTINEL,
                attempts=0,
            )


class WorkerPool:
    """
    Runs ``size`` independent workers and waits for all of them.
    """

    def __init__(
        self,
        *,
        size: int,
        domain_queue: DomainQueue,
        collector: ResultCollector,
        resolver_factory: ResolverFactory,
    ) -> None:
        if size < 1:
            raise ValueError("Worker pool size must be at least 1.")
        self._size = size
        self._queue = domain_queue
        self._collector = collector
        self._resolver_factory = resolver_factory
        self._workers: list[CrawlWorker] = []

    def run(self) -> None:
        """
        Start every worker and block until the queue has been drained.
        """

        self._workers = [
            CrawlWorker(
                name=f"Worker-{index}",
                domain_queue=self._queue,
                collector=self._collector,
                resolver_factory=self._resolver_factory,
            )
            for index in range(self._size)
        ]
        for worker in self._workers:
            worker.start()
        for worker in self._workers:
            worker.join()
