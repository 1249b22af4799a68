"""
Favicon crawl pipeline driver.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence

from favicon_crawler.collector import ResultCollector
from favicon_crawler.config.models import CrawlerSettings
from favicon_crawler.domain_queue import DomainQueue
from favicon_crawler.logging_utils import log_event
from favicon_crawler.types import CrawlSummary, DomainRecord, PipelineState, ResultRecord
from favicon_crawler.worker import ResolverFactory, WorkerPool, http_resolver_factory

logger = logging.getLogger(__name__)

OutputWriter = Callable[[Sequence[ResultRecord]], object]


class FaviconCrawlPipeline:
    """
    Orchestrates one crawl run: load, drain with workers, sort, write.

    A pipeline is one-shot; its state only moves forward
    (idle, loading, draining, finalizing, done).
    """

    def __init__(
        self,
        *,
        settings: CrawlerSettings,
        resolver_factory: ResolverFactory | None = None,
        output_writer: OutputWriter | None = None,
    ) -> None:
        self._settings = settings
        self._resolver_factory = resolver_factory or http_resolver_factory(settings)
        self._output_writer = output_writer
        self._queue = DomainQueue()
        self._collector = ResultCollector()
        self._state = PipelineState.IDLE
        self._results: list[ResultRecord] = []

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def results(self) -> list[ResultRecord]:
        return list(self._results)

    def run(self, records: Iterable[DomainRecord]) -> CrawlSummary:
        if self._state is not PipelineState.IDLE:
            raise RuntimeError(f"Pipeline already ran (state={self._state.value}).")

        self._state = PipelineState.LOADING
        loaded = 0
        for record in records:
            self._queue.put(record)
            loaded += 1
        self._queue.close()
        log_event(logger, logging.INFO, "domains_loaded", count=loaded)

        self._state = PipelineState.DRAINING
        log_event(logger, logging.INFO, "crawl_started", workers=self._settings.workers)
        started = time.monotonic()
        WorkerPool(
            size=self._settings.workers,
            domain_queue=self._queue,
            collector=self._collector,
            resolver_factory=self._resolver_factory,
        ).run()
        elapsed = time.monotonic() - started

        self._state = PipelineState.FINALIZING
        self._results = self._collector.sorted_results()
        failed = self._collector.failed_count
        log_event(
            logger,
            logging.INFO,
            "crawl_completed",
            processed=len(self._results),
            failed=failed,
            elapsed_seconds=round(elapsed, 3),
        )

        output_path: str | None = None
        if self._output_writer is not None:
            self._output_writer(self._results)
            output_path = self._settings.output_path
            log_event(logger, logging.INFO, "results_written", output_path=output_path)

        self._state = PipelineState.DONE
        return CrawlSummary(
            processed=len(self._results),
            failed=failed,
            elapsed_seconds=elapsed,
            output_path=output_path,
        )
