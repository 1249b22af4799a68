from __future__ import annotations

import pytest

from favicon_crawler.collector import ResultCollector
from favicon_crawler.domain_queue import DomainQueue
from favicon_crawler.worker import WorkerPool
from favicon_crawler.types import DomainRecord
from tests.fakes import TableResolver


def test_pool_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        WorkerPool(
            size=0,
            domain_queue=DomainQueue(),
            collector=ResultCollector(),
            resolver_factory=lambda: TableResolver({}),
        )


def test_pool_drains_queue_and_builds_one_resolver_per_worker() -> None:
    domain_queue = DomainQueue(poll_interval_seconds=0.01)
    for rank in range(40):
        domain_queue.put(DomainRecord(rank=rank, url=f"d{rank}.com"))
    domain_queue.close()

    built: list[TableResolver] = []

    def factory() -> TableResolver:
        resolver = TableResolver({f"d{rank}.com": f"https://d{rank}.com/favicon.ico" for rank in range(40)})
        built.append(resolver)
        return resolver

    collector = ResultCollector()
    WorkerPool(size=4, domain_queue=domain_queue, collector=collector, resolver_factory=factory).run()

    assert len(built) == 4
    assert len(collector) == 40
    assert sum(sum(resolver.calls.values()) for resolver in built) == 40
