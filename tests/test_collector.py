from __future__ import annotations

import threading

from favicon_crawler.collector import ResultCollector
from favicon_crawler.constants import FAILED_SENTINEL
from favicon_crawler.types import ResultRecord


def test_sorted_results_orders_by_rank() -> None:
    collector = ResultCollector()
    for rank in (3, 1, 2):
        collector.add(ResultRecord(rank=rank, domain=f"d{rank}.com", favicon_url="u"))

    assert [result.rank for result in collector.sorted_results()] == [1, 2, 3]


def test_failed_count_counts_sentinel_only() -> None:
    collector = ResultCollector()
    collector.add(ResultRecord(rank=1, domain="a.com", favicon_url=FAILED_SENTINEL))
    collector.add(ResultRecord(rank=2, domain="b.com", favicon_url="https://b.com/favicon.ico"))

    assert collector.failed_count == 1
    assert len(collector) == 2


def test_concurrent_adds_are_not_lost() -> None:
    collector = ResultCollector()

    def add_batch(offset: int) -> None:
        for index in range(200):
            rank = offset * 200 + index
            collector.add(ResultRecord(rank=rank, domain=f"d{rank}.com", favicon_url="u"))

    threads = [threading.Thread(target=add_batch, args=(offset,)) for offset in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert [result.rank for result in collector.sorted_results()] == list(range(2000))
