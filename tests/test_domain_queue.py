from __future__ import annotations

import threading
import time

import pytest

from favicon_crawler.domain_queue import DomainQueue, QueueClosedError
from favicon_crawler.types import DomainRecord


def _record(rank: int) -> DomainRecord:
    return DomainRecord(rank=rank, url=f"d{rank}.com")


def test_fifo_order_then_none_once_closed() -> None:
    domain_queue = DomainQueue(poll_interval_seconds=0.01)
    for rank in (3, 1, 2):
        domain_queue.put(_record(rank))
    domain_queue.close()

    assert [record.rank for record in domain_queue] == [3, 1, 2]
    assert domain_queue.get() is None


def test_put_after_close_raises() -> None:
    domain_queue = DomainQueue()
    domain_queue.close()

    assert domain_queue.closed is True
    with pytest.raises(QueueClosedError):
        domain_queue.put(_record(1))


def test_consumer_waits_while_open_and_exits_after_close() -> None:
    domain_queue = DomainQueue(poll_interval_seconds=0.01)
    received: list[int] = []

    def consume() -> None:
        for record in domain_queue:
            received.append(record.rank)

    consumer = threading.Thread(target=consume)
    consumer.start()
    time.sleep(0.05)
    assert consumer.is_alive()

    domain_queue.put(_record(5))
    domain_queue.close()
    consumer.join(timeout=2)

    assert not consumer.is_alive()
    assert received == [5]


def test_every_record_consumed_exactly_once_by_many_consumers() -> None:
    domain_queue = DomainQueue(poll_interval_seconds=0.01)
    for rank in range(500):
        domain_queue.put(_record(rank))
    domain_queue.close()

    received: list[int] = []
    lock = threading.Lock()

    def consume() -> None:
        for record in domain_queue:
            with lock:
                received.append(record.rank)

    consumers = [threading.Thread(target=consume) for _ in range(8)]
    for consumer in consumers:
        consumer.start()
    for consumer in consumers:
        consumer.join(timeout=5)

    assert sorted(received) == list(range(500))
    assert len(domain_queue) == 0
