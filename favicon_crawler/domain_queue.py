"""
Closeable multi-consumer FIFO of domain records.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator

from favicon_crawler.types import DomainRecord


class QueueClosedError(RuntimeError):
    """
    Raised when adding to a queue that was closed for writes.
    """


class DomainQueue:
    """
    Blocking FIFO that consumers drain until it is closed and empty.

    ``get`` blocks while the queue is empty but still open, and returns
    None once it is closed and drained, so no consumer waits forever.
    """

    def __init__(self, *, poll_interval_seconds: float = 0.1) -> None:
        self._queue: queue.Queue[DomainRecord] = queue.Queue()
        self._closed = threading.Event()
        self._poll_interval_seconds = poll_interval_seconds

    def put(self, record: DomainRecord) -> None:
        if self._closed.is_set():
            raise QueueClosedError("Domain queue is closed for writes.")
        self._queue.put(record)

    def close(self) -> None:
        self._closed.set()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def get(self) -> DomainRecord | None:
        while True:
            try:
                return self._queue.get(timeout=self._poll_interval_seconds)
            except queue.Empty:
                if not self._closed.is_set():
                    continue
            # Closed: every put happened before close, so one final
            # non-blocking read settles whether anything is left.
            try:
                return self._queue.get_nowait()
            except queue.Empty:
                return None

    def __iter__(self) -> Iterator[DomainRecord]:
        while True:
            record = self.get()
            if record is None:
                return
            yield record

    def __len__(self) -> int:
        return self._queue.qsize()
