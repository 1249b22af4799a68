"""
Thread-safe accumulation of per-domain results.
"""

from __future__ import annotations

import threading

from favicon_crawler.types import ResultRecord


class ResultCollector:
    """
    Unordered, append-only result store shared by all workers.
    """

    def __init__(self) -> None:
        self._results: list[ResultRecord] = []
        self._lock = threading.Lock()

    def add(self, result: ResultRecord) -> None:
        with self._lock:
            self._results.append(result)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    @property
    def failed_count(self) -> int:
        with self._lock:
            return sum(1 for result in self._results if result.failed)

    def sorted_results(self) -> list[ResultRecord]:
        """
        Snapshot of all results ordered by rank ascending.
        """

        with self._lock:
            snapshot = list(self._results)
        return sorted(snapshot, key=lambda result: result.rank)
