"""
Thread-safe token frequency histogram.

One instance per (detector, feature). Writers call update() from the
ingestion path; readers call snapshot() from reporting tasks that run on
other threads, so every access goes through a single lock.
"""

from __future__ import annotations

import threading
from collections import Counter
from typing import Iterable, Optional, Tuple


class HistogramSnapshot(list):
    """
    Sorted (token, count) entries.

    generation is the number of resets the histogram had seen when the
    entries were read, so consumers can tell pre-reset snapshots apart.
    """

    def __init__(self, entries: Iterable[Tuple[str, int]] = (), generation: int = 0) -> None:
        super().__init__(entries)
        self.generation = generation


class Histogram:
    """Token -> occurrence count, with a deterministically sorted snapshot."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def update(self, token: str) -> None:
        """Increment the count for token, inserting it with 1 if absent."""
        with self._lock:
            self._counts[token] += 1

    def count(self, token: str) -> int:
        with self._lock:
            return self._counts.get(token, 0)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def snapshot(self, limit: Optional[int] = None) -> HistogramSnapshot:
        """
        Return a copy of the contents sorted by descending count,
        ties broken by ascending token.

        limit keeps only the first N entries of that order.
        """
        with self._lock:
            items = list(self._counts.items())
            generation = self._generation
        items.sort(key=lambda x: (-x[1], x[0]))
        if limit is not None:
            items = items[:limit]
        return HistogramSnapshot(items, generation=generation)

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()
            self._generation += 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
