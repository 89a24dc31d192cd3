"""
Synchronization primitives shared between the dispatcher and its workers.
"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator

from titlescan.domain.title_scan import Outcome
from titlescan.scraping.errors import (
    BarrierError,
    ResultBufferClosedError,
    ResultBufferFullError,
    ResultBufferOpenError,
)


class CompletionBarrier:
    """
    Counts finished units of work and releases waiters once all are done.
    """

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("Barrier count must be non-negative.")
        self._remaining = count
        self._condition = threading.Condition()

    @property
    def remaining(self) -> int:
        with self._condition:
            return self._remaining

    def done(self) -> None:
        with self._condition:
            if self._remaining <= 0:
                raise BarrierError("Barrier released more times than its count.")
            self._remaining -= 1
            if self._remaining == 0:
                self._condition.notify_all()

    def wait(self) -> None:
        with self._condition:
            self._condition.wait_for(lambda: self._remaining == 0)


class ResultBuffer:
    """
    Fixed-capacity outcome queue: many concurrent writers, one reader after
    close.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("Buffer capacity must be non-negative.")
        self._capacity = capacity
        self._queue: queue.Queue[Outcome] = queue.Queue(maxsize=capacity)
        self._lock = threading.Lock()
        self._writes = 0
        self._closed = False

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def __len__(self) -> int:
        return self._queue.qsize()

    def put(self, outcome: Outcome) -> None:
        with self._lock:
            if self._closed:
                raise ResultBufferClosedError("Cannot write to a closed result buffer.")
            if self._writes >= self._capacity:
                raise ResultBufferFullError(
                    f"Result buffer capacity {self._capacity} exceeded."
                )
            self._writes += 1
            self._queue.put_nowait(outcome)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                raise ResultBufferClosedError("Result buffer is already closed.")
            self._closed = True

    def drain(self) -> Iterator[Outcome]:
        """
        Yield buffered outcomes in arrival order until the buffer is empty.

        Raises ResultBufferOpenError if the buffer has not been closed.
        """

        if not self.closed:
            raise ResultBufferOpenError("Result buffer must be closed before draining.")
        return self._iter_outcomes()

    def _iter_outcomes(self) -> Iterator[Outcome]:
        while True:
            try:
                yield self._queue.get_nowait()
            except queue.Empty:
                return
