from __future__ import annotations

import logging
import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")

log = logging.getLogger(__name__)


@dataclass
class PoolStats:
    start_ts: float
    tasks_submitted: int = 0
    tasks_completed: int = 0
    tasks_failed: int = 0
    tasks_cancelled: int = 0

    @property
    def uptime_sec(self) -> float:
        return time.time() - self.start_ts

    @property
    def in_flight(self) -> int:
        done = self.tasks_completed + self.tasks_failed + self.tasks_cancelled
        return max(0, self.tasks_submitted - done)


class WorkerPool(Generic[T, R]):
    """
    Bounded thread pool for I/O-bound per-file work (sniffing, ffprobe).

    Features
    --------
    - submit(fn, *args, **kwargs) -> Future
    - map(fn, iterable, fail_fast=False) -> List[R] in input order
    - Bounded outstanding tasks via a semaphore (max_queue)
    - Stats snapshot
    - Clean shutdown, context manager support

    Notes
    -----
    Every task is independent; the pool never shares state between them.
    """

    def __init__(
        self,
        name: str = "worker",
        max_workers: Optional[int] = None,
        max_queue: Optional[int] = None,
        log_exceptions: bool = True,
    ) -> None:
        """
        Parameters
        ----------
        name:
            Logical name used for thread names and log lines.
        max_workers:
            Max threads in the pool. Default: auto for I/O (~min(8, max(4, 2*CPUs))).
        max_queue:
            Max number of *outstanding* tasks (submitted but not finished).
            None or <= 0 means unbounded.
        log_exceptions:
            If True, exceptions escaping a task are logged when it completes.
        """
        if max_workers is None:
            n = os.cpu_count() or 4
            max_workers = max(4, min(8, n * 2))

        self._name = name
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=name)
        self._stats = PoolStats(start_ts=time.time())
        self._log_exceptions = log_exceptions
        self._slots = threading.Semaphore(max_queue) if max_queue and max_queue > 0 else None
        self._closed = False
        self._lock = threading.Lock()

    # -------------------------
    # Lifecycle
    # -------------------------
    def shutdown(self, wait: bool = True, cancel_futures: bool = False) -> None:
        """Shut down the executor. Safe to call multiple times."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait, cancel_futures=cancel_futures)

    def __enter__(self) -> "WorkerPool[T, R]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True, cancel_futures=True)

    def stats(self) -> PoolStats:
        """Return a *snapshot* of current stats."""
        with self._lock:
            return PoolStats(
                start_ts=self._stats.start_ts,
                tasks_submitted=self._stats.tasks_submitted,
                tasks_completed=self._stats.tasks_completed,
                tasks_failed=self._stats.tasks_failed,
                tasks_cancelled=self._stats.tasks_cancelled,
            )

    # -------------------------
    # Submission
    # -------------------------
    def submit(self, fn: Callable[..., R], /, *args, **kwargs) -> Future[R]:
        """
        Submit a single callable. Applies queue bounding and bookkeeping.
        Returns a Future that will hold the result or exception.
        """
        if self._closed:
            raise RuntimeError(f"{self._name}: submit() after shutdown")

        if self._slots is not None:
            self._slots.acquire()

        def _wrapped(*a, **kw) -> R:
            try:
                return fn(*a, **kw)
            finally:
                if self._slots is not None:
                    self._slots.release()

        with self._lock:
            self._stats.tasks_submitted += 1

        fut: Future[R] = self._executor.submit(_wrapped, *args, **kwargs)
        fut.add_done_callback(self._on_done)
        return fut

    def _on_done(self, f: Future) -> None:
        if f.cancelled():
            # _wrapped never ran, so its slot is still held
            if self._slots is not None:
                self._slots.release()
            with self._lock:
                self._stats.tasks_cancelled += 1
            return
        exc = f.exception()
        with self._lock:
            if exc is None:
                self._stats.tasks_completed += 1
            else:
                self._stats.tasks_failed += 1
        if exc is not None and self._log_exceptions:
            log.debug("%s task failed: %s", self._name, exc)

    # -------------------------
    # Bulk helpers
    # -------------------------
    def map(
        self,
        fn: Callable[[T], R],
        iterable: Iterable[T],
        *,
        fail_fast: bool = False,
    ) -> List[R]:
        """
        Run `fn` over every item and return results in input order.

        With fail_fast=True the first exception *in input order* is re-raised
        and tasks that have not started yet are cancelled. Without it, the
        first exception is still re-raised but only after every task finished.
        """
        futures: List[Future[R]] = [self.submit(fn, item) for item in iterable]
        results: List[R] = []
        for i, fut in enumerate(futures):
            try:
                results.append(fut.result())
            except Exception:
                if fail_fast:
                    for rest in futures[i + 1:]:
                        rest.cancel()
                else:
                    for rest in futures[i + 1:]:
                        rest.exception()
                raise
        return results
