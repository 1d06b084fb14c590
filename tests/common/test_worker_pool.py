import threading
import time

import pytest

from byteme.common.concurrency.worker_pool import WorkerPool


def test_map_preserves_input_order():
    delays = [0.05, 0.0, 0.03, 0.01]

    def work(i):
        time.sleep(delays[i])
        return i * 10

    with WorkerPool(name="t", max_workers=4) as pool:
        assert pool.map(work, range(4)) == [0, 10, 20, 30]


def test_map_reraises_first_failure_in_input_order():
    def work(i):
        if i == 0:
            time.sleep(0.05)
            raise ValueError("first")
        if i == 1:
            raise KeyError("second")
        return i

    with WorkerPool(name="t", max_workers=4) as pool:
        with pytest.raises(ValueError, match="first"):
            pool.map(work, range(3), fail_fast=True)


def test_fail_fast_cancels_pending_tasks():
    started = []
    gate = threading.Event()

    def work(i):
        started.append(i)
        if i == 0:
            raise RuntimeError("boom")
        gate.wait(0.5)
        return i

    with WorkerPool(name="t", max_workers=1) as pool:
        with pytest.raises(RuntimeError):
            pool.map(work, range(5), fail_fast=True)
        gate.set()

    # with one worker, later items never got the chance to start
    assert len(started) < 5


def test_stats_count_outcomes():
    def work(i):
        if i % 2:
            raise ValueError(i)
        return i

    pool = WorkerPool(name="t", max_workers=2, max_queue=2)
    futs = [pool.submit(work, i) for i in range(4)]
    for f in futs:
        f.exception()
    pool.shutdown()

    st = pool.stats()
    assert st.tasks_submitted == 4
    assert st.tasks_completed == 2
    assert st.tasks_failed == 2
    assert st.in_flight == 0


def test_submit_after_shutdown_rejected():
    pool = WorkerPool(name="t", max_workers=1)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.submit(lambda: 1)
