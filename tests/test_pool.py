from __future__ import annotations

import threading
import time

import pytest

from slabench.config import ConfigurationError
from slabench.loadgen import WorkerPool, run_units


def test_units_run_in_parallel() -> None:
    units = [lambda: time.sleep(0.01) for _ in range(50)]
    started = time.perf_counter()
    drained = run_units(units, width=50, timeout=5.0)
    elapsed = time.perf_counter() - started
    assert drained
    # Serial execution would need at least 0.5s.
    assert elapsed < 0.35


def test_width_caps_parallelism() -> None:
    lock = threading.Lock()
    active = 0
    peak = 0

    def unit() -> None:
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)
        time.sleep(0.02)
        with lock:
            active -= 1

    assert WorkerPool(4).run([unit] * 20, timeout=5.0)
    assert 1 <= peak <= 4


def test_timeout_returns_without_waiting_for_stragglers() -> None:
    release = threading.Event()
    finished: list[int] = []

    def unit() -> None:
        release.wait(5.0)
        finished.append(1)

    try:
        started = time.perf_counter()
        drained = WorkerPool(1).run([unit] * 3, timeout=0.1)
        elapsed = time.perf_counter() - started
    finally:
        release.set()
    assert not drained
    assert elapsed < 1.0


def test_raising_unit_does_not_abort_the_run() -> None:
    done: list[int] = []
    lock = threading.Lock()

    def good() -> None:
        with lock:
            done.append(1)

    def bad() -> None:
        raise RuntimeError("unit failed")

    assert run_units([good, bad, good, good], width=2, timeout=5.0)
    assert len(done) == 3


def test_no_units_is_drained() -> None:
    assert WorkerPool(3).run([], timeout=1.0)


@pytest.mark.parametrize("width", [0, -1])
def test_invalid_width_rejected(width: int) -> None:
    with pytest.raises(ConfigurationError):
        WorkerPool(width)


def test_invalid_timeout_rejected() -> None:
    with pytest.raises(ConfigurationError):
        WorkerPool(1).run([lambda: None], timeout=0)
