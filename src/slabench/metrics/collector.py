from __future__ import annotations

import logging
import threading

from slabench.metrics.models import RequestOutcome, ResultSnapshot

logger = logging.getLogger(__name__)


class ResultCollector:
    """Append-only, thread-safe sink for the outcomes of a single run.

    Workers call :meth:`record` concurrently. The run owner calls
    :meth:`snapshot` once the pool has drained (or its deadline tripped);
    that freezes the collected outcomes and closes the collector, so any
    outcome delivered afterwards by a straggling worker is dropped.
    """

    def __init__(self, expected_count: int | None = None) -> None:
        self._expected_count = expected_count
        self._outcomes: list[RequestOutcome] = []
        self._lock = threading.Lock()
        self._closed = False
        self._discarded = 0

    def record(self, outcome: RequestOutcome) -> None:
        with self._lock:
            if self._closed:
                self._discarded += 1
                late = True
            else:
                self._outcomes.append(outcome)
                late = False
        if late:
            logger.debug("discarding outcome recorded after snapshot: %s", outcome)

    def snapshot(self, wall_clock_ms: float) -> ResultSnapshot:
        with self._lock:
            self._closed = True
            outcomes = tuple(self._outcomes)
        return ResultSnapshot(
            outcomes=outcomes,
            wall_clock_ms=max(0.0, wall_clock_ms),
            expected_count=self._expected_count,
        )

    @property
    def discarded(self) -> int:
        with self._lock:
            return self._discarded

    def __len__(self) -> int:
        with self._lock:
            return len(self._outcomes)
