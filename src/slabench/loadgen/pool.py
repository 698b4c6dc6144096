from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Sequence

from slabench.config import ConfigurationError

logger = logging.getLogger(__name__)

Unit = Callable[[], None]


class WorkerPool:
    """Runs units of work on at most ``width`` threads and waits for them.

    :meth:`run` blocks until every unit has finished or ``timeout`` seconds
    have passed. On timeout, units still queued are cancelled while units
    already executing are left to finish on their own threads.
    """

    def __init__(self, width: int, thread_name_prefix: str = "slabench-worker") -> None:
        if width <= 0:
            msg = f"width must be > 0, got {width}"
            raise ConfigurationError(msg)
        self.width = width
        self._thread_name_prefix = thread_name_prefix

    def run(self, units: Sequence[Unit], timeout: float) -> bool:
        if timeout <= 0:
            msg = f"timeout must be > 0, got {timeout}"
            raise ConfigurationError(msg)
        if not units:
            return True

        executor = ThreadPoolExecutor(
            max_workers=min(self.width, len(units)),
            thread_name_prefix=self._thread_name_prefix,
        )
        futures: list[Future[None]] = [executor.submit(_guarded, unit) for unit in units]
        _, pending = wait(futures, timeout=timeout)
        drained = not pending
        if drained:
            executor.shutdown(wait=True)
        else:
            logger.warning(
                "pool deadline of %.1fs reached with %d of %d units unfinished",
                timeout,
                len(pending),
                len(futures),
            )
            executor.shutdown(wait=False, cancel_futures=True)
        return drained


def run_units(units: Sequence[Unit], width: int, timeout: float) -> bool:
    return WorkerPool(width).run(units, timeout)


def _guarded(unit: Unit) -> None:
    try:
        unit()
    except Exception:
        logger.exception("unit of work raised")
