from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from functools import partial

from slabench.analysis.sla import SlaVerdict, validate
from slabench.config import ScenarioConfig, SlaThresholds
from slabench.loadgen.client import Endpoint
from slabench.loadgen.pool import WorkerPool
from slabench.metrics import (
    ErrorType,
    RequestOutcome,
    ResultCollector,
    ResultSnapshot,
    Statistics,
    compute_statistics,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScenarioResult:
    config: ScenarioConfig
    snapshot: ResultSnapshot
    statistics: Statistics
    drained: bool
    verdict: SlaVerdict | None = None


def run_scenario(
    client: Endpoint,
    config: ScenarioConfig,
    thresholds: SlaThresholds | None = None,
) -> ScenarioResult:
    pool = WorkerPool(config.concurrency)
    collector = ResultCollector(expected_count=config.request_count)
    units = [
        partial(_send_one, client, config.target_path, config.success_status, collector)
        for _ in range(config.request_count)
    ]

    logger.info(
        "starting run: %d requests to %s at concurrency %d",
        config.request_count,
        config.target_path,
        config.concurrency,
    )
    started = time.perf_counter()
    drained = pool.run(units, timeout=config.per_run_timeout_sec)
    wall_clock_ms = (time.perf_counter() - started) * 1000.0
    snapshot = collector.snapshot(wall_clock_ms)
    if not drained:
        logger.warning(
            "run timed out after %.0fms with %d of %d outcomes",
            wall_clock_ms,
            len(snapshot.outcomes),
            config.request_count,
        )

    stats = compute_statistics(snapshot)
    logger.info(
        "run finished: %d ok, %d errors, avg %.1fms, %.1f req/s",
        stats.success_count,
        stats.error_count,
        stats.avg_ms,
        stats.throughput_per_sec,
    )
    verdict = validate(stats, thresholds) if thresholds is not None else None
    return ScenarioResult(
        config=config,
        snapshot=snapshot,
        statistics=stats,
        drained=drained,
        verdict=verdict,
    )


def _send_one(
    client: Endpoint,
    path: str,
    success_status: int,
    collector: ResultCollector,
) -> None:
    try:
        outcome = client.call(path, success_status)
    except Exception as exc:
        logger.warning("endpoint raised instead of returning an outcome: %s", exc)
        outcome = RequestOutcome(
            ok=False,
            latency_ms=0.0,
            error_type=ErrorType.OTHER,
            error=f"{type(exc).__name__}: {exc}",
        )
    collector.record(outcome)
