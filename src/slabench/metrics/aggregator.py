from __future__ import annotations

import math

import numpy as np

from slabench.metrics.models import ResultSnapshot, Statistics


def compute_statistics(snapshot: ResultSnapshot) -> Statistics:
    total = len(snapshot.outcomes)
    successes: list[float] = []
    min_ms = math.inf
    max_ms = 0.0
    errors = 0
    for outcome in snapshot.outcomes:
        if not outcome.ok:
            errors += 1
            continue
        latency = max(0.0, outcome.latency_ms)
        successes.append(latency)
        if latency < min_ms:
            min_ms = latency
        if latency > max_ms:
            max_ms = latency

    if successes:
        # fsum keeps the mean inside [min, max] for runs of identical values.
        avg_ms = min(max(math.fsum(successes) / len(successes), min_ms), max_ms)
        p50, p95, p99 = (float(v) for v in np.percentile(successes, [50, 95, 99]))
    else:
        min_ms = max_ms = avg_ms = 0.0
        p50 = p95 = p99 = 0.0

    wall_clock_ms = snapshot.wall_clock_ms
    throughput = total * 1000.0 / wall_clock_ms if wall_clock_ms > 0 else 0.0

    return Statistics(
        total=total,
        success_count=len(successes),
        error_count=errors,
        min_ms=min_ms,
        max_ms=max_ms,
        avg_ms=avg_ms,
        throughput_per_sec=throughput,
        wall_clock_ms=wall_clock_ms,
        p50_ms=p50,
        p95_ms=p95,
        p99_ms=p99,
        expected_count=snapshot.expected_count or 0,
    )
