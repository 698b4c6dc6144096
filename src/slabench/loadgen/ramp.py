from __future__ import annotations

import logging

from slabench.analysis import DegradationReport, LevelResult, SlaVerdict, validate_degradation
from slabench.config import RampConfig, SlaThresholds
from slabench.loadgen.client import Endpoint
from slabench.loadgen.runner import run_scenario

logger = logging.getLogger(__name__)


def run_degradation(client: Endpoint, ramp: RampConfig) -> DegradationReport:
    """Run one independent scenario per concurrency level, lowest level first."""
    results: list[LevelResult] = []
    for level in ramp.levels:
        scenario = ramp.scenario_for(level)
        result = run_scenario(client, scenario)
        results.append(LevelResult(level, result.statistics, drained=result.drained))
        logger.info("level %d: avg %.1fms", level, result.statistics.avg_ms)
    report = DegradationReport.from_levels(results)
    logger.info("degradation across levels: %.2f%%", report.degradation_percent)
    return report


def run_and_validate_degradation(
    client: Endpoint,
    ramp: RampConfig,
    thresholds: SlaThresholds,
) -> tuple[DegradationReport, SlaVerdict]:
    report = run_degradation(client, ramp)
    return report, validate_degradation(report, thresholds)
