from __future__ import annotations

from slabench.config import RampConfig, ScenarioConfig, ScenarioType, SlaThresholds
from slabench.scenarios.base import ScenarioPreset


def baseline_preset(target_path: str) -> ScenarioPreset:
    """Sequential requests; the mean of several samples beats a single timing."""
    return ScenarioPreset(
        scenario_type=ScenarioType.BASELINE,
        scenario=ScenarioConfig(request_count=10, concurrency=1, target_path=target_path),
        thresholds=SlaThresholds(success_ratio=1.0, error_ratio=0.0, max_avg_ms=150.0),
    )


def concurrent_preset(target_path: str) -> ScenarioPreset:
    return ScenarioPreset(
        scenario_type=ScenarioType.CONCURRENT,
        scenario=ScenarioConfig(request_count=50, concurrency=50, target_path=target_path),
        thresholds=SlaThresholds(success_ratio=0.95, error_ratio=0.05, max_avg_ms=10_000.0),
    )


def stress_preset(target_path: str) -> ScenarioPreset:
    return ScenarioPreset(
        scenario_type=ScenarioType.STRESS,
        scenario=ScenarioConfig(request_count=100, concurrency=20, target_path=target_path),
        thresholds=SlaThresholds(
            success_ratio=0.90,
            error_ratio=0.10,
            max_avg_ms=10_000.0,
            max_wall_clock_ms=20_000.0,
        ),
    )


def ramp_preset(target_path: str) -> ScenarioPreset:
    return ScenarioPreset(
        scenario_type=ScenarioType.RAMP,
        ramp=RampConfig(levels=(1, 5, 10, 25, 50), target_path=target_path),
        thresholds=SlaThresholds(
            success_ratio=0.95,
            error_ratio=0.05,
            max_avg_ms=10_000.0,
            max_degradation_percent=1000.0,
        ),
    )
