from __future__ import annotations

from dataclasses import dataclass

from slabench.config import RampConfig, ScenarioConfig, ScenarioType, SlaThresholds


@dataclass(frozen=True, slots=True)
class ScenarioPreset:
    scenario_type: ScenarioType
    thresholds: SlaThresholds
    scenario: ScenarioConfig | None = None
    ramp: RampConfig | None = None
