from __future__ import annotations

from slabench.config import ConfigurationError, ScenarioType
from slabench.scenarios.base import ScenarioPreset
from slabench.scenarios.presets import baseline_preset, concurrent_preset, ramp_preset, stress_preset


def preset_for(scenario_type: ScenarioType, target_path: str = "/") -> ScenarioPreset:
    if scenario_type is ScenarioType.BASELINE:
        return baseline_preset(target_path)
    if scenario_type is ScenarioType.CONCURRENT:
        return concurrent_preset(target_path)
    if scenario_type is ScenarioType.STRESS:
        return stress_preset(target_path)
    if scenario_type is ScenarioType.RAMP:
        return ramp_preset(target_path)
    msg = f"Unsupported scenario type: {scenario_type}"
    raise ConfigurationError(msg)
