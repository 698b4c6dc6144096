from __future__ import annotations

import pytest

from slabench.config import ScenarioType
from slabench.scenarios import preset_for


def test_concurrent_preset() -> None:
    preset = preset_for(ScenarioType.CONCURRENT, "/api/v1/clientes")
    assert preset.scenario is not None
    assert preset.scenario.request_count == 50
    assert preset.scenario.concurrency == 50
    assert preset.scenario.target_path == "/api/v1/clientes"
    assert preset.thresholds.success_ratio == 0.95
    assert preset.ramp is None


def test_stress_preset_bounds_wall_clock() -> None:
    preset = preset_for(ScenarioType.STRESS)
    assert preset.scenario is not None
    assert preset.scenario.request_count == 100
    assert preset.scenario.concurrency == 20
    assert preset.thresholds.max_wall_clock_ms == 20_000.0


def test_baseline_is_sequential() -> None:
    preset = preset_for(ScenarioType.BASELINE)
    assert preset.scenario is not None
    assert preset.scenario.concurrency == 1


def test_ramp_preset_levels() -> None:
    preset = preset_for(ScenarioType.RAMP, "/items")
    assert preset.ramp is not None
    assert preset.scenario is None
    assert preset.ramp is not None
    assert preset.ramp.levels == (1, 5, 10, 25, 50)
    scenario = preset.ramp.scenario_for(25)
    assert scenario.concurrency == 25
    assert scenario.request_count == 25
    assert scenario.target_path == "/items"


@pytest.mark.parametrize("scenario_type", list(ScenarioType))
def test_every_type_has_a_preset(scenario_type: ScenarioType) -> None:
    preset = preset_for(scenario_type)
    assert preset.scenario_type is scenario_type
    assert (preset.scenario is None) != (preset.ramp is None)
