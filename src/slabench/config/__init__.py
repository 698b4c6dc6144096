from __future__ import annotations

from slabench.config.models import (
    ConfigurationError,
    RampConfig,
    ScenarioConfig,
    ScenarioType,
    SlaThresholds,
    TargetConfig,
)

__all__ = [
    "ConfigurationError",
    "RampConfig",
    "ScenarioConfig",
    "ScenarioType",
    "SlaThresholds",
    "TargetConfig",
]
