from __future__ import annotations

from slabench.scenarios.base import ScenarioPreset
from slabench.scenarios.factory import preset_for

__all__ = ["ScenarioPreset", "preset_for"]
