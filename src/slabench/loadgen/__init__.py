from __future__ import annotations

from slabench.loadgen.client import Endpoint, EndpointClient
from slabench.loadgen.pool import WorkerPool, run_units
from slabench.loadgen.ramp import run_and_validate_degradation, run_degradation
from slabench.loadgen.runner import ScenarioResult, run_scenario

__all__ = [
    "Endpoint",
    "EndpointClient",
    "ScenarioResult",
    "WorkerPool",
    "run_and_validate_degradation",
    "run_degradation",
    "run_scenario",
    "run_units",
]
