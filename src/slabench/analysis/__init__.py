from __future__ import annotations

from slabench.analysis.degradation import DegradationReport, LevelResult, degradation_percent
from slabench.analysis.sla import SlaVerdict, format_verdict, validate, validate_degradation

__all__ = [
    "DegradationReport",
    "LevelResult",
    "SlaVerdict",
    "degradation_percent",
    "format_verdict",
    "validate",
    "validate_degradation",
]
