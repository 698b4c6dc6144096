from __future__ import annotations

from slabench.metrics.aggregator import compute_statistics
from slabench.metrics.collector import ResultCollector
from slabench.metrics.models import ErrorType, RequestOutcome, ResultSnapshot, Statistics

__all__ = [
    "ErrorType",
    "RequestOutcome",
    "ResultCollector",
    "ResultSnapshot",
    "Statistics",
    "compute_statistics",
]
