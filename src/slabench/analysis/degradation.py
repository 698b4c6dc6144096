from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from slabench.metrics import Statistics


@dataclass(frozen=True, slots=True)
class LevelResult:
    concurrency: int
    statistics: Statistics
    drained: bool = True


@dataclass(frozen=True, slots=True)
class DegradationReport:
    levels: tuple[LevelResult, ...]
    degradation_percent: float

    @classmethod
    def from_levels(cls, levels: Iterable[LevelResult]) -> DegradationReport:
        ordered = tuple(levels)
        return cls(levels=ordered, degradation_percent=degradation_percent(ordered))

    @property
    def baseline(self) -> LevelResult | None:
        return self.levels[0] if self.levels else None

    @property
    def peak(self) -> LevelResult | None:
        return self.levels[-1] if self.levels else None

    def to_frame(self) -> pd.DataFrame:
        rows = [{"concurrency": lvl.concurrency, "drained": lvl.drained, **lvl.statistics.to_dict()} for lvl in self.levels]
        return pd.DataFrame(rows)


def degradation_percent(levels: tuple[LevelResult, ...]) -> float:
    """Relative slowdown of the last level's mean latency over the first's."""
    if not levels:
        return 0.0
    first = levels[0].statistics.avg_ms
    last = levels[-1].statistics.avg_ms
    if first == 0:
        return 0.0
    return (last - first) * 100.0 / first
