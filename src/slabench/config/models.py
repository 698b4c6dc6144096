from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


class ConfigurationError(ValueError):
    """Raised when a run is set up with values it cannot execute."""


class ScenarioType(str, Enum):
    BASELINE = "baseline"
    CONCURRENT = "concurrent"
    STRESS = "stress"
    RAMP = "ramp"


@dataclass(frozen=True, slots=True)
class TargetConfig:
    base_url: str
    timeout_sec: float = 10.0
    keep_alive: bool = True
    max_connections: int = 100
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.base_url:
            msg = "base_url must not be empty"
            raise ConfigurationError(msg)
        if self.timeout_sec <= 0:
            msg = f"timeout_sec must be > 0, got {self.timeout_sec}"
            raise ConfigurationError(msg)
        if self.max_connections <= 0:
            msg = f"max_connections must be > 0, got {self.max_connections}"
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class ScenarioConfig:
    request_count: int
    concurrency: int
    per_run_timeout_sec: float = 30.0
    target_path: str = "/"
    success_status: int = 200

    def __post_init__(self) -> None:
        if self.request_count <= 0:
            msg = f"request_count must be > 0, got {self.request_count}"
            raise ConfigurationError(msg)
        if self.concurrency <= 0:
            msg = f"concurrency must be > 0, got {self.concurrency}"
            raise ConfigurationError(msg)
        if self.per_run_timeout_sec <= 0:
            msg = f"per_run_timeout_sec must be > 0, got {self.per_run_timeout_sec}"
            raise ConfigurationError(msg)

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "request_count": self.request_count,
            "concurrency": self.concurrency,
            "per_run_timeout_sec": self.per_run_timeout_sec,
            "target_path": self.target_path,
            "success_status": self.success_status,
        }


@dataclass(frozen=True, slots=True)
class SlaThresholds:
    success_ratio: float = 0.95
    error_ratio: float = 0.05
    max_avg_ms: float = 10_000.0
    max_wall_clock_ms: float | None = None
    max_degradation_percent: float = 1000.0

    def __post_init__(self) -> None:
        for name in ("success_ratio", "error_ratio"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                msg = f"{name} must be within [0, 1], got {value}"
                raise ConfigurationError(msg)
        if self.max_avg_ms <= 0:
            msg = f"max_avg_ms must be > 0, got {self.max_avg_ms}"
            raise ConfigurationError(msg)
        if self.max_wall_clock_ms is not None and self.max_wall_clock_ms <= 0:
            msg = f"max_wall_clock_ms must be > 0, got {self.max_wall_clock_ms}"
            raise ConfigurationError(msg)

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "success_ratio": self.success_ratio,
            "error_ratio": self.error_ratio,
            "max_avg_ms": self.max_avg_ms,
            "max_wall_clock_ms": self.max_wall_clock_ms,
            "max_degradation_percent": self.max_degradation_percent,
        }


@dataclass(frozen=True, slots=True)
class RampConfig:
    levels: tuple[int, ...] = (1, 5, 10, 25, 50)
    # None means one request per simulated user at each level.
    requests_per_level: int | None = None
    per_level_timeout_sec: float = 30.0
    target_path: str = "/"
    success_status: int = 200

    def __post_init__(self) -> None:
        if not self.levels:
            msg = "levels must contain at least one concurrency level"
            raise ConfigurationError(msg)
        bad = [level for level in self.levels if level <= 0]
        if bad:
            msg = f"concurrency levels must be > 0, got {bad}"
            raise ConfigurationError(msg)
        if any(later <= earlier for earlier, later in zip(self.levels, self.levels[1:])):
            msg = f"concurrency levels must be strictly increasing, got {list(self.levels)}"
            raise ConfigurationError(msg)
        if self.requests_per_level is not None and self.requests_per_level <= 0:
            msg = f"requests_per_level must be > 0, got {self.requests_per_level}"
            raise ConfigurationError(msg)

    def scenario_for(self, level: int) -> ScenarioConfig:
        return ScenarioConfig(
            request_count=self.requests_per_level or level,
            concurrency=level,
            per_run_timeout_sec=self.per_level_timeout_sec,
            target_path=self.target_path,
            success_status=self.success_status,
        )
