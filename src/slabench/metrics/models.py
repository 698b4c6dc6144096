from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    TIMEOUT = "timeout"
    CONNECT = "connect"
    READ = "read"
    STATUS = "status"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class RequestOutcome:
    ok: bool
    latency_ms: float
    status_code: int | None = None
    error_type: ErrorType | None = None
    error: str | None = None


@dataclass(frozen=True, slots=True)
class ResultSnapshot:
    outcomes: tuple[RequestOutcome, ...]
    wall_clock_ms: float
    expected_count: int | None = None

    @property
    def complete(self) -> bool:
        if self.expected_count is None:
            return True
        return len(self.outcomes) >= self.expected_count


@dataclass(frozen=True, slots=True)
class Statistics:
    total: int
    success_count: int
    error_count: int
    min_ms: float
    max_ms: float
    avg_ms: float
    throughput_per_sec: float
    wall_clock_ms: float
    p50_ms: float = 0.0
    p95_ms: float = 0.0
    p99_ms: float = 0.0
    # Requests the run was configured to send; 0 when unknown.
    expected_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
