from __future__ import annotations

import math
from dataclasses import dataclass

from slabench.analysis.degradation import DegradationReport
from slabench.config import SlaThresholds
from slabench.metrics import Statistics


@dataclass(frozen=True, slots=True)
class SlaVerdict:
    passed: bool
    violations: tuple[str, ...] = ()


def validate(stats: Statistics, thresholds: SlaThresholds) -> SlaVerdict:
    violations = _check_statistics(stats, thresholds)
    return SlaVerdict(passed=not violations, violations=tuple(violations))


def validate_degradation(report: DegradationReport, thresholds: SlaThresholds) -> SlaVerdict:
    """Check the highest load level against the thresholds, then the slowdown."""
    violations: list[str] = []
    if report.peak is not None:
        peak = report.peak
        violations.extend(
            f"[{peak.concurrency} users] {reason}"
            for reason in _check_statistics(peak.statistics, thresholds)
        )
    if report.degradation_percent >= thresholds.max_degradation_percent:
        violations.append(
            f"degradation {report.degradation_percent:.2f}% is not below "
            f"{thresholds.max_degradation_percent:.2f}%"
        )
    return SlaVerdict(passed=not violations, violations=tuple(violations))


def format_verdict(verdict: SlaVerdict) -> str:
    if verdict.passed:
        return "SLA PASSED"
    lines = ["SLA FAILED:"]
    lines.extend(f"  - {reason}" for reason in verdict.violations)
    return "\n".join(lines)


def _check_statistics(stats: Statistics, thresholds: SlaThresholds) -> list[str]:
    violations: list[str] = []
    # Requests that never delivered an outcome still count against the ratios.
    total = max(stats.total, stats.expected_count)

    # Rounded so 100 * 0.95 compares against 95, not 95.00000000000001.
    required = math.ceil(round(total * thresholds.success_ratio, 9))
    if stats.success_count < required:
        violations.append(
            f"success ratio {_ratio(stats.success_count, total):.2%} below "
            f"{thresholds.success_ratio:.2%}: {stats.success_count} of {total} succeeded, "
            f"{required} required"
        )

    allowed_errors = round(total * thresholds.error_ratio, 9)
    if stats.error_count > allowed_errors:
        violations.append(
            f"error ratio {_ratio(stats.error_count, total):.2%} above "
            f"{thresholds.error_ratio:.2%}: {stats.error_count} of {total} failed"
        )

    if stats.total < total:
        violations.append(f"run incomplete: {stats.total} of {total} outcomes delivered")

    if stats.avg_ms >= thresholds.max_avg_ms:
        violations.append(
            f"average latency {stats.avg_ms:.1f}ms is not below {thresholds.max_avg_ms:.1f}ms"
        )

    if thresholds.max_wall_clock_ms is not None and stats.wall_clock_ms >= thresholds.max_wall_clock_ms:
        violations.append(
            f"run took {stats.wall_clock_ms:.0f}ms, limit is {thresholds.max_wall_clock_ms:.0f}ms"
        )
    return violations


def _ratio(count: int, total: int) -> float:
    return count / total if total else 0.0
