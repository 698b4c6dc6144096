from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import pandas as pd

from slabench.analysis import SlaVerdict, format_verdict, validate
from slabench.config import ConfigurationError, ScenarioType, TargetConfig
from slabench.loadgen import EndpointClient, run_and_validate_degradation, run_scenario
from slabench.metrics import Statistics
from slabench.scenarios import ScenarioPreset, preset_for

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SLA_FAILED = 1
EXIT_CONFIG_ERROR = 2


def _parse_levels(raw: str) -> tuple[int, ...]:
    try:
        return tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError as exc:
        msg = f"invalid concurrency levels: {raw!r}"
        raise argparse.ArgumentTypeError(msg) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Concurrent HTTP benchmark with SLA checks")
    parser.add_argument("--target", required=True, help="Base URL of the service under test")
    parser.add_argument("--path", default="/", help="Path requested on every call")
    parser.add_argument("--scenario", choices=[t.value for t in ScenarioType], default=ScenarioType.CONCURRENT.value)
    parser.add_argument("--requests", type=int, help="Override request count")
    parser.add_argument("--concurrency", type=int, help="Override concurrency width")
    parser.add_argument("--timeout", type=float, help="Override per-run timeout in seconds")
    parser.add_argument("--success-status", type=int, default=200)
    parser.add_argument("--levels", type=_parse_levels, help="Ramp levels, e.g. 1,5,10,25,50")

    parser.add_argument("--success-ratio", type=float)
    parser.add_argument("--error-ratio", type=float)
    parser.add_argument("--max-avg-ms", type=float)
    parser.add_argument("--max-wall-clock-ms", type=float)
    parser.add_argument("--max-degradation", type=float)

    parser.add_argument("--request-timeout", type=float, default=10.0)
    parser.add_argument("--max-connections", type=int, default=100)
    parser.add_argument("--no-keep-alive", action="store_true")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    return parser


def _apply_overrides(preset: ScenarioPreset, args: argparse.Namespace) -> ScenarioPreset:
    thresholds = dataclasses.replace(
        preset.thresholds,
        **_present(
            success_ratio=args.success_ratio,
            error_ratio=args.error_ratio,
            max_avg_ms=args.max_avg_ms,
            max_wall_clock_ms=args.max_wall_clock_ms,
            max_degradation_percent=args.max_degradation,
        ),
    )
    if preset.ramp is not None:
        ramp = dataclasses.replace(
            preset.ramp,
            success_status=args.success_status,
            **_present(
                levels=args.levels,
                requests_per_level=args.requests,
                per_level_timeout_sec=args.timeout,
            ),
        )
        return dataclasses.replace(preset, ramp=ramp, thresholds=thresholds)
    if preset.scenario is None:
        msg = f"preset {preset.scenario_type.value} defines neither a scenario nor a ramp"
        raise ConfigurationError(msg)
    scenario = dataclasses.replace(
        preset.scenario,
        success_status=args.success_status,
        **_present(
            request_count=args.requests,
            concurrency=args.concurrency,
            per_run_timeout_sec=args.timeout,
        ),
    )
    return dataclasses.replace(preset, scenario=scenario, thresholds=thresholds)


def _present(**values: object) -> dict[str, object]:
    return {key: value for key, value in values.items() if value is not None}


def _print_statistics(stats: Statistics) -> None:
    print(f"Requests:    {stats.total} ({stats.success_count} ok, {stats.error_count} errors)")
    print(f"Latency:     min {stats.min_ms:.1f}ms  avg {stats.avg_ms:.1f}ms  max {stats.max_ms:.1f}ms")
    print(f"Percentiles: p50 {stats.p50_ms:.1f}ms  p95 {stats.p95_ms:.1f}ms  p99 {stats.p99_ms:.1f}ms")
    print(f"Wall clock:  {stats.wall_clock_ms:.0f}ms")
    print(f"Throughput:  {stats.throughput_per_sec:.1f} req/s")


def run(args: argparse.Namespace) -> int:
    try:
        target = TargetConfig(
            base_url=args.target,
            timeout_sec=args.request_timeout,
            keep_alive=not args.no_keep_alive,
            max_connections=args.max_connections,
        )
        preset = _apply_overrides(preset_for(ScenarioType(args.scenario), args.path), args)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    logger.info("thresholds: %s", preset.thresholds.to_metadata())
    verdict: SlaVerdict
    with EndpointClient.from_config(target) as client:
        if preset.ramp is not None:
            report, verdict = run_and_validate_degradation(client, preset.ramp, preset.thresholds)
            columns = ["concurrency", "total", "success_count", "error_count", "avg_ms", "p95_ms", "throughput_per_sec"]
            with pd.option_context("display.float_format", "{:.1f}".format):
                print(report.to_frame()[columns].to_string(index=False))
            print(f"Degradation: {report.degradation_percent:.2f}%")
        elif preset.scenario is not None:
            logger.info("scenario: %s", preset.scenario.to_metadata())
            result = run_scenario(client, preset.scenario)
            _print_statistics(result.statistics)
            if not result.drained:
                print("Run timed out before every request finished")
            verdict = validate(result.statistics, preset.thresholds)
        else:
            print(f"Configuration error: nothing to run for {preset.scenario_type.value}", file=sys.stderr)
            return EXIT_CONFIG_ERROR

    print(format_verdict(verdict))
    return EXIT_OK if verdict.passed else EXIT_SLA_FAILED


def main() -> None:
    args = build_parser().parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
