from __future__ import annotations

import logging
import time
from typing import Protocol

import httpx

from slabench.config import TargetConfig
from slabench.metrics import ErrorType, RequestOutcome

logger = logging.getLogger(__name__)


class Endpoint(Protocol):
    def call(self, path: str, success_status: int = 200) -> RequestOutcome:
        ...


class EndpointClient:
    """Issues timed GET requests through one long-lived ``httpx.Client``."""

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    @classmethod
    def from_config(
        cls,
        target: TargetConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> EndpointClient:
        keepalive = target.max_connections if target.keep_alive else 0
        http = httpx.Client(
            base_url=target.base_url,
            headers=dict(target.headers),
            timeout=target.timeout_sec,
            limits=httpx.Limits(
                max_connections=target.max_connections,
                max_keepalive_connections=keepalive,
            ),
            transport=transport,
        )
        return cls(http)

    def call(self, path: str, success_status: int = 200) -> RequestOutcome:
        start = time.perf_counter()
        try:
            resp = self._http.get(path)
            latency_ms = (time.perf_counter() - start) * 1000.0
        except httpx.TimeoutException as exc:
            return _failure(start, ErrorType.TIMEOUT, exc)
        except httpx.ConnectError as exc:
            return _failure(start, ErrorType.CONNECT, exc)
        except httpx.ReadError as exc:
            return _failure(start, ErrorType.READ, exc)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            return _failure(start, ErrorType.OTHER, exc)

        if resp.status_code != success_status:
            return RequestOutcome(
                ok=False,
                latency_ms=latency_ms,
                status_code=resp.status_code,
                error_type=ErrorType.STATUS,
                error=f"GET {path} returned {resp.status_code}, expected {success_status}",
            )
        return RequestOutcome(ok=True, latency_ms=latency_ms, status_code=resp.status_code)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> EndpointClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _failure(start: float, error_type: ErrorType, exc: Exception) -> RequestOutcome:
    latency_ms = (time.perf_counter() - start) * 1000.0
    logger.debug("request failed (%s): %s", error_type.value, exc)
    return RequestOutcome(
        ok=False,
        latency_ms=latency_ms,
        error_type=error_type,
        error=f"{type(exc).__name__}: {exc}",
    )
