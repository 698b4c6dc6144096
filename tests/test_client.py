from __future__ import annotations

from typing import Callable

import httpx

from slabench.config import TargetConfig
from slabench.loadgen import EndpointClient
from slabench.metrics import ErrorType


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> EndpointClient:
    target = TargetConfig(base_url="http://testserver")
    return EndpointClient.from_config(target, transport=httpx.MockTransport(handler))


def test_success_status_is_ok() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=[])

    with _client(handler) as client:
        outcome = client.call("/api/v1/clientes")
    assert outcome.ok
    assert outcome.status_code == 200
    assert outcome.latency_ms >= 0
    assert outcome.error is None
    assert seen == ["/api/v1/clientes"]


def test_status_mismatch_is_error() -> None:
    with _client(lambda request: httpx.Response(503)) as client:
        outcome = client.call("/health")
    assert not outcome.ok
    assert outcome.status_code == 503
    assert outcome.error_type is ErrorType.STATUS
    assert outcome.error is not None and "503" in outcome.error


def test_configured_success_status() -> None:
    with _client(lambda request: httpx.Response(201)) as client:
        assert client.call("/items", success_status=201).ok
        assert not client.call("/items").ok


def test_connect_failure_becomes_outcome() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        outcome = client.call("/")
    assert not outcome.ok
    assert outcome.status_code is None
    assert outcome.error_type is ErrorType.CONNECT
    assert outcome.error is not None and "connection refused" in outcome.error


def test_timeout_becomes_outcome() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with _client(handler) as client:
        outcome = client.call("/")
    assert not outcome.ok
    assert outcome.error_type is ErrorType.TIMEOUT


def test_other_transport_error_becomes_outcome() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.RemoteProtocolError("garbage", request=request)

    with _client(handler) as client:
        outcome = client.call("/")
    assert not outcome.ok
    assert outcome.error_type is ErrorType.OTHER
