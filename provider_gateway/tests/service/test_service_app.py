from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from provider_gateway.base.errors import (
    ErrorCode,
    InvalidJsonResponseError,
    ProviderConnectionError,
    ProviderHttpError,
    SchemaRequiredError,
)
from provider_gateway.gateway import ProviderGateway
from provider_gateway.service.app import app, get_gateway, status_for_error

OPENAI_REPLY = {
    "model": "gpt-4o-mini",
    "created": 1700000000,
    "choices": [{"message": {"role": "assistant", "content": "Hi!"}, "finish_reason": "stop"}],
}


@pytest.fixture()
def client(http_recorder, fixed_clock):
    gw = ProviderGateway(transport=http_recorder.transport(), clock=fixed_clock)
    app.dependency_overrides[get_gateway] = lambda: gw
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200  # nosec B101
    assert res.json() == {"ok": True}  # nosec B101


def test_chat_route_returns_normalized_response(client, http_recorder):
    http_recorder.payload = OPENAI_REPLY
    res = client.post(
        "/api/chat",
        json={
            "provider": "openai",
            "apiKey": "k",
            "modelId": "gpt-4o-mini",
            "messages": [{"role": "user", "content": "hello"}],
        },
    )
    assert res.status_code == 200  # nosec B101
    data = res.json()
    assert data["message"] == {"role": "assistant", "content": "Hi!"}  # nosec B101
    assert data["created_at"] == "2023-11-14T22:13:20.000Z"  # nosec B101
    assert "raw" not in data  # nosec B101


def test_chat_route_validation_error_is_400(client, http_recorder):
    res = client.post("/api/chat", json={"provider": "openai", "model_id": "m", "messages": []})
    assert res.status_code == 400  # nosec B101
    assert res.json() == {"error": "API key is required", "code": "validation"}  # nosec B101
    assert http_recorder.requests == []  # nosec B101


def test_chat_route_upstream_error_maps_status(client, http_recorder):
    http_recorder.status = 429
    http_recorder.text = "rate limited"
    res = client.post(
        "/api/chat",
        json={"provider": "grok", "api_key": "k", "model_id": "grok-2", "messages": [{"role": "user", "content": "x"}]},
    )
    assert res.status_code == 429  # nosec B101
    assert res.json() == {"error": "Provider error: 429 - rate limited", "code": "rate_limit"}  # nosec B101


def test_analyze_route_reports_missing_config(client):
    res = client.post("/api/analyze", json={"text": "post"})
    assert res.status_code == 200  # nosec B101
    assert "error" in res.json()  # nosec B101


def test_analyze_route_returns_results(client, http_recorder, monkeypatch):
    monkeypatch.setenv("GATEWAY_PROVIDER", "ollama")
    monkeypatch.setenv("GATEWAY_MODEL", "llama3")
    monkeypatch.setenv("GATEWAY_API_KEY", "k")
    reply = {"intentions": [{"intention": "jobSearching", "confidence": 0.9}], "isAIGenerated": False, "reason": "r"}
    http_recorder.payload = {"model": "llama3", "message": {"role": "assistant", "content": json.dumps(reply)}}
    res = client.post("/api/analyze", json={"text": "Open to work"})
    assert res.json()["results"]["intentions"] == [{"intention": "job Searching", "confidence": 0.9}]  # nosec B101


@pytest.mark.parametrize(
    "exc,status",
    [
        (SchemaRequiredError("openai"), 400),
        (ProviderHttpError(401, "nope"), 401),
        (ProviderHttpError(500, "boom"), 502),
        (ProviderConnectionError("slow", code=ErrorCode.TIMEOUT), 504),
        (InvalidJsonResponseError("<html>"), 502),
    ],
)
def test_status_for_error(exc, status):
    assert status_for_error(exc) == status  # nosec B101


def test_dev_server_reads_host_and_port(monkeypatch):
    from provider_gateway.service import dev_server

    seen = {}

    def fake_run(target, **kwargs):
        seen["target"] = target
        seen.update(kwargs)

    monkeypatch.setattr(dev_server.uvicorn, "run", fake_run)
    monkeypatch.setenv("GATEWAY_SERVICE_HOST", "0.0.0.0")
    monkeypatch.setenv("GATEWAY_SERVICE_PORT", "9001")
    dev_server.main()
    assert seen["target"] == "provider_gateway.service.app:app"  # nosec B101
    assert seen["host"] == "0.0.0.0"  # nosec B101
    assert seen["port"] == 9001  # nosec B101
