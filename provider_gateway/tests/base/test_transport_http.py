from __future__ import annotations

import httpx
import pytest

from provider_gateway.base.cancellation import CancellationToken, CancelledError
from provider_gateway.base.errors import (
    ErrorCode,
    InvalidJsonResponseError,
    ProviderConnectionError,
    ProviderHttpError,
)
from provider_gateway.base.http import HttpTransport, build_headers


def test_headers_bearer_for_all_but_gemini():
    for provider in ("ollama", "openai", "grok", "OpenAI"):
        assert build_headers("k", provider)["Authorization"] == "Bearer k"  # nosec B101
    gemini = build_headers("k", "gemini")
    assert "Authorization" not in gemini  # nosec B101
    assert gemini["Content-Type"] == "application/json"  # nosec B101
    assert gemini["Accept"] == "application/json"  # nosec B101


def test_bearer_override():
    assert "Authorization" not in build_headers("k", "openai", bearer=False)  # nosec B101


def test_post_sends_json_and_returns_parsed_body(http_recorder):
    http_recorder.payload = {"ok": True}
    out = http_recorder.transport().post("https://x.test/v1", "k", {"a": [1, "é"]}, "openai")
    assert out == {"ok": True}  # nosec B101
    assert len(http_recorder.requests) == 1  # nosec B101
    req = http_recorder.requests[0]
    assert req.method == "POST"  # nosec B101
    assert req.headers["authorization"] == "Bearer k"  # nosec B101
    assert http_recorder.last_json == {"a": [1, "é"]}  # nosec B101


def test_non_success_status_raises_without_retry(http_recorder):
    http_recorder.status = 429
    http_recorder.text = "rate limited"
    with pytest.raises(ProviderHttpError) as ei:
        http_recorder.transport().post("https://x.test", "k", {}, "grok")
    assert ei.value.status == 429  # nosec B101
    assert ei.value.body == "rate limited"  # nosec B101
    assert len(http_recorder.requests) == 1  # nosec B101


def test_invalid_json_body(http_recorder):
    http_recorder.text = "<html>oops</html>"
    with pytest.raises(InvalidJsonResponseError) as ei:
        http_recorder.transport().post("https://x.test", "k", {}, "ollama")
    assert ei.value.body == "<html>oops</html>"  # nosec B101


def test_connection_failure_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    transport = HttpTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(ProviderConnectionError) as ei:
        transport.post("https://x.test", "k", {}, "openai")
    assert ei.value.code is ErrorCode.TIMEOUT  # nosec B101
    assert isinstance(ei.value.__cause__, httpx.ConnectTimeout)  # nosec B101


def test_cancelled_token_prevents_send(http_recorder):
    token = CancellationToken()
    token.cancel("user abort")
    with pytest.raises(CancelledError) as ei:
        http_recorder.transport().post("https://x.test", "k", {}, "openai", cancel_token=token)
    assert ei.value.message == "user abort"  # nosec B101
    assert http_recorder.requests == []  # nosec B101


def test_cancel_during_request_raises_after_receive():
    token = CancellationToken()

    def handler(request: httpx.Request) -> httpx.Response:
        token.cancel()
        return httpx.Response(200, json={})

    transport = HttpTransport(client=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(CancelledError):
        transport.post("https://x.test", "k", {}, "openai", cancel_token=token)
