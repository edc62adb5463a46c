from __future__ import annotations

from datetime import datetime, timezone

from provider_gateway.grok import GrokAdapter

NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


def test_default_and_custom_endpoint(request_factory):
    adapter = GrokAdapter()
    assert adapter.build_endpoint(request_factory("grok")) == "https://api.x.ai/v1/grok"  # nosec B101
    req = request_factory("grok", custom_url="https://api.x.ai/v1/chat/completions")
    assert adapter.build_endpoint(req) == "https://api.x.ai/v1/chat/completions"  # nosec B101


def test_response_type_not_forwarded(request_factory):
    req = request_factory("grok", response_type="json", response_schema={"type": "object"})
    body = GrokAdapter().build_body(req)
    assert set(body) == {"model", "messages", "stream"}  # nosec B101


def test_tools_forwarded(request_factory):
    tools = [{"type": "function", "function": {"name": "search"}}]
    assert GrokAdapter().build_body(request_factory("grok", tools=tools))["tools"] == tools  # nosec B101


def test_normalize_matches_openai_shape():
    raw = {
        "model": "grok-2",
        "choices": [{"message": {"role": "assistant", "content": "yo"}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 2, "completion_tokens": 1},
    }
    data = GrokAdapter().normalize_response(raw, received_at=NOW).to_dict()
    assert data["message"]["content"] == "yo"  # nosec B101
    assert data["model"] == "grok-2"  # nosec B101
    assert data["created_at"] == "2024-01-02T03:04:05.678Z"  # nosec B101
    assert (data["eval_count"], data["prompt_eval_count"]) == (1, 2)  # nosec B101
