"""Ollama adapter.

Purpose:
    Translate gateway requests for the local Ollama daemon
    (default ``http://127.0.0.1:11434/api/chat``) and copy its native reply
    into the normalized ``ChatResponse``. Ollama's chat reply already has the
    normalized shape, so normalization is a field-by-field copy with the
    telemetry counters zero-filled.

Structured output:
    ``response_type == "json"`` sends the schema as ``format`` and forces
    ``stream`` to false.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping

from ..base.dto import OllamaChatBody, wire_messages
from ..base.errors import MalformedProviderResponseError
from ..base.models import ChatRequest, ChatResponse, Provider, ResponseMessage
from ..base.utils.endpoints import resolve_endpoint
from ..base.utils.timestamps import isoformat_utc
from ..config.defaults import OLLAMA_DEFAULT_ENDPOINT


_TELEMETRY_FIELDS = (
    "eval_count",
    "prompt_eval_count",
    "eval_duration",
    "load_duration",
    "prompt_eval_duration",
    "total_duration",
)


def _count(raw: Mapping[str, Any], key: str) -> int:
    value = raw.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


class OllamaAdapter:
    """Request and response translation for Ollama ``/api/chat``."""

    provider = Provider.OLLAMA
    sends_bearer_token = True
    default_endpoint = OLLAMA_DEFAULT_ENDPOINT

    def build_endpoint(self, request: ChatRequest) -> str:
        return resolve_endpoint(request, self.default_endpoint)

    def build_body(self, request: ChatRequest) -> Dict[str, Any]:
        body = OllamaChatBody(
            model=request.model_id,
            messages=wire_messages(request.messages),
            stream=request.stream,
        )
        if request.wants_json and request.response_schema:
            body.format = request.response_schema
            body.stream = False
        if request.has_tools:
            body.tools = list(request.tools or [])
        return body.to_payload()

    def normalize_response(self, raw: Any, *, received_at: datetime) -> ChatResponse:
        message = raw.get("message") if isinstance(raw, Mapping) else None
        if not isinstance(message, Mapping):
            raise MalformedProviderResponseError(
                "Invalid Ollama response structure", path="message", provider=self.provider.value
            )
        counts = {key: _count(raw, key) for key in _TELEMETRY_FIELDS}
        return ChatResponse(
            message=ResponseMessage(
                content=message.get("content") or "",
                role=message.get("role") or "assistant",
                tool_calls=message.get("tool_calls") or None,
            ),
            model=raw.get("model") or "",
            created_at=raw.get("created_at") or isoformat_utc(received_at),
            done=bool(raw.get("done", True)),
            done_reason=raw.get("done_reason") or "",
            raw=raw,
            **counts,
        )


__all__ = ["OllamaAdapter"]
