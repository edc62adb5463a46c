"""Shared base for chat-completions style adapters (openai, grok).

Both APIs accept ``{model, messages, stream, tools?}`` and answer with the
chat-completions shape::

    {"id": ..., "model": ..., "created": 1700000000,
     "choices": [{"message": {"role": "assistant", "content": "..."},
                  "finish_reason": "stop"}],
     "usage": {"prompt_tokens": 5, "completion_tokens": 3}}

Subclasses set ``provider`` and ``default_endpoint`` and may extend
``_apply_response_format``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping

from .dto import OpenAIChatBody, wire_messages
from .errors import MalformedProviderResponseError
from .models import ChatRequest, ChatResponse, Provider, ResponseMessage
from .utils.endpoints import resolve_endpoint
from .utils.timestamps import from_unix_seconds, isoformat_utc


def _int_or_zero(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


class BaseOpenAIStyleAdapter:
    """Body construction and response normalization for chat-completions APIs."""

    provider: Provider
    default_endpoint: str
    sends_bearer_token = True

    def build_endpoint(self, request: ChatRequest) -> str:
        return resolve_endpoint(request, self.default_endpoint)

    def build_body(self, request: ChatRequest) -> Dict[str, Any]:
        body = OpenAIChatBody(
            model=request.model_id,
            messages=wire_messages(request.messages),
            stream=request.stream,
        )
        self._apply_response_format(body, request)
        if request.has_tools:
            body.tools = list(request.tools or [])
        return body.to_payload()

    def _apply_response_format(self, body: OpenAIChatBody, request: ChatRequest) -> None:
        """Hook for structured-output flags; the base sends none."""

    def normalize_response(self, raw: Any, *, received_at: datetime) -> ChatResponse:
        name = self.provider.value
        if not isinstance(raw, Mapping):
            raise MalformedProviderResponseError(
                f"Invalid {name} response structure", path="choices", provider=name
            )
        choices = raw.get("choices")
        first = choices[0] if isinstance(choices, list) and choices else None
        message = first.get("message") if isinstance(first, Mapping) else None
        if not isinstance(message, Mapping):
            raise MalformedProviderResponseError(
                f"Invalid {name} response structure", path="choices[0].message", provider=name
            )

        usage = raw.get("usage") if isinstance(raw.get("usage"), Mapping) else {}
        created = from_unix_seconds(raw.get("created")) or received_at
        return ChatResponse(
            message=ResponseMessage(
                content=message.get("content") or "",
                tool_calls=message.get("tool_calls") or None,
            ),
            model=raw.get("model") or "",
            created_at=isoformat_utc(created),
            done=True,
            done_reason=first.get("finish_reason") or "",
            eval_count=_int_or_zero(usage.get("completion_tokens")),
            prompt_eval_count=_int_or_zero(usage.get("prompt_tokens")),
            raw=raw,
        )


__all__ = ["BaseOpenAIStyleAdapter"]
