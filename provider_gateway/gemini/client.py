"""Gemini ``generateContent`` adapter.

Purpose:
    Map gateway requests onto the Gemini REST body and reshape the
    ``candidates`` reply into the normalized ``ChatResponse``.

Authentication:
    The API key travels in the default URL's ``key`` query parameter, never in
    a header. A ``custom_url`` is used verbatim; no key is appended to it.

Body mapping:
    - system messages are removed from ``contents``; the first one becomes
      ``systemInstruction.parts[0].text``
    - ``assistant`` turns are sent with role ``model``
    - ``generationConfig`` is present only when ``response_type`` is set:
      ``application/json`` plus ``responseSchema`` for json, ``text/plain``
      otherwise
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote

from ..base.errors import MalformedProviderResponseError
from ..base.models import ChatRequest, ChatResponse, Provider, ResponseMessage
from ..base.utils.endpoints import resolve_endpoint
from ..base.utils.timestamps import isoformat_utc
from ..config.defaults import GEMINI_ENDPOINT_TEMPLATE
from .payload import Content, GeminiBody, GenerationConfig, Part, SystemInstruction


_TEXT_PATH = "candidates[0].content.parts[0].text"


def _gemini_role(role: str) -> str:
    return "model" if role == "assistant" else role


def _first_text(raw: Any) -> Optional[str]:
    """Return ``candidates[0].content.parts[0].text`` or None when absent."""
    if not isinstance(raw, Mapping):
        return None
    candidates = raw.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], Mapping):
        return None
    content = candidates[0].get("content")
    parts = content.get("parts") if isinstance(content, Mapping) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], Mapping):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None


def _usage_count(usage: Any, key: str) -> int:
    value = usage.get(key) if isinstance(usage, Mapping) else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


class GeminiAdapter:
    """Request and response translation for Gemini."""

    provider = Provider.GEMINI
    sends_bearer_token = False

    def build_endpoint(self, request: ChatRequest) -> str:
        default = GEMINI_ENDPOINT_TEMPLATE.format(
            model=quote(request.model_id or "", safe="-._~/"),
            key=quote(request.api_key or "", safe=""),
        )
        return resolve_endpoint(request, default)

    def build_body(self, request: ChatRequest) -> Dict[str, Any]:
        body = GeminiBody(
            contents=[
                Content(role=_gemini_role(m.role), parts=[Part(text=m.content)])
                for m in request.messages
                if m.role != "system"
            ]
        )
        system = next((m for m in request.messages if m.role == "system"), None)
        if system is not None:
            body.system_instruction = SystemInstruction(parts=[Part(text=system.content)])
        if request.has_tools:
            body.tools = list(request.tools or [])
        if request.response_type:
            if request.wants_json:
                body.generation_config = GenerationConfig(
                    response_mime_type="application/json",
                    response_schema=request.response_schema,
                )
            else:
                body.generation_config = GenerationConfig(response_mime_type="text/plain")
        return body.to_payload()

    def normalize_response(self, raw: Any, *, received_at: datetime) -> ChatResponse:
        text = _first_text(raw)
        if not text:
            raise MalformedProviderResponseError(
                "Invalid Gemini response structure", path=_TEXT_PATH, provider=self.provider.value
            )
        candidate = raw["candidates"][0]
        usage = raw.get("usageMetadata")
        return ChatResponse(
            message=ResponseMessage(content=text),
            model=raw.get("modelVersion") or "",
            created_at=isoformat_utc(received_at),
            done=True,
            done_reason=candidate.get("finishReason") or "",
            eval_count=_usage_count(usage, "candidatesTokenCount"),
            prompt_eval_count=_usage_count(usage, "promptTokenCount"),
            raw=raw,
        )


__all__ = ["GeminiAdapter"]
