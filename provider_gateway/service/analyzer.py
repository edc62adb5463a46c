"""Post-intention analyzer built on the gateway.

``analyze_text`` sends a post to the configured provider with the fixed
system prompt and intention schema, then parses and humanizes the reply.
``handle_analyze`` is the inbound contract used by the HTTP service and the
CLI: ``{"text": ...}`` in, ``{"results": ...}`` or ``{"error": ...}`` out.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ..base.errors import GatewayError, InvalidAnalysisReplyError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import ChatRequest, Message
from ..base.utils.json_text import clean_json_markers
from ..config import GatewayConfig, load_gateway_config
from ..gateway import ProviderGateway, default_gateway
from .intentions import DEFAULT_SYSTEM_PROMPT, AnalysisReply, humanize_intention, intention_schema


_logger = get_logger("gateway.analyzer")


def build_analysis_request(text: Any, config: GatewayConfig) -> ChatRequest:
    """Return the structured-output chat request for one post."""
    return ChatRequest(
        provider=config.provider,
        api_key=config.api_key,
        model_id=config.model,
        messages=[
            Message(role="system", content=DEFAULT_SYSTEM_PROMPT),
            Message(role="user", content=text),
        ],
        response_type="json",
        response_schema=intention_schema(),
        custom_url=config.base_url,
        stream=False,
    )


def parse_analysis_reply(content: str, *, provider: Optional[str] = None) -> AnalysisReply:
    """Parse the model reply into an `AnalysisReply`.

    Markdown code fences around the JSON are tolerated.

    Raises:
        InvalidAnalysisReplyError: The reply is not JSON or not the requested shape.
    """
    try:
        data = json.loads(clean_json_markers(content or ""))
    except ValueError as exc:
        raise InvalidAnalysisReplyError(f"Analysis reply is not valid JSON: {exc}", provider=provider) from exc
    try:
        return AnalysisReply.model_validate(data)
    except ValidationError as exc:
        raise InvalidAnalysisReplyError(
            f"Analysis reply does not match the intention schema: {exc.error_count()} error(s)",
            provider=provider,
        ) from exc


def analyze_text(
    text: Any,
    config: Optional[GatewayConfig] = None,
    *,
    gateway: Optional[ProviderGateway] = None,
) -> Dict[str, Any]:
    """Analyze one post and return ``{intentions, reason, isAIGenerated, provider}``.

    ``config`` defaults to ``load_gateway_config()``. Intention labels are
    humanized (``selfPromotion`` -> ``self Promotion``).

    Raises:
        GatewayError: Configuration, gateway, or reply-parsing failure.
    """
    config = config or load_gateway_config()
    gw = gateway or default_gateway()
    response = gw.chat(build_analysis_request(text, config))
    reply = parse_analysis_reply(response.text, provider=config.provider)
    return {
        "intentions": [
            {"intention": humanize_intention(item.intention), "confidence": item.confidence}
            for item in reply.intentions
        ],
        "reason": reply.reason,
        "isAIGenerated": reply.is_ai_generated,
        "provider": config.provider,
    }


def handle_analyze(
    payload: Mapping[str, Any],
    *,
    config: Optional[GatewayConfig] = None,
    gateway: Optional[ProviderGateway] = None,
) -> Dict[str, Any]:
    """Inbound contract: ``{"text"}`` -> ``{"results"}`` or ``{"error"}``.

    Gateway failures become ``{"error": message}``; nothing is raised for them.
    """
    try:
        results = analyze_text(payload.get("text"), config, gateway=gateway)
    except GatewayError as exc:
        normalized_log_event(
            _logger,
            "analyze.error",
            LogContext(provider=exc.provider, model=exc.model),
            phase="finalize",
            error_code=exc.code.value,
            error=exc.message,
        )
        return {"error": exc.message}
    return {"results": results}


__all__ = [
    "build_analysis_request",
    "parse_analysis_reply",
    "analyze_text",
    "handle_analyze",
]
