"""
ChatRequest DTO for provider-agnostic chat invocations.

Constructed per call and never retained. Every field may be unset so that
the validator, not the constructor, decides which rule a request breaks
first.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from .message import Message


# camelCase keys accepted by ``ChatRequest.from_dict`` (original wire names).
_ALIASES: Dict[str, str] = {
    "apiKey": "api_key",
    "modelId": "model_id",
    "responseType": "response_type",
    "responseSchema": "response_schema",
    "customUrl": "custom_url",
}


@dataclass
class ChatRequest:
    """Normalized chat request handed to the gateway.

    Attributes:
        provider: Provider name, matched case-insensitively
            (``ollama``, ``openai``, ``gemini``, ``grok``).
        api_key: Credential. Sent as a bearer token, or in the URL for gemini.
        model_id: Target model identifier.
        messages: Ordered, non-empty list of `Message` instances.
        response_type: ``"text"`` or ``"json"``.
        response_schema: Structured-output schema; required when
            ``response_type == "json"``.
        custom_url: Absolute URL replacing the provider default endpoint.
        tools: Provider tool descriptors, forwarded verbatim when non-empty.
        stream: Streaming flag forwarded to the provider. Streamed bodies are
            not consumed by the gateway.
    """

    provider: Optional[str] = None
    api_key: Optional[str] = None
    model_id: Optional[str] = None
    messages: List[Message] = field(default_factory=list)
    response_type: Optional[str] = None
    response_schema: Optional[Dict[str, Any]] = None
    custom_url: Optional[str] = None
    tools: Optional[List[Dict[str, Any]]] = None
    stream: bool = False

    @property
    def provider_key(self) -> str:
        """Lowercased provider name, or ``""`` when unset."""
        return (self.provider or "").lower()

    @property
    def wants_json(self) -> bool:
        return self.response_type == "json"

    @property
    def has_tools(self) -> bool:
        return bool(self.tools)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChatRequest":
        """Build a request from a mapping with snake_case or camelCase keys.

        Messages may be `Message` instances or mappings. Unknown keys are
        ignored.
        """
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        raw_messages = values.get("messages") or []
        values["messages"] = [
            m if isinstance(m, Message) else Message.from_dict(m) for m in raw_messages
        ]
        values["stream"] = bool(values.get("stream") or False)
        return cls(**values)


__all__ = [
    "ChatRequest",
]
