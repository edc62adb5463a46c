"""
Pydantic wire bodies for chat-style provider APIs.

``ChatBody`` is the ``{model, messages, stream}`` core shared by ollama,
openai and grok. Optional fields are left unset unless the request asks for
them, and bodies are dumped with ``exclude_unset=True`` so unset keys never
reach the wire.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class WireMessage(BaseModel):
    """A message as sent to chat-style APIs."""

    role: str
    content: str
    tool_calls: Optional[List[Dict[str, Any]]] = None


def wire_messages(messages: Iterable[Any]) -> List[WireMessage]:
    """Map `Message` objects to wire messages; ``tool_calls`` only when present."""
    return [WireMessage(**m.to_wire()) for m in messages]


class ChatBody(BaseModel):
    """Common chat request body.

    Attributes:
        model: Target model identifier.
        messages: Ordered wire messages.
        stream: Streaming flag, forwarded verbatim.
        tools: Tool descriptors; set only when the request has tools.
    """

    model_config = ConfigDict(populate_by_name=True)

    model: str = Field(..., min_length=1)
    messages: List[WireMessage] = Field(..., min_length=1)
    stream: bool = False
    tools: Optional[List[Dict[str, Any]]] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON-ready body with unset optional fields omitted."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class OllamaChatBody(ChatBody):
    """Ollama ``/api/chat`` body. ``format`` carries the JSON schema."""

    format: Optional[Union[str, Dict[str, Any]]] = None


class OpenAIChatBody(ChatBody):
    """Chat-completions body. ``response_format`` is set for JSON output."""

    response_format: Optional[Dict[str, Any]] = None


__all__ = ["WireMessage", "wire_messages", "ChatBody", "OllamaChatBody", "OpenAIChatBody"]
