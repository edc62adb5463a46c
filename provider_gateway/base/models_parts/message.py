"""
Message DTO used across providers.

Defines the immutable `Message` dataclass and the `Role` literal. Messages
are owned by the caller and passed by value into a `ChatRequest`; adapters
serialize them with `to_wire()` or map them into provider-specific shapes.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional


# Message roles accepted by the gateway.
Role = Literal["system", "user", "assistant"]
ROLES: tuple[str, ...] = ("system", "user", "assistant")


@dataclass(frozen=True)
class Message:
    """A chat message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``). Not checked on construction; the gateway
            validator reports invalid roles with their position.
        content: Message text.
        tool_calls: Optional tool call descriptors, forwarded verbatim.
    """

    role: Role
    content: str
    tool_calls: Optional[List[Dict[str, Any]]] = None

    def to_wire(self) -> Dict[str, Any]:
        """Return the ``{role, content}`` mapping sent to chat-style APIs."""
        data: Dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls:
            data["tool_calls"] = list(self.tool_calls)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        """Build a message from a mapping using either ``toolCalls`` or ``tool_calls``."""
        tool_calls = data.get("tool_calls", data.get("toolCalls"))
        return cls(
            role=data.get("role"),  # type: ignore[arg-type]
            content=data.get("content"),  # type: ignore[arg-type]
            tool_calls=list(tool_calls) if tool_calls else None,
        )


__all__ = [
    "Message",
    "Role",
    "ROLES",
]
