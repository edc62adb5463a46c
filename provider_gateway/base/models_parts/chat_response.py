"""
ChatResponse DTO representing normalized provider responses.

Every adapter returns this one shape. The ``raw`` field keeps the provider's
untouched JSON for diagnostics and is excluded from ``to_dict()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class ResponseMessage:
    """The assistant message of a normalized response."""

    content: str
    role: str = "assistant"
    tool_calls: Optional[List[Dict[str, Any]]] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls:
            data["tool_calls"] = self.tool_calls
        return data


@dataclass
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        message: Assistant reply.
        model: Model identifier reported by the provider (``""`` if unknown).
        created_at: ISO-8601 UTC timestamp.
        done: Whether generation completed.
        done_reason: Provider finish reason (``""`` if unknown).
        eval_count: Completion token count.
        prompt_eval_count: Prompt token count.
        eval_duration, load_duration, prompt_eval_duration, total_duration:
            Ollama-style telemetry in nanoseconds; zero when not supplied.
        raw: Original provider JSON, for diagnostics only.
    """

    message: ResponseMessage
    model: str
    created_at: str
    done: bool
    done_reason: str
    eval_count: int = 0
    prompt_eval_count: int = 0
    eval_duration: int = 0
    load_duration: int = 0
    prompt_eval_duration: int = 0
    total_duration: int = 0
    raw: Optional[Any] = None

    @property
    def text(self) -> str:
        return self.message.content

    def to_dict(self) -> Dict[str, Any]:
        """Return the normalized JSON shape, excluding ``raw``."""
        return {
            "message": self.message.to_dict(),
            "model": self.model,
            "created_at": self.created_at,
            "done": self.done,
            "done_reason": self.done_reason,
            "eval_count": self.eval_count,
            "prompt_eval_count": self.prompt_eval_count,
            "eval_duration": self.eval_duration,
            "load_duration": self.load_duration,
            "prompt_eval_duration": self.prompt_eval_duration,
            "total_duration": self.total_duration,
        }


__all__ = [
    "ChatResponse",
    "ResponseMessage",
]
