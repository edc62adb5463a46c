"""
Closed set of supported chat-completion providers.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class Provider(str, Enum):
    """Supported provider keys. Values are the canonical lowercase names."""

    OLLAMA = "ollama"
    OPENAI = "openai"
    GEMINI = "gemini"
    GROK = "grok"

    @classmethod
    def lookup(cls, name: Optional[str]) -> Optional["Provider"]:
        """Return the member matching ``name`` case-insensitively, else None."""
        if not name or not isinstance(name, str):
            return None
        try:
            return cls(name.lower())
        except ValueError:
            return None

    @classmethod
    def names(cls) -> tuple[str, ...]:
        return tuple(p.value for p in cls)


__all__ = ["Provider"]
