"""
Structured gateway error exception type.

Every failure raised by the gateway (validation, adapter selection,
transport, response normalization, configuration) derives from
`GatewayError` so callers can catch one type and render ``str(error)``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class GatewayError(Exception):
    """Represents a structured gateway error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for end users.
        provider: Provider key where the error originated (e.g., ``"gemini"``).
        model: Optional model identifier associated with the failure.
    """

    code: ErrorCode
    message: str
    provider: Optional[str] = None
    model: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message

    def to_dict(self) -> dict:
        """Return a JSON-serializable view used by the service layer."""
        return {
            "error": self.message,
            "code": self.code.value,
            "provider": self.provider,
            "model": self.model,
        }


__all__ = ["GatewayError"]
