"""Cancellation error type.

Raised by the transport when it observes a cancelled token, so cancellation
surfaces through the same ``GatewayError`` channel as every other failure.
"""

from __future__ import annotations

from typing import Optional

from ..errors_parts.error_code import ErrorCode
from ..errors_parts.gateway_error import GatewayError


class CancelledError(GatewayError):
    """Raised when a gateway call is cancelled cooperatively."""

    def __init__(self, reason: str = "operation cancelled", *, provider: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.CANCELLED, message=reason, provider=provider)


__all__ = ["CancelledError"]
