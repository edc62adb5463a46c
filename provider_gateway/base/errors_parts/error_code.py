"""
Normalized gateway error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `GatewayError`. Values
are lowercase snake_case and are considered a stable public contract for
logging and for the HTTP service error payloads.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"
    CONFIG = "config"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
