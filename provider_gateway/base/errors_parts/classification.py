"""
Error classification helpers mapping HTTP statuses and httpx exceptions to
normalized ErrorCode values.

The gateway never retries; the category only helps callers word the error
they show and lets the service layer pick a response status.
"""
from __future__ import annotations

from typing import Dict

import httpx

from .error_code import ErrorCode


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.UNAVAILABLE,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def classify_status(status: int) -> ErrorCode:
    """Classify an HTTP status code into a normalized :class:`ErrorCode`.

    Precedence:
        1. Exact entry in the status map.
        2. Any other 5xx is ``SERVER_ERROR``; any other 4xx is ``VALIDATION``.
        3. ``UNKNOWN`` fallback.
    """
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    if 400 <= status < 500:
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


def classify_transport_exception(exc: Exception) -> ErrorCode:
    """Classify a connection-level failure raised by httpx."""
    if isinstance(exc, (httpx.TimeoutException, TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.TRANSPORT
    return ErrorCode.UNKNOWN


__all__ = [
    "classify_status",
    "classify_transport_exception",
    "_HTTP_STATUS_MAP",
]
