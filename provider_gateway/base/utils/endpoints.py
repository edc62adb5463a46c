"""Endpoint helpers shared by all adapters."""
from __future__ import annotations

import httpx

from ..models import ChatRequest


# Query parameters that carry credentials (gemini puts its key in ``key``).
_SECRET_PARAMS = ("key", "api_key")


def resolve_endpoint(request: ChatRequest, default: str) -> str:
    """Return ``request.custom_url`` verbatim when set, otherwise ``default``."""
    return request.custom_url or default


def redact_endpoint(url: str) -> str:
    """Return ``url`` with credential query parameters masked, for logs and dry runs."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return url
    params = parsed.params
    secret = [name for name in _SECRET_PARAMS if name in params]
    if not secret:
        return url
    for name in secret:
        params = params.set(name, "REDACTED")
    return str(parsed.copy_with(params=params))


__all__ = ["resolve_endpoint", "redact_endpoint"]
