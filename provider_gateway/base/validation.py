"""
Request validation for the gateway.

``validate_request`` is a pure function of the request. It raises the error
for the first rule that fails, in this order:

1. provider present and one of the supported names (case-insensitive)
2. api key present
3. model id present
4. at least one message
5. each message has a known role and non-empty content (first failure wins)
6. ``response_type == "json"`` requires ``response_schema``
7. ``custom_url``, when set, is an absolute URL

Nothing is sent over the network until this passes.
"""
from __future__ import annotations

from typing import Any, Optional

import httpx

from .errors import (
    InvalidCustomUrlError,
    InvalidMessageError,
    InvalidProviderError,
    MissingCredentialError,
    MissingMessagesError,
    MissingModelError,
    SchemaRequiredError,
)
from .models import ROLES, ChatRequest, Provider


def message_problem(message: Any) -> Optional[str]:
    """Return the reason a message is invalid, or None when it is valid."""
    role = getattr(message, "role", None)
    if not role or role not in ROLES:
        return "Invalid message role"
    content = getattr(message, "content", None)
    if not isinstance(content, str) or not content:
        return "Message content is required"
    return None


def is_absolute_url(value: str) -> bool:
    """True when ``value`` parses as a URL with both a scheme and a host."""
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError):
        return False
    return url.is_absolute_url


def validate_request(request: ChatRequest) -> None:
    """Check ``request`` against the gateway rules; raise on the first failure."""
    provider = request.provider
    if Provider.lookup(provider) is None:
        raise InvalidProviderError(provider)
    if not request.api_key:
        raise MissingCredentialError(provider)
    if not request.model_id:
        raise MissingModelError(provider)
    if not request.messages:
        raise MissingMessagesError(provider, request.model_id)

    for index, message in enumerate(request.messages):
        problem = message_problem(message)
        if problem:
            raise InvalidMessageError(problem, index=index, provider=provider, model=request.model_id)

    if request.wants_json and not request.response_schema:
        raise SchemaRequiredError(provider, request.model_id)

    if request.custom_url and not is_absolute_url(request.custom_url):
        raise InvalidCustomUrlError(request.custom_url, provider=provider, model=request.model_id)


__all__ = ["validate_request", "message_problem", "is_absolute_url"]
