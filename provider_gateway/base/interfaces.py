"""ProviderAdapter Protocol.

Defines the translation contract every provider adapter satisfies. Adapters
are pure: they build URLs and bodies and reshape responses, while the gateway
owns validation, transport, and logging.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Protocol, runtime_checkable

from .models import ChatRequest, ChatResponse, Provider


@runtime_checkable
class ProviderAdapter(Protocol):
    """Per-provider endpoint, body and response translation."""

    @property
    def provider(self) -> Provider:
        """The provider this adapter speaks to."""
        ...

    @property
    def sends_bearer_token(self) -> bool:
        """Whether the transport adds ``Authorization: Bearer <key>``."""
        ...

    def build_endpoint(self, request: ChatRequest) -> str:
        """Return ``request.custom_url`` when set, else the provider default URL."""
        ...

    def build_body(self, request: ChatRequest) -> Dict[str, Any]:
        """Return the provider-specific JSON body for ``request``."""
        ...

    def normalize_response(self, raw: Any, *, received_at: datetime) -> ChatResponse:
        """Reshape the provider JSON into a `ChatResponse`.

        Raises ``MalformedProviderResponseError`` when required fields are
        missing.
        """
        ...


__all__ = ["ProviderAdapter"]
