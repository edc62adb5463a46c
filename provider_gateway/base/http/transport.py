"""JSON-over-HTTP transport used by the gateway.

One operation: ``post(url, api_key, body, provider)``. It sends one POST,
never retries, and returns the parsed JSON body. Every provider except
gemini authenticates with a bearer header; gemini carries its key in the
URL built by its adapter.

Failure semantics:
    - non-2xx status      -> ``ProviderHttpError(status, body_text)``
    - no HTTP response    -> ``ProviderConnectionError`` (timeout or transport)
    - undecodable body    -> ``InvalidJsonResponseError``
    - cancelled token     -> ``CancelledError`` (checked before send and after receive)
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import httpx

from ..cancellation import CancellationToken
from ..errors import (
    InvalidJsonResponseError,
    ProviderConnectionError,
    ProviderHttpError,
    classify_transport_exception,
)
from ..logging import get_logger, log_event
from ..models import Provider
from .client import get_httpx_client


# Providers whose API key is sent in the URL instead of an Authorization header.
_URL_KEY_PROVIDERS = frozenset({Provider.GEMINI.value})


def build_headers(api_key: Optional[str], provider: str, *, bearer: Optional[bool] = None) -> Dict[str, str]:
    """Return the request headers for ``provider``.

    ``bearer`` forces the Authorization header on or off; by default it is
    sent for every provider except gemini.
    """
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if bearer is None:
        bearer = (provider or "").lower() not in _URL_KEY_PROVIDERS
    if bearer:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


class HttpTransport:
    """Blocking JSON POST transport.

    Parameters:
        client: Optional ``httpx.Client``. When omitted the shared pooled
            client for ``purpose`` is used. Tests pass a client built on
            ``httpx.MockTransport``.
        purpose: Pool key for the shared client.
    """

    def __init__(self, client: Optional[httpx.Client] = None, *, purpose: str = "gateway.chat") -> None:
        self._client = client
        self._purpose = purpose
        self._logger = get_logger("gateway.transport")

    @property
    def client(self) -> httpx.Client:
        return self._client if self._client is not None else get_httpx_client(None, self._purpose)

    def post(
        self,
        url: str,
        api_key: Optional[str],
        body: Dict[str, Any],
        provider: str,
        *,
        model: Optional[str] = None,
        bearer: Optional[bool] = None,
        timeout: Optional[float] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> Any:
        """POST ``body`` as JSON to ``url`` and return the decoded JSON response."""
        if cancel_token is not None:
            cancel_token.raise_if_cancelled(provider)
        payload = json.dumps(body, ensure_ascii=False).encode("utf-8")
        extra: Dict[str, Any] = {}
        if timeout is not None:
            extra["timeout"] = timeout
        try:
            response = self.client.post(
                url,
                content=payload,
                headers=build_headers(api_key, provider, bearer=bearer),
                **extra,
            )
        except httpx.TransportError as exc:
            raise ProviderConnectionError(
                f"Provider request failed: {exc}",
                code=classify_transport_exception(exc),
                provider=provider,
                model=model,
            ) from exc
        log_event(
            self._logger,
            "http.response",
            level=logging.DEBUG,
            provider=provider,
            model=model,
            status=response.status_code,
        )
        if cancel_token is not None:
            cancel_token.raise_if_cancelled(provider)

        if not response.is_success:
            raise ProviderHttpError(response.status_code, response.text, provider=provider, model=model)
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidJsonResponseError(response.text, provider=provider, model=model) from exc


__all__ = ["HttpTransport", "build_headers"]
