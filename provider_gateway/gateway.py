"""Provider gateway.

Purpose:
    The single entry point for chat calls. ``ProviderGateway.chat`` runs the
    fixed pipeline::

        validate -> select adapter -> build endpoint/body -> POST -> normalize

    and returns one normalized ``ChatResponse`` whatever the provider.

Error handling:
    - Validation errors are raised before any network traffic.
    - Transport and normalization errors propagate unchanged. There is no
      retry and no fallback to another provider.
    - Every failure after validation is logged once as ``chat.error`` with its
      ``error_code`` before it is re-raised.

Timeout and cancellation:
    ``timeout`` (seconds) overrides the pooled client's default for one call.
    ``cancel_token`` is checked before the request is sent and after the
    response arrives.

Logging:
    ``chat.start`` / ``chat.end`` / ``chat.error`` via ``normalized_log_event``
    on the ``gateway.chat`` logger. Endpoints are logged with credentials
    redacted; API keys are never logged.
"""

from __future__ import annotations

import time
from datetime import datetime
from typing import Any, Callable, Dict, Mapping, Optional

from .base.cancellation import CancellationToken
from .base.errors import GatewayError, ProviderHttpError
from .base.factory import AdapterFactory
from .base.http import HttpTransport
from .base.interfaces import ProviderAdapter
from .base.logging import LogContext, get_logger, normalized_log_event
from .base.models import ChatRequest, ChatResponse
from .base.utils.endpoints import redact_endpoint
from .base.utils.timestamps import utc_now
from .base.validation import validate_request


class ProviderGateway:
    """Validate, dispatch and normalize chat calls.

    Args:
        transport: Object with the ``HttpTransport.post`` signature. Defaults
            to an ``HttpTransport`` on the shared client pool.
        clock: Returns the "now" used when a provider does not report a
            creation time. Defaults to UTC now.
        adapter_options: Per-provider constructor kwargs, e.g.
            ``{"openai": {"forward_schema": True}}``.
    """

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        clock: Optional[Callable[[], datetime]] = None,
        adapter_options: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> None:
        self._transport = transport or HttpTransport()
        self._clock = clock or utc_now
        self._adapter_options: Dict[str, Dict[str, Any]] = {
            k.lower(): dict(v) for k, v in (adapter_options or {}).items()
        }
        self._logger = get_logger("gateway.chat")

    def adapter_for(self, request: ChatRequest) -> ProviderAdapter:
        """Return a fresh adapter for the request's provider."""
        name = request.provider_key
        return AdapterFactory.create(name, **self._adapter_options.get(name, {}))

    def chat(
        self,
        request: ChatRequest,
        *,
        timeout: Optional[float] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ChatResponse:
        """Send ``request`` to its provider and return the normalized reply.

        Raises:
            GatewayError: Any validation, transport, or normalization failure.
        """
        ctx = LogContext(provider=request.provider_key or None, model=request.model_id or None)
        try:
            validate_request(request)
        except GatewayError as exc:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="validate",
                error_code=exc.code.value,
                error=exc.message,
            )
            raise

        adapter = self.adapter_for(request)
        endpoint = adapter.build_endpoint(request)
        body = adapter.build_body(request)
        ctx.endpoint = redact_endpoint(endpoint)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            messages=len(request.messages),
            response_type=request.response_type,
            stream=request.stream,
        )

        t0 = time.perf_counter()
        try:
            raw = self._transport.post(
                endpoint,
                request.api_key,
                body,
                adapter.provider.value,
                model=request.model_id,
                bearer=adapter.sends_bearer_token,
                timeout=timeout,
                cancel_token=cancel_token,
            )
            response = adapter.normalize_response(raw, received_at=self._clock())
        except GatewayError as exc:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                error_code=exc.code.value,
                error=exc.message if not isinstance(exc, ProviderHttpError) else None,
                status=exc.status if isinstance(exc, ProviderHttpError) else None,
                latency_ms=(time.perf_counter() - t0) * 1000.0,
            )
            raise

        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            tokens={"prompt": response.prompt_eval_count, "completion": response.eval_count},
            done_reason=response.done_reason,
            latency_ms=(time.perf_counter() - t0) * 1000.0,
        )
        return response


_DEFAULT_GATEWAY: Optional[ProviderGateway] = None


def default_gateway() -> ProviderGateway:
    """Return the process-wide gateway on the shared client pool."""
    global _DEFAULT_GATEWAY  # noqa: PLW0603 - documented module singleton
    if _DEFAULT_GATEWAY is None:
        _DEFAULT_GATEWAY = ProviderGateway()
    return _DEFAULT_GATEWAY


def chat(
    request: ChatRequest,
    *,
    timeout: Optional[float] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> ChatResponse:
    """Convenience wrapper around ``default_gateway().chat``."""
    return default_gateway().chat(request, timeout=timeout, cancel_token=cancel_token)


__all__ = ["ProviderGateway", "default_gateway", "chat"]
