"""
Transport and response-normalization errors.

Raised after the request left validation: non-success HTTP statuses,
connection failures, unparseable bodies, and provider payloads that do not
have the shape an adapter needs. None of these are retried by the gateway.
"""
from __future__ import annotations

from typing import Optional

from .classification import classify_status
from .error_code import ErrorCode
from .gateway_error import GatewayError


class ProviderHttpError(GatewayError):
    """The provider answered with a non-success status code.

    Attributes:
        status: HTTP status code returned by the provider.
        body: Raw response body text, unmodified.
        category: Coarse :class:`ErrorCode` derived from ``status``.
    """

    def __init__(
        self,
        status: int,
        body: str,
        *,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        category = classify_status(status)
        super().__init__(
            code=category,
            message=f"Provider error: {status} - {body}",
            provider=provider,
            model=model,
        )
        self.status = status
        self.body = body
        self.category = category


class ProviderConnectionError(GatewayError):
    """The request never produced an HTTP response (DNS, connect, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.TRANSPORT,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        super().__init__(code=code, message=message, provider=provider, model=model)


class InvalidJsonResponseError(GatewayError):
    """A success response whose body is not valid JSON."""

    def __init__(
        self,
        body: str,
        *,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.PROTOCOL,
            message="Provider returned invalid JSON",
            provider=provider,
            model=model,
        )
        self.body = body


class MalformedProviderResponseError(GatewayError):
    """Valid JSON that lacks the fields the adapter reads.

    Attributes:
        path: Dotted path of the first missing field.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        super().__init__(code=ErrorCode.PROTOCOL, message=message, provider=provider, model=model)
        self.path = path


class InvalidAnalysisReplyError(GatewayError):
    """The model reply to an analysis prompt is not the requested JSON shape."""

    def __init__(self, message: str, *, provider: Optional[str] = None, model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.PROTOCOL, message=message, provider=provider, model=model)


__all__ = [
    "ProviderHttpError",
    "ProviderConnectionError",
    "InvalidJsonResponseError",
    "MalformedProviderResponseError",
    "InvalidAnalysisReplyError",
]
