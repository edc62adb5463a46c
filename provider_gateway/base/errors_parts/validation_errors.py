"""
Request validation and adapter selection errors.

These are raised before any network call is made and are terminal for the
call. Messages are end-user facing and kept short.
"""
from __future__ import annotations

from typing import Optional

from .error_code import ErrorCode
from .gateway_error import GatewayError


class InvalidProviderError(GatewayError):
    """Provider is missing or not one of the supported names."""

    def __init__(self, provider: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message="Invalid or unsupported provider",
            provider=provider,
        )


class MissingCredentialError(GatewayError):
    """The request carries no API key."""

    def __init__(self, provider: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message="API key is required", provider=provider)


class MissingModelError(GatewayError):
    """The request carries no model identifier."""

    def __init__(self, provider: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message="Model ID is required", provider=provider)


class MissingMessagesError(GatewayError):
    """The request has no messages."""

    def __init__(self, provider: Optional[str] = None, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message="At least one message is required",
            provider=provider,
            model=model,
        )


class InvalidMessageError(GatewayError):
    """A message has an unknown role or empty content.

    Attributes:
        index: Position of the offending message in the request.
    """

    def __init__(
        self,
        reason: str,
        *,
        index: int,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message=reason, provider=provider, model=model)
        self.index = index


class SchemaRequiredError(GatewayError):
    """JSON output was requested without a response schema."""

    def __init__(self, provider: Optional[str] = None, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message="Response schema required for JSON response type",
            provider=provider,
            model=model,
        )


class InvalidCustomUrlError(GatewayError):
    """The custom endpoint override is not an absolute URL."""

    def __init__(
        self,
        url: str,
        *,
        provider: Optional[str] = None,
        model: Optional[str] = None,
    ) -> None:
        super().__init__(code=ErrorCode.VALIDATION, message="Invalid custom URL", provider=provider, model=model)
        self.url = url


class UnsupportedProviderError(GatewayError):
    """No adapter is registered for the (lowercased) provider name."""

    def __init__(self, provider: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.UNSUPPORTED, message="Unsupported provider", provider=provider)


class ConfigurationError(GatewayError):
    """Gateway configuration could not be resolved into a usable request."""

    def __init__(self, message: str, *, provider: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.CONFIG, message=message, provider=provider)


__all__ = [
    "InvalidProviderError",
    "MissingCredentialError",
    "MissingModelError",
    "MissingMessagesError",
    "InvalidMessageError",
    "SchemaRequiredError",
    "InvalidCustomUrlError",
    "UnsupportedProviderError",
    "ConfigurationError",
]
