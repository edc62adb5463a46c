"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `provider_gateway.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .gateway_error import GatewayError
from .classification import classify_status, classify_transport_exception
from .validation_errors import (
    ConfigurationError,
    InvalidCustomUrlError,
    InvalidMessageError,
    InvalidProviderError,
    MissingCredentialError,
    MissingMessagesError,
    MissingModelError,
    SchemaRequiredError,
    UnsupportedProviderError,
)
from .transport_errors import (
    InvalidAnalysisReplyError,
    InvalidJsonResponseError,
    MalformedProviderResponseError,
    ProviderConnectionError,
    ProviderHttpError,
)

__all__ = [
    "ErrorCode",
    "GatewayError",
    "classify_status",
    "classify_transport_exception",
    "ConfigurationError",
    "InvalidCustomUrlError",
    "InvalidMessageError",
    "InvalidProviderError",
    "MissingCredentialError",
    "MissingMessagesError",
    "MissingModelError",
    "SchemaRequiredError",
    "UnsupportedProviderError",
    "InvalidAnalysisReplyError",
    "InvalidJsonResponseError",
    "MalformedProviderResponseError",
    "ProviderConnectionError",
    "ProviderHttpError",
]
