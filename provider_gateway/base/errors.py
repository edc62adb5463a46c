"""Unified gateway error taxonomy public surface.

This module re-exports the implementations under
``provider_gateway.base.errors_parts`` to keep a single stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.gateway_error import GatewayError
from .errors_parts.classification import classify_status, classify_transport_exception
from .errors_parts.validation_errors import (
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
from .errors_parts.transport_errors import (
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
