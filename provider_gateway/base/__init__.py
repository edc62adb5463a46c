"""
Gateway Base Package

Exports the provider-agnostic pieces the gateway is assembled from:

- Models (DTOs): `Message`, `ChatRequest`, `ChatResponse`
- Validation: `validate_request`
- Interfaces: the `ProviderAdapter` protocol
- Factory: lazy creation of provider adapters by name
- Transport: `HttpTransport` over pooled httpx clients
- Timeouts and cooperative cancellation
"""

from .cancellation import CancellationToken, CancelledError
from .errors import ErrorCode, GatewayError
from .factory import AdapterFactory, create_adapter
from .http import HttpTransport
from .interfaces import ProviderAdapter
from .models import ChatRequest, ChatResponse, Message, Provider, ResponseMessage, Role
from .timeouts import TimeoutConfig, get_timeout_config
from .validation import validate_request

__all__ = [
    # Models
    "Role",
    "Provider",
    "Message",
    "ChatRequest",
    "ChatResponse",
    "ResponseMessage",
    # Validation / interfaces / factory
    "validate_request",
    "ProviderAdapter",
    "AdapterFactory",
    "create_adapter",
    # Transport, timeouts, cancellation
    "HttpTransport",
    "TimeoutConfig",
    "get_timeout_config",
    "CancellationToken",
    "CancelledError",
    # Errors
    "ErrorCode",
    "GatewayError",
]
