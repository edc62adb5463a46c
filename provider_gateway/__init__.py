"""provider_gateway package

Multi-provider chat-completion gateway for ollama, openai, gemini and grok.

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`ChatRequest`, :class:`ChatResponse`, :class:`Message`,
      :class:`Provider`
    - Gateway: :class:`ProviderGateway`, :func:`chat`
    - Errors: :class:`GatewayError`, :class:`ErrorCode`
    - Configuration: :class:`GatewayConfig`, :func:`load_gateway_config`

Example::

    from provider_gateway import ChatRequest, Message, chat

    reply = chat(ChatRequest(
        provider="openai",
        api_key="sk-...",
        model_id="gpt-4o-mini",
        messages=[Message(role="user", content="Hello")],
    ))
    print(reply.text)
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import ErrorCode, GatewayError
from .base.models import ChatRequest, ChatResponse, Message, Provider, ResponseMessage
from .config import GatewayConfig, load_gateway_config
from .gateway import ProviderGateway, chat

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatRequest",
    "ChatResponse",
    "ResponseMessage",
    "Message",
    "Provider",
    "ProviderGateway",
    "chat",
    "GatewayError",
    "ErrorCode",
    "CancellationToken",
    "CancelledError",
    "GatewayConfig",
    "load_gateway_config",
]
