"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`provider_gateway.base.models_parts` if needed, while
`provider_gateway.base.models` remains the primary stable import path.
"""

from .provider import Provider
from .message import Message, Role, ROLES
from .chat_request import ChatRequest
from .chat_response import ChatResponse, ResponseMessage

__all__ = [
    "Provider",
    "Message",
    "Role",
    "ROLES",
    "ChatRequest",
    "ChatResponse",
    "ResponseMessage",
]
