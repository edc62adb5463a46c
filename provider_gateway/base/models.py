"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the implementations under
``provider_gateway.base.models_parts``.
"""

from .models_parts.provider import Provider
from .models_parts.message import Message, Role, ROLES
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse, ResponseMessage

__all__ = [
    "Provider",
    "Message",
    "Role",
    "ROLES",
    "ChatRequest",
    "ChatResponse",
    "ResponseMessage",
]
