"""Typed wire DTOs for provider request bodies."""

from .chat_body import ChatBody, OllamaChatBody, OpenAIChatBody, WireMessage, wire_messages

__all__ = ["ChatBody", "OllamaChatBody", "OpenAIChatBody", "WireMessage", "wire_messages"]
