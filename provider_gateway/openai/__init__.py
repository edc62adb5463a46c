"""
OpenAI provider package.

Exports:
- OpenAIAdapter: chat-completions request/response translation
"""

from .client import OpenAIAdapter

__all__ = ["OpenAIAdapter"]
