"""Grok (xAI) provider package."""

from .client import GrokAdapter

__all__ = ["GrokAdapter"]
