"""
Ollama provider package.

Exports:
- OllamaAdapter: request/response translation for the local Ollama daemon
"""

from .client import OllamaAdapter

__all__ = ["OllamaAdapter"]
