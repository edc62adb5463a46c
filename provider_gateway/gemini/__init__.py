"""
Gemini provider package.

Exports:
- GeminiAdapter: ``generateContent`` request/response translation
"""

from .client import GeminiAdapter

__all__ = ["GeminiAdapter"]
