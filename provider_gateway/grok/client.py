"""Grok (xAI) adapter.

Grok speaks the chat-completions shape, so body and normalization are the
shared OpenAI-style ones. ``response_type`` is not forwarded.
"""

from __future__ import annotations

from ..base.models import Provider
from ..base.openai_style import BaseOpenAIStyleAdapter
from ..config.defaults import GROK_DEFAULT_ENDPOINT


class GrokAdapter(BaseOpenAIStyleAdapter):
    provider = Provider.GROK
    sends_bearer_token = True
    default_endpoint = GROK_DEFAULT_ENDPOINT


__all__ = ["GrokAdapter"]
