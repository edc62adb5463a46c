"""OpenAI chat-completions adapter.

Body and normalization come from ``BaseOpenAIStyleAdapter``. JSON output is
requested with ``response_format = {"type": "json_object"}``; the schema
itself is not sent unless the adapter is built with ``forward_schema=True``,
in which case ``{"type": "json_schema", "json_schema": {name, schema}}`` is
used instead.
"""

from __future__ import annotations

from ..base.dto import OpenAIChatBody
from ..base.models import ChatRequest, Provider
from ..base.openai_style import BaseOpenAIStyleAdapter
from ..config.defaults import OPENAI_DEFAULT_ENDPOINT


class OpenAIAdapter(BaseOpenAIStyleAdapter):
    """Adapter for ``/v1/chat/completions``.

    Args:
        forward_schema: Send the response schema as ``json_schema`` structured
            output instead of the plain ``json_object`` mode.
        schema_name: Name reported with a forwarded schema.
    """

    provider = Provider.OPENAI
    sends_bearer_token = True
    default_endpoint = OPENAI_DEFAULT_ENDPOINT

    def __init__(self, *, forward_schema: bool = False, schema_name: str = "response") -> None:
        self.forward_schema = forward_schema
        self.schema_name = schema_name

    def _apply_response_format(self, body: OpenAIChatBody, request: ChatRequest) -> None:
        if not request.wants_json:
            return
        if self.forward_schema and request.response_schema:
            body.response_format = {
                "type": "json_schema",
                "json_schema": {"name": self.schema_name, "schema": request.response_schema},
            }
        else:
            body.response_format = {"type": "json_object"}


__all__ = ["OpenAIAdapter"]
