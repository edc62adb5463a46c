"""Pytest configuration for the gateway test suite.

Provides:
- an autouse fixture clearing gateway and provider env vars so the host
  environment never leaks into config or transport tests
- ``http_recorder``: an ``HttpTransport`` on ``httpx.MockTransport`` that
  records every request and answers with a canned reply
- ``log_lines``: captures JSON log events emitted on the ``gateway`` logger
- ``fixed_clock``: deterministic "now" for normalized timestamps
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List, Optional

import httpx
import pytest

from provider_gateway.base.http import HttpTransport
from provider_gateway.base.models import ChatRequest, Message


_ENV_VARS = (
    "GATEWAY_PROVIDER",
    "GATEWAY_MODEL",
    "GATEWAY_API_KEY",
    "GATEWAY_BASE_URL",
    "GATEWAY_CONFIG_FILE",
    "GATEWAY_LOG_LEVEL",
    "GATEWAY_HTTP_TIMEOUT_SECONDS",
    "GATEWAY_CONNECT_TIMEOUT_SECONDS",
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "XAI_API_KEY",
    "OLLAMA_API_KEY",
)

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def fixed_clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@dataclass
class HttpRecorder:
    """Records outbound requests and replies with ``status``/``payload``."""

    status: int = 200
    payload: Any = field(default_factory=dict)
    text: Optional[str] = None
    requests: List[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.payload)

    def transport(self) -> HttpTransport:
        return HttpTransport(client=httpx.Client(transport=httpx.MockTransport(self.handler)))

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def http_recorder() -> HttpRecorder:
    return HttpRecorder()


class _ListHandler(logging.Handler):
    """Capture formatted log messages into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.messages: List[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@pytest.fixture()
def log_lines() -> Iterator["_LogView"]:
    """Yield a view over the JSON events emitted on the ``gateway`` logger."""
    from provider_gateway.base.logging import get_logger

    base = get_logger()
    handler = _ListHandler()
    base.addHandler(handler)
    try:
        yield _LogView(handler)
    finally:
        base.removeHandler(handler)


class _LogView:
    """Lazy view parsing captured messages as JSON objects."""

    def __init__(self, handler: _ListHandler) -> None:
        self._handler = handler

    def events(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        out = []
        for msg in self._handler.messages:
            try:
                data = json.loads(msg)
            except ValueError:
                continue
            if name is None or data.get("event") == name:
                out.append(data)
        return out


def make_request(provider: str = "openai", **overrides: Any) -> ChatRequest:
    """Build a minimal valid request; keyword overrides replace fields."""
    values: Dict[str, Any] = {
        "provider": provider,
        "api_key": "k-123",
        "model_id": "m-1",
        "messages": [Message(role="user", content="Hello")],
    }
    values.update(overrides)
    return ChatRequest(**values)


@pytest.fixture()
def request_factory() -> Callable[..., ChatRequest]:
    return make_request
