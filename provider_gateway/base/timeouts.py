"""Timeout configuration for gateway HTTP calls.

Timeouts come from one place only: ``get_timeout_config()``. Values are read
from the environment on first use and cached until the relevant variables
change. Supported variables (all optional, positive floats, seconds):

    GATEWAY_HTTP_TIMEOUT_SECONDS     total request timeout (default 60)
    GATEWAY_CONNECT_TIMEOUT_SECONDS  connect phase timeout (default 10)

Callers can still pass a per-call ``timeout`` to ``ProviderGateway.chat``;
that value overrides the pooled client's default for that request only.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx


_HTTP_ENV = "GATEWAY_HTTP_TIMEOUT_SECONDS"
_CONNECT_ENV = "GATEWAY_CONNECT_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Overall budget for read/write/pool phases.
        connect_timeout_seconds: Budget for establishing the connection.
    """

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`, refreshed when env changes."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = f"{os.getenv(_HTTP_ENV, '')}/{os.getenv(_CONNECT_ENV, '')}"
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(_HTTP_ENV, 60.0),
        connect_timeout_seconds=_parse_env_float(_CONNECT_ENV, 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
