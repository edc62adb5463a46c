"""Shared HTTP client pool for the gateway.

Purpose:
    Keep a small, thread-safe pool of reusable ``httpx.Client`` instances so
    repeated gateway calls share connections. The pool holds connections
    only; responses are never cached.

Timeout strategy:
    The client's default timeout comes from ``get_timeout_config()`` at the
    time the client is created. Per-call overrides are passed to
    ``client.post(..., timeout=...)`` by the transport.

Lifecycle & cleanup:
    Clients are cached by ``(base_url, purpose)``. All clients are closed at
    interpreter exit via ``atexit``; tests may call :func:`close_all_clients`.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: Optional base URL set on the client. ``None`` groups
            clients that are always called with absolute URLs.
        purpose: Short discriminator for separate pools (e.g. ``"gateway.chat"``).
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        timeout = get_timeout_config().to_httpx()
        client = httpx.Client(base_url=base_url, timeout=timeout) if base_url else httpx.Client(timeout=timeout)
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
