"""Cooperative cancellation token.

The gateway checks the token right before the request is sent and right after
the response arrives. An in-flight request is not interrupted; pair the token
with a ``timeout`` to bound the wait.
"""

from __future__ import annotations

from threading import Event, Lock
from typing import Optional

from .cancelled_error import CancelledError


class CancellationToken:
    """Set once from any thread; checked by the transport at its two checkpoints."""

    def __init__(self) -> None:
        self._event = Event()
        self._lock = Lock()
        self._reason: Optional[str] = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Mark the token cancelled. Later calls keep the first reason."""
        with self._lock:
            if self._event.is_set():
                return
            self._reason = reason
            self._event.set()

    def raise_if_cancelled(self, provider: Optional[str] = None) -> None:
        if self._event.is_set():
            raise CancelledError(self._reason or "operation cancelled", provider=provider)

    def __repr__(self) -> str:  # pragma: no cover
        return f"CancellationToken(cancelled={self.cancelled}, reason={self._reason!r})"


__all__ = ["CancellationToken"]
