"""Per-call fields attached to every gateway log event."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    provider: Optional[str] = None
    model: Optional[str] = None
    endpoint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the set fields only; unset ones are left out of the event."""
        values = ((f.name, getattr(self, f.name)) for f in fields(self))
        return {name: value for name, value in values if value is not None}


__all__ = ["LogContext"]
