"""provider_gateway.config.env
============================

Environment variable names used by the gateway and small helpers to read
provider credentials from them.

- ``ENV_MAP`` maps a provider to its canonical API key variable. Gemini also
  accepts ``GOOGLE_API_KEY``; aliases are listed in ``ENV_ALIASES`` with the
  canonical name first.
- Helpers never raise on unknown providers or unset variables; they return
  ``None`` and let the config loader decide.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Gateway-level variables
PROVIDER_ENV = "GATEWAY_PROVIDER"
MODEL_ENV = "GATEWAY_MODEL"
API_KEY_ENV = "GATEWAY_API_KEY"  # pragma: allowlist secret - env name, not a secret
BASE_URL_ENV = "GATEWAY_BASE_URL"

# Canonical provider -> env var mapping
ENV_MAP: Dict[str, str] = {
    "ollama": "OLLAMA_API_KEY",
    "openai": "OPENAI_API_KEY",
    "gemini": "GEMINI_API_KEY",
    "grok": "XAI_API_KEY",
}

# Provider -> ordered tuple of acceptable env var names (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "gemini": ("GEMINI_API_KEY", "GOOGLE_API_KEY"),
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if ``val`` looks like a placeholder rather than a real key.

    Matches ``placeholder``, ``changeme``, ``example`` anywhere, or a
    ``test_`` prefix, case-insensitively.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield the API key env var names for ``provider``, canonical first."""
    p = (provider or "").lower()
    canonical = ENV_MAP.get(p)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(p, ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_used)`` for the first real key set for ``provider``.

    Placeholder values are skipped. ``(None, None)`` when nothing usable is set.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


__all__ = [
    "PROVIDER_ENV",
    "MODEL_ENV",
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "ENV_MAP",
    "ENV_ALIASES",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
]
