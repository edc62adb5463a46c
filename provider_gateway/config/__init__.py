"""Gateway configuration layer.

Resolves the ``provider``, ``model``, ``api_key`` and optional ``base_url``
the analyzer and the CLI use to build requests. Sources merge in a fixed
order (later wins):

    1. Built-in defaults (provider ``ollama``)
    2. Optional config file named by ``GATEWAY_CONFIG_FILE``
    3. Environment variables
    4. In-code overrides passed to ``load_gateway_config``

Environment Variable Conventions
--------------------------------
``GATEWAY_PROVIDER``, ``GATEWAY_MODEL``, ``GATEWAY_BASE_URL`` and
``GATEWAY_API_KEY``. When ``GATEWAY_API_KEY`` is unset the provider's own key
variable is used (``OPENAI_API_KEY``, ``GEMINI_API_KEY``/``GOOGLE_API_KEY``,
``XAI_API_KEY``, ``OLLAMA_API_KEY``). Placeholder-looking keys are ignored.

External Config File
--------------------
``.json`` files are parsed as JSON, anything else as YAML. Keys may be
snake_case or the camelCase names the options page stored::

    provider: openai
    model: gpt-4o-mini
    apiKey: sk-...
    baseUrl: https://proxy.internal/v1/chat/completions

Public API
----------
* load_gateway_config(overrides: dict | None = None, *, require_complete=True) -> GatewayConfig
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from ..base.errors import ConfigurationError
from .defaults import CONFIG_FILE_ENV, DEFAULT_PROVIDER, INCOMPLETE_CONFIG_MESSAGE
from .env import (
    API_KEY_ENV,
    BASE_URL_ENV,
    MODEL_ENV,
    PROVIDER_ENV,
    is_placeholder,
    resolve_provider_key,
)


_FIELDS = ("provider", "model", "api_key", "base_url")
_KEY_ALIASES = {"apiKey": "api_key", "baseUrl": "base_url"}


@dataclass(frozen=True)
class GatewayConfig:
    """Resolved gateway configuration.

    Attributes:
        provider: Provider name (``ollama``, ``openai``, ``gemini``, ``grok``).
        model: Model identifier.
        api_key: Credential; never logged.
        base_url: Optional endpoint override, passed as ``custom_url``.
    """

    provider: Optional[str]
    model: Optional[str]
    api_key: Optional[str]
    base_url: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.provider and self.model and self.api_key)

    def __repr__(self) -> str:
        key = "***" if self.api_key else None
        return (
            f"GatewayConfig(provider={self.provider!r}, model={self.model!r}, "
            f"api_key={key!r}, base_url={self.base_url!r})"
        )


def _normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for key, value in data.items():
        name = _KEY_ALIASES.get(key, key)
        if name in _FIELDS and value not in (None, ""):
            out[name] = value
    return out


def _load_config_file() -> Dict[str, Any]:
    """Read the file named by ``GATEWAY_CONFIG_FILE``; ``{}`` when unset or absent."""
    path = os.getenv(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    try:
        text = p.read_text(encoding="utf-8")
        data = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unreadable config file {p}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"Config file {p} must contain a mapping")
    return _normalize_keys(data)


def _env_values() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for field, env_name in (
        ("provider", PROVIDER_ENV),
        ("model", MODEL_ENV),
        ("base_url", BASE_URL_ENV),
    ):
        if val := os.environ.get(env_name):
            out[field] = val
    return out


def _env_api_key(provider: Optional[str]) -> Optional[str]:
    val = os.environ.get(API_KEY_ENV)
    if val and not is_placeholder(val):
        return val
    key, _ = resolve_provider_key(provider or "")
    return key


def load_gateway_config(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    require_complete: bool = True,
) -> GatewayConfig:
    """Return the merged gateway configuration.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.

    Raises:
        ConfigurationError: When ``require_complete`` is set and provider,
            model or API key is missing, or when the config file is unreadable.
    """
    cfg: Dict[str, Any] = {"provider": DEFAULT_PROVIDER}
    cfg |= _load_config_file()
    cfg |= _env_values()
    explicit = _normalize_keys(overrides or {})
    provider = explicit.get("provider", cfg.get("provider"))

    if env_key := _env_api_key(provider):
        cfg["api_key"] = env_key
    cfg |= explicit
    if is_placeholder(cfg.get("api_key")):
        cfg.pop("api_key")

    config = GatewayConfig(
        provider=cfg.get("provider"),
        model=cfg.get("model"),
        api_key=cfg.get("api_key"),
        base_url=cfg.get("base_url"),
    )
    if require_complete and not config.is_complete:
        raise ConfigurationError(INCOMPLETE_CONFIG_MESSAGE, provider=config.provider)
    return config


__all__ = [
    "GatewayConfig",
    "load_gateway_config",
]
