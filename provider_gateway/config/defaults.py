"""provider_gateway.config.defaults
================================

Central place for the small, stable constants used across the gateway, the
analyzer service and the CLI. Plain constants only: this module imports
nothing from the rest of the package so any layer can depend on it.
"""

from __future__ import annotations

# ---- Provider endpoints ----
OLLAMA_DEFAULT_ENDPOINT = "http://127.0.0.1:11434/api/chat"
OPENAI_DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
# Template; ``model`` and ``key`` are filled by the gemini adapter.
GEMINI_ENDPOINT_TEMPLATE = (
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent?key={key}"
)
GROK_DEFAULT_ENDPOINT = "https://api.x.ai/v1/grok"


# ---- Gateway configuration ----
# Provider used when neither the config file nor the environment names one.
DEFAULT_PROVIDER = "ollama"
# Optional JSON/YAML file with ``provider``, ``model``, ``api_key``, ``base_url``.
CONFIG_FILE_ENV = "GATEWAY_CONFIG_FILE"
INCOMPLETE_CONFIG_MESSAGE = (
    "AI configuration not found or incomplete. Please configure the extension options."
)


# ---- Service / HTTP layer ----
# Comma-separated list of allowed origins for the dev server.
SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"
SERVICE_DEFAULT_HOST = "127.0.0.1"
SERVICE_DEFAULT_PORT = 8088


__all__ = [
    "OLLAMA_DEFAULT_ENDPOINT",
    "OPENAI_DEFAULT_ENDPOINT",
    "GEMINI_ENDPOINT_TEMPLATE",
    "GROK_DEFAULT_ENDPOINT",
    "DEFAULT_PROVIDER",
    "CONFIG_FILE_ENV",
    "INCOMPLETE_CONFIG_MESSAGE",
    "SERVICE_CORS_DEFAULT_ORIGINS",
    "SERVICE_DEFAULT_HOST",
    "SERVICE_DEFAULT_PORT",
]
