"""Adapter factory.

Purpose
-------
Map each `Provider` to its adapter class. Adapter modules are imported lazily
with ``importlib`` so importing the gateway does not import every provider.

Failure modes
-------------
- A name that is not one of the supported providers raises
  :class:`UnsupportedProviderError`. After validation this branch is
  unreachable, but the lookup still guards it.
- Import or attribute errors inside a registered module propagate; they
  indicate a broken installation, not a bad request.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Optional, Tuple

from .errors import UnsupportedProviderError
from .interfaces import ProviderAdapter
from .models import Provider


class AdapterFactory:
    """Create provider adapters from a provider name or `Provider` member."""

    # Closed mapping: provider -> (module path, class name)
    _ADAPTERS: Dict[Provider, Tuple[str, str]] = {
        Provider.OLLAMA: ("provider_gateway.ollama.client", "OllamaAdapter"),
        Provider.OPENAI: ("provider_gateway.openai.client", "OpenAIAdapter"),
        Provider.GEMINI: ("provider_gateway.gemini.client", "GeminiAdapter"),
        Provider.GROK: ("provider_gateway.grok.client", "GrokAdapter"),
    }

    @classmethod
    def create(cls, provider: Optional[str], **kwargs: Any) -> ProviderAdapter:
        """Return a new adapter for ``provider`` (case-insensitive).

        ``kwargs`` go to the adapter constructor, e.g. ``forward_schema=True``
        for openai.
        """
        member = provider if isinstance(provider, Provider) else Provider.lookup(provider)
        spec = cls._ADAPTERS.get(member) if member is not None else None
        if spec is None:
            raise UnsupportedProviderError(provider)
        module_path, class_name = spec
        klass = getattr(import_module(module_path), class_name)
        return klass(**kwargs)

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        return tuple(p.value for p in cls._ADAPTERS)


def create_adapter(provider: Optional[str], **kwargs: Any) -> ProviderAdapter:
    """Shorthand for :meth:`AdapterFactory.create`."""
    return AdapterFactory.create(provider, **kwargs)


__all__ = ["AdapterFactory", "create_adapter"]
