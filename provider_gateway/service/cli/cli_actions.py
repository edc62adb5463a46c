"""CLI action handlers.

Dry-run paths build the endpoint and body with the provider adapter and
print them as JSON without network I/O; credentials in the endpoint are
redacted. Execution paths call the gateway and print the normalized result.
Errors go to stderr as JSON with a non-zero exit code.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ...base.errors import ConfigurationError, GatewayError, MissingModelError
from ...base.factory import AdapterFactory
from ...base.models import ChatRequest, Message
from ...base.utils.endpoints import redact_endpoint
from ...config import GatewayConfig, load_gateway_config
from ...gateway import ProviderGateway, default_gateway
from ..analyzer import build_analysis_request, handle_analyze


def _emit_error(exc: GatewayError) -> int:
    print(json.dumps({"error": exc.message, "code": exc.code.value}), file=sys.stderr)
    return 1


def load_schema(path: str) -> Dict[str, Any]:
    """Read a JSON schema file for ``--json-schema``."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Cannot read JSON schema {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"JSON schema {path} must be an object")
    return data


def build_chat_request(args: argparse.Namespace, config: GatewayConfig) -> ChatRequest:
    """Translate parsed ``chat`` arguments plus config into a `ChatRequest`."""
    messages = []
    if args.system:
        messages.append(Message(role="system", content=args.system))
    messages.append(Message(role="user", content=args.prompt))
    schema = load_schema(args.json_schema) if args.json_schema else None
    return ChatRequest(
        provider=config.provider,
        api_key=config.api_key,
        model_id=config.model,
        messages=messages,
        response_type="json" if schema is not None else None,
        response_schema=schema,
        custom_url=config.base_url,
    )


def plan_request(request: ChatRequest) -> Dict[str, Any]:
    """Return the endpoint and body that would be sent for ``request`` (no I/O)."""
    adapter = AdapterFactory.create(request.provider)
    if not request.model_id:
        raise MissingModelError(adapter.provider.value)
    return {
        "provider": adapter.provider.value,
        "model": request.model_id,
        "endpoint": redact_endpoint(adapter.build_endpoint(request)),
        "api_key_present": bool(request.api_key),
        "body": adapter.build_body(request),
    }


def handle_chat(args: argparse.Namespace, *, gateway: Optional[ProviderGateway] = None) -> int:
    """Run the ``chat`` subcommand."""
    overrides = {"provider": args.provider, "model": args.model, "base_url": args.url}
    try:
        config = load_gateway_config(overrides, require_complete=args.execute)
        request = build_chat_request(args, config)
        if not args.execute:
            print(json.dumps(plan_request(request), indent=2))
            return 0
        response = (gateway or default_gateway()).chat(request, timeout=args.timeout)
    except GatewayError as exc:
        return _emit_error(exc)
    print(json.dumps(response.to_dict(), indent=2))
    return 0


def handle_analyze_cmd(args: argparse.Namespace, *, gateway: Optional[ProviderGateway] = None) -> int:
    """Run the ``analyze`` subcommand."""
    try:
        config = load_gateway_config(require_complete=args.execute)
        if not args.execute:
            print(json.dumps(plan_request(build_analysis_request(args.text, config)), indent=2))
            return 0
    except GatewayError as exc:
        return _emit_error(exc)
    result = handle_analyze({"text": args.text}, config=config, gateway=gateway)
    if "error" in result:
        print(json.dumps(result), file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


__all__ = [
    "load_schema",
    "build_chat_request",
    "plan_request",
    "handle_chat",
    "handle_analyze_cmd",
]
