"""CLI parser construction for gateway-cli.

Wires subparsers only; handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse

from ...base.models import Provider


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``chat`` and ``analyze`` subcommands.

    Both subcommands are dry-run unless ``--execute`` is given.
    """
    p = argparse.ArgumentParser(
        prog="gateway-cli", description="Provider gateway CLI (safe by default: dry-run)"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_chat = sub.add_parser("chat", help="Preview or send one chat request")
    p_chat.add_argument("--provider", default=None, help=f"one of: {', '.join(Provider.names())}")
    p_chat.add_argument("--model", default=None)
    p_chat.add_argument("--prompt", required=True)
    p_chat.add_argument("--system", default=None, help="optional system message")
    p_chat.add_argument("--json-schema", dest="json_schema", default=None, metavar="FILE",
                        help="request JSON output constrained by the schema in FILE")
    p_chat.add_argument("--url", default=None, help="custom endpoint URL")
    p_chat.add_argument("--timeout", type=float, default=None, help="per-call timeout in seconds")
    p_chat.add_argument("--execute", action="store_true")

    p_an = sub.add_parser("analyze", help="Preview or run post-intention analysis")
    p_an.add_argument("--text", required=True)
    p_an.add_argument("--execute", action="store_true")

    return p


__all__ = ["build_parser"]
