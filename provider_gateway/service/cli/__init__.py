"""Gateway CLI (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``; no provider logic
lives here.
"""

from __future__ import annotations

from typing import Optional

from .cli_actions import handle_analyze_cmd, handle_chat
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint; returns the process exit code."""
    args = build_parser().parse_args(argv)
    if args.cmd == "analyze":
        return handle_analyze_cmd(args)
    return handle_chat(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
