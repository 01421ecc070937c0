# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#                 github.com/dedalus-labs/solidkit-python/LICENSE
# ==============================================================================

"""Command-line runner for the demonstrations.

Usage:
    python -m solidkit              # every demo
    python -m solidkit ocp lsp      # selected demos
    python -m solidkit --list

Environment variables:
    * SOLIDKIT_TAX_RATE, SOLIDKIT_SEPARATOR, SOLIDKIT_BOUNDED_CAPACITY
    * SOLIDKIT_LOG_LEVEL, SOLIDKIT_LOG_JSON, NO_COLOR
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from .config import DemoConfig
from .principles import DEMOS, run_demos
from .utils.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="solidkit", description="Run SOLID principle demonstrations")
    parser.add_argument("demos", nargs="*", metavar="DEMO", help=f"Demo keys to run: {', '.join(DEMOS)} (default: all)")
    parser.add_argument("--list", action="store_true", help="List available demos and exit")
    parser.add_argument("--log-level", default=None, help="Log level (default: SOLIDKIT_LOG_LEVEL or WARNING)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit logs as JSON lines")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for spec in DEMOS.values():
            print(f"{spec.key:<10} {spec.title}")
        return 0

    unknown = [key for key in args.demos if key not in DEMOS]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}")

    setup_logger(level=args.log_level, use_json=args.json_logs, force=True)
    try:
        config = DemoConfig.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        return 2

    run_demos(args.demos or None, config=config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
