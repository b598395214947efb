# gkey/cli/args.py
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _non_negative_int(v: str) -> int:
    try:
        n = int(v)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid integer '{v}'") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"Value must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gkey", description="G-key hotkey bridge tools")
    parser.add_argument("--config", type=Path, default=None,
                        help="Plugin config YAML (default: packaged metadata/plugin.yml).")
    parser.add_argument("--log-level", default="WARNING", type=str.upper, choices=LOG_LEVELS)
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_encode = sub.add_parser("encode", help="Print the hotkey identifier for a key.")
    p_encode.add_argument("--mouse", action="store_true", help="Mouse button instead of keyboard G-key.")
    p_encode.add_argument("key_index", type=_non_negative_int)
    p_encode.add_argument("modal_state", type=_non_negative_int, nargs="?", default=0)

    p_decode = sub.add_parser("decode", help="Decode a stored hotkey identifier.")
    p_decode.add_argument("identifier")

    sub.add_parser("info", help="Print plugin info.")

    p_run = sub.add_parser("run", help="Run console commands against a dry-run host.")
    p_run.add_argument("line", nargs="*",
                       help="Command line, e.g. 'join 5 secret'. Reads lines from stdin when omitted.")
    p_run.add_argument("--connection", type=int, default=1, help="Server connection handler id.")
    p_run.add_argument("--plugin-id", default="gkey-cli")

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
