# gkey/cli/main.py
from __future__ import annotations

from typing import Optional

from gkey.app.config import load_config
from gkey.common.logging import configure_logging
from gkey.core.errors import GkeyError

from gkey.cli.args import parse_args
from gkey.cli.commands import (
    cmd_decode,
    cmd_encode,
    cmd_info,
    cmd_run,
)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)

    try:
        if args.cmd == "encode":
            return cmd_encode(args)

        cfg = load_config(args.config)

        if args.cmd == "decode":
            return cmd_decode(args, cfg=cfg)
        if args.cmd == "info":
            return cmd_info(cfg=cfg)
        if args.cmd == "run":
            return cmd_run(args, cfg=cfg)

        return 2
    except GkeyError as e:
        print(f"ERROR: {e.message}")
        if e.hint:
            print(f"Hint: {e.hint}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
