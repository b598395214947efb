# gkey/cli/commands.py
from __future__ import annotations

import sys
from typing import Iterable, TextIO

from gkey.adapters.console_host import ConsoleHost
from gkey.adapters.keymap_source import KeymapDeviceSource
from gkey.app.config import GkeyConfig
from gkey.app.plugin import GkeyPlugin
from gkey.model.event import DeviceEventCode
from gkey.model.identifier import decode_identifier, encode_identifier


def build_plugin(cfg: GkeyConfig, *, out: TextIO | None = None) -> GkeyPlugin:
    host = ConsoleHost(out=out)
    return GkeyPlugin(
        cfg,
        source=KeymapDeviceSource(),
        notifier=host,
        messenger=host,
        commands=host,
    )


# ---------------- Commands ----------------

def cmd_encode(args) -> int:
    try:
        code = DeviceEventCode(
            is_secondary_device=bool(args.mouse),
            key_index=args.key_index,
            modal_state=args.modal_state,
        )
    except ValueError as e:
        print(f"ERROR: {e}")
        return 2
    print(encode_identifier(code))
    return 0


def cmd_decode(args, *, cfg: GkeyConfig) -> int:
    plugin = build_plugin(cfg)
    code = decode_identifier(args.identifier)

    print(f"Identifier: {args.identifier}")
    print(f"Device:     {plugin.key_device_name(args.identifier)}")
    print(f"Class:      {'mouse' if code.is_secondary_device else 'keyboard'}")
    print(f"Key:        {code.key_index}")
    print(f"Modal:      {code.modal_state}")
    print(f"Label:      {plugin.display_key_text(args.identifier)}")
    print(f"Canonical:  {encode_identifier(code)}")
    return 0


def cmd_info(*, cfg: GkeyConfig) -> int:
    plugin = build_plugin(cfg)
    info = plugin.info()
    print(f"{info.name} {info.version} (API {info.api_version})")
    print(f"Author:     {info.author}")
    print(f"Key prefix: {plugin.key_prefix}")
    print(f"Autoload:   {'yes' if plugin.request_autoload else 'no'}")
    print(info.description)
    return 0


def _command_lines(args, stdin: TextIO) -> Iterable[str]:
    if args.line:
        yield " ".join(args.line)
        return
    for raw in stdin:
        line = raw.rstrip("\r\n")
        if line.strip():
            yield line


def cmd_run(args, *, cfg: GkeyConfig, stdin: TextIO | None = None) -> int:
    plugin = build_plugin(cfg)
    plugin.register_plugin_id(args.plugin_id)

    all_handled = True
    with plugin:
        for line in _command_lines(args, stdin or sys.stdin):
            handled = plugin.process_command(args.connection, line)
            all_handled = all_handled and handled
            print(f"{'handled' if handled else 'unhandled'}: {line}")

    return 0 if all_handled else 1
