# gkey/model/identifier.py
"""
Hotkey identifier codec.

The host stores hotkey bindings under an opaque string. This module maps a
DeviceEventCode to that string and back:

    <tag>-g<key_index>-m<modal_state>      e.g. "keybd-g3-m1", "mouse-g6-m0"

The grammar is the compatibility contract with bindings the host already
persisted, so the literals below must never change.
"""
from __future__ import annotations

from .event import DeviceEventCode, FIELD_MAX
from gkey.utils.numbers import parse_int_lenient

KEYBOARD_TAG = "keybd"
MOUSE_TAG = "mouse"
SEPARATOR = "-"
KEY_FIELD_PREFIX = "g"
MODAL_FIELD_PREFIX = "m"

# Host-side buffer size for identifiers (including the terminator).
ID_MAX_LEN = 64


def encode_identifier(code: DeviceEventCode) -> str:
    """Encode the key identity of `code`. `code.is_press` is ignored."""
    tag = MOUSE_TAG if code.is_secondary_device else KEYBOARD_TAG
    # Both fields are bounded by FIELD_MAX, so the result stays under ID_MAX_LEN.
    return (
        f"{tag}{SEPARATOR}{KEY_FIELD_PREFIX}{code.key_index}"
        f"{SEPARATOR}{MODAL_FIELD_PREFIX}{code.modal_state}"
    )


def _parse_field(token: str | None) -> int:
    # First character is the field prefix ('g' / 'm'); whatever it is, skip it.
    if not token:
        return 0
    value = parse_int_lenient(token[1:])
    return value if 0 <= value <= FIELD_MAX else 0


def decode_identifier(identifier: str | None) -> DeviceEventCode:
    """
    Best-effort decode of an identifier.

    Never raises: unknown tags fall back to the keyboard class, missing or
    non-numeric fields fall back to 0. The result always has is_press=True.
    """
    tokens = [t for t in (identifier or "").split(SEPARATOR) if t]
    tokens += [None] * (3 - len(tokens))
    device, key, modal = tokens[:3]

    return DeviceEventCode(
        is_secondary_device=(device == MOUSE_TAG),
        key_index=_parse_field(key),
        modal_state=_parse_field(modal),
    )


def is_mouse_identifier(identifier: str | None) -> bool:
    """Substring heuristic; tolerates identifiers from other plugins."""
    return MOUSE_TAG in (identifier or "")


def device_name(identifier: str | None, *, keyboard_name: str, mouse_name: str) -> str:
    return mouse_name if is_mouse_identifier(identifier) else keyboard_name
