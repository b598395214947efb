# gkey/utils/numbers.py
from __future__ import annotations

import re

_LEADING_INT = re.compile(r"\s*([+-]?)0*(\d+)", re.ASCII)

# Longer digit runs are treated as unparseable; int() refuses huge strings.
MAX_DIGITS = 19


def parse_int_lenient(text: str | None, default: int = 0) -> int:
    """
    C `atoi` style integer parse.

    Reads an optional sign and the leading run of digits, ignoring whatever
    follows ("12abc" -> 12). Anything without leading digits, or with more
    than MAX_DIGITS significant digits, returns `default`.
    """
    if not text:
        return default
    m = _LEADING_INT.match(text)
    if m is None:
        return default
    sign, digits = m.groups()
    if len(digits) > MAX_DIGITS:
        return default
    return -int(digits) if sign == "-" else int(digits)
