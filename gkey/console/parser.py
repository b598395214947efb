# gkey/console/parser.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

TOKEN_SEPARATOR = " "
MAX_ARGS = 2


@dataclass(frozen=True)
class CommandLine:
    verb: str
    args: Tuple[str, ...] = ()


def tokenize(line: str | None) -> CommandLine:
    """
    Split an operator line on single spaces.

    Runs of spaces produce no empty tokens. Only the first two parameters are
    kept; anything after them is dropped.
    """
    tokens = [t for t in (line or "").split(TOKEN_SEPARATOR) if t]
    if not tokens:
        return CommandLine(verb="")
    return CommandLine(verb=tokens[0], args=tuple(tokens[1:1 + MAX_ARGS]))
