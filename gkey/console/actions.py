# gkey/console/actions.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Action(Enum):
    UNRECOGNIZED = "unrecognized"
    JOIN_CHANNEL = "join_channel"
    SEND_COMMAND = "send_command"
    SERVER_INFO = "server_info"
    CHANNEL_INFO = "channel_info"
    AVATAR = "avatar"
    TOGGLE_MENU = "toggle_menu"
    SUBSCRIBE_CHANNEL = "subscribe_channel"
    UNSUBSCRIBE_CHANNEL = "unsubscribe_channel"
    SUBSCRIBE_ALL = "subscribe_all"
    UNSUBSCRIBE_ALL = "unsubscribe_all"
    LIST_BOOKMARKS = "list_bookmarks"


@dataclass(frozen=True)
class VerbSpec:
    verb: str
    action: Action
    usage: str
    required_args: int = 0


VERBS: Dict[str, VerbSpec] = {
    s.verb: s
    for s in (
        VerbSpec("join",           Action.JOIN_CHANNEL,        "join <channelID> [password]", 1),
        VerbSpec("command",        Action.SEND_COMMAND,        "command <command>",           1),
        VerbSpec("server",         Action.SERVER_INFO,         "server"),
        VerbSpec("channel",        Action.CHANNEL_INFO,        "channel"),
        VerbSpec("avatar",         Action.AVATAR,              "avatar <clientID>",           1),
        VerbSpec("enablemenu",     Action.TOGGLE_MENU,         "enablemenu <menuID> <0|1>",   1),
        VerbSpec("subscribe",      Action.SUBSCRIBE_CHANNEL,   "subscribe <channelID>",       1),
        VerbSpec("unsubscribe",    Action.UNSUBSCRIBE_CHANNEL, "unsubscribe <channelID>",     1),
        VerbSpec("subscribeall",   Action.SUBSCRIBE_ALL,       "subscribeall"),
        VerbSpec("unsubscribeall", Action.UNSUBSCRIBE_ALL,     "unsubscribeall"),
        VerbSpec("bookmarks",      Action.LIST_BOOKMARKS,      "bookmarks"),
    )
}

SPEC_BY_ACTION: Dict[Action, VerbSpec] = {s.action: s for s in VERBS.values()}


def resolve(verb: str) -> Action:
    """Exact, case-sensitive verb lookup."""
    spec = VERBS.get(verb)
    return spec.action if spec is not None else Action.UNRECOGNIZED
