# gkey/interfaces/host.py
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Protocol, Tuple

from gkey.model.bookmark import Bookmark


class ErrorCode(IntEnum):
    """Subset of the host client library's error code space used by the bridge."""
    OK = 0x0000
    UNDEFINED = 0x0001
    NOT_IMPLEMENTED = 0x0002
    CLIENT_INVALID_ID = 0x0200
    CHANNEL_INVALID_ID = 0x0300
    DATABASE = 0x0500
    DATABASE_EMPTY_RESULT = 0x0501


class LogLevel(IntEnum):
    """Host log severities (lower is more severe)."""
    CRITICAL = 0
    ERROR = 1
    WARNING = 2
    DEBUG = 3
    INFO = 4
    DEVEL = 5


class CommandTarget(IntEnum):
    """Recipients of a plugin command."""
    CURRENT_CHANNEL = 0
    SERVER = 1
    CLIENT = 2
    CURRENT_CHANNEL_SUBSCRIBED_CLIENTS = 3


@dataclass(frozen=True)
class ServerConnectInfo:
    host: str
    port: int
    password: str = ""


@dataclass(frozen=True)
class ChannelConnectInfo:
    path: str
    password: str = ""


class HostNotifier(Protocol):
    def notify_key_event(self, plugin_id: str, identifier: str, is_up: bool) -> None: ...


class HostMessenger(Protocol):
    def print_to_active_view(self, text: str) -> None: ...
    def log(self, text: str, level: LogLevel, source: str, connection_id: int = 0) -> None: ...


class HostCommands(Protocol):
    """
    Per-connection queries and mutation requests.

    Every call reports an ErrorCode; value-returning queries return
    (ErrorCode, value) where value is None unless the code is OK.
    """
    def get_client_id(self, connection_id: int) -> Tuple[ErrorCode, Optional[int]]: ...

    def get_channel_of_client(self, connection_id: int, client_id: int) -> Tuple[ErrorCode, Optional[int]]: ...

    def request_client_move(
        self, connection_id: int, client_id: int, channel_id: int, password: str
    ) -> ErrorCode: ...

    def send_plugin_command(
        self, connection_id: int, plugin_id: str, command: str, target: CommandTarget
    ) -> ErrorCode: ...

    def get_server_connect_info(self, connection_id: int) -> Tuple[ErrorCode, Optional[ServerConnectInfo]]: ...

    def get_channel_connect_info(
        self, connection_id: int, channel_id: int
    ) -> Tuple[ErrorCode, Optional[ChannelConnectInfo]]: ...

    def get_avatar(self, connection_id: int, client_id: int) -> Tuple[ErrorCode, Optional[str]]: ...

    def set_plugin_menu_enabled(self, plugin_id: str, menu_id: int, enabled: bool) -> ErrorCode: ...

    def request_channel_subscribe(self, connection_id: int, channel_ids: List[int]) -> ErrorCode: ...

    def request_channel_unsubscribe(self, connection_id: int, channel_ids: List[int]) -> ErrorCode: ...

    def request_channel_subscribe_all(self, connection_id: int) -> ErrorCode: ...

    def request_channel_unsubscribe_all(self, connection_id: int) -> ErrorCode: ...

    def get_bookmark_list(self) -> Tuple[ErrorCode, Optional[List[Bookmark]]]: ...
