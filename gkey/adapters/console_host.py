# gkey/adapters/console_host.py
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO, Tuple

from gkey.interfaces.host import (
    ChannelConnectInfo,
    CommandTarget,
    ErrorCode,
    LogLevel,
    ServerConnectInfo,
)
from gkey.model.bookmark import Bookmark


@dataclass
class ConsoleHostState:
    """In-memory answers for the dry-run host. Absent values mean "not available"."""
    client_id: Optional[int] = 1
    channel_id: Optional[int] = 1
    server: Optional[ServerConnectInfo] = field(
        default_factory=lambda: ServerConnectInfo(host="localhost", port=9987)
    )
    channels: Dict[int, ChannelConnectInfo] = field(
        default_factory=lambda: {1: ChannelConnectInfo(path="Default Channel")}
    )
    avatars: Dict[int, str] = field(default_factory=dict)
    bookmarks: List[Bookmark] = field(default_factory=list)


class ConsoleHost:
    """
    Dry-run host: answers queries from ConsoleHostState and echoes every
    request, view message and log entry to a text stream.
    """

    def __init__(self, state: Optional[ConsoleHostState] = None, *, out: Optional[TextIO] = None):
        self.state = state or ConsoleHostState()
        self._out = out

    def _write(self, line: str) -> None:
        print(line, file=self._out or sys.stdout)

    # --- HostNotifier ---
    def notify_key_event(self, plugin_id: str, identifier: str, is_up: bool) -> None:
        self._write(f"KEY {identifier} {'up' if is_up else 'down'} (plugin={plugin_id})")

    # --- HostMessenger ---
    def print_to_active_view(self, text: str) -> None:
        self._write(text)

    def log(self, text: str, level: LogLevel, source: str, connection_id: int = 0) -> None:
        self._write(f"[{level.name}] {source}: {text} (conn={connection_id})")

    # --- HostCommands ---
    def get_client_id(self, connection_id: int) -> Tuple[ErrorCode, Optional[int]]:
        if self.state.client_id is None:
            return ErrorCode.CLIENT_INVALID_ID, None
        return ErrorCode.OK, self.state.client_id

    def get_channel_of_client(self, connection_id: int, client_id: int) -> Tuple[ErrorCode, Optional[int]]:
        if self.state.channel_id is None:
            return ErrorCode.CHANNEL_INVALID_ID, None
        return ErrorCode.OK, self.state.channel_id

    def request_client_move(self, connection_id: int, client_id: int, channel_id: int, password: str) -> ErrorCode:
        self._write(f"> move client={client_id} channel={channel_id} conn={connection_id}")
        if channel_id not in self.state.channels:
            return ErrorCode.CHANNEL_INVALID_ID
        self.state.channel_id = channel_id
        return ErrorCode.OK

    def send_plugin_command(
        self, connection_id: int, plugin_id: str, command: str, target: CommandTarget
    ) -> ErrorCode:
        self._write(f"> plugin command '{command}' -> {target.name} conn={connection_id}")
        return ErrorCode.OK

    def get_server_connect_info(self, connection_id: int) -> Tuple[ErrorCode, Optional[ServerConnectInfo]]:
        if self.state.server is None:
            return ErrorCode.UNDEFINED, None
        return ErrorCode.OK, self.state.server

    def get_channel_connect_info(
        self, connection_id: int, channel_id: int
    ) -> Tuple[ErrorCode, Optional[ChannelConnectInfo]]:
        info = self.state.channels.get(channel_id)
        if info is None:
            return ErrorCode.CHANNEL_INVALID_ID, None
        return ErrorCode.OK, info

    def get_avatar(self, connection_id: int, client_id: int) -> Tuple[ErrorCode, Optional[str]]:
        if client_id not in self.state.avatars:
            return ErrorCode.DATABASE_EMPTY_RESULT, None
        return ErrorCode.OK, self.state.avatars[client_id]

    def set_plugin_menu_enabled(self, plugin_id: str, menu_id: int, enabled: bool) -> ErrorCode:
        self._write(f"> menu {menu_id} {'enabled' if enabled else 'disabled'}")
        return ErrorCode.OK

    def request_channel_subscribe(self, connection_id: int, channel_ids: List[int]) -> ErrorCode:
        self._write(f"> subscribe {channel_ids} conn={connection_id}")
        return ErrorCode.OK

    def request_channel_unsubscribe(self, connection_id: int, channel_ids: List[int]) -> ErrorCode:
        self._write(f"> unsubscribe {channel_ids} conn={connection_id}")
        return ErrorCode.OK

    def request_channel_subscribe_all(self, connection_id: int) -> ErrorCode:
        self._write(f"> subscribe all conn={connection_id}")
        return ErrorCode.OK

    def request_channel_unsubscribe_all(self, connection_id: int) -> ErrorCode:
        self._write(f"> unsubscribe all conn={connection_id}")
        return ErrorCode.OK

    def get_bookmark_list(self) -> Tuple[ErrorCode, Optional[List[Bookmark]]]:
        return ErrorCode.OK, list(self.state.bookmarks)
