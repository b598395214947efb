# gkey/console/dispatcher.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence

from gkey.console.actions import Action, SPEC_BY_ACTION, resolve
from gkey.console.parser import tokenize
from gkey.interfaces.host import CommandTarget, ErrorCode, HostCommands, HostMessenger, LogLevel
from gkey.model.bookmark import format_bookmark_tree
from gkey.utils.numbers import parse_int_lenient


class DispatchOutcome(Enum):
    HANDLED = "handled"
    UNHANDLED = "unhandled"


@dataclass(frozen=True)
class CommandContext:
    """Ambient state for one command: the server tab it came from and our plugin id."""
    connection_id: int
    plugin_id: str = ""


_MISSING_ARG_MESSAGES: Dict[Action, str] = {
    Action.JOIN_CHANNEL: "Missing channel ID parameter.",
    Action.SEND_COMMAND: "Missing command parameter.",
    Action.AVATAR: "Missing client ID parameter.",
    Action.TOGGLE_MENU: "Usage is: " + SPEC_BY_ACTION[Action.TOGGLE_MENU].usage,
    Action.SUBSCRIBE_CHANNEL: "Missing channel ID parameter.",
    Action.UNSUBSCRIBE_CHANNEL: "Missing channel ID parameter.",
}

Handler = Callable[[Sequence[str], CommandContext], None]


class CommandDispatcher:
    """
    Runs operator console commands against the host API.

    The outcome only says whether the verb was recognized. Failures reported
    by the host are written to the host log and never change the outcome.
    """

    def __init__(
        self,
        *,
        commands: HostCommands,
        messenger: HostMessenger,
        log_source: str = "Plugin",
        logger: Optional[logging.Logger] = None,
    ):
        self._commands = commands
        self._messenger = messenger
        self._source = log_source
        self._log = logger or logging.getLogger(__name__)

        self._handlers: Dict[Action, Handler] = {
            Action.JOIN_CHANNEL: self._join_channel,
            Action.SEND_COMMAND: self._send_command,
            Action.SERVER_INFO: self._server_info,
            Action.CHANNEL_INFO: self._channel_info,
            Action.AVATAR: self._avatar,
            Action.TOGGLE_MENU: self._toggle_menu,
            Action.SUBSCRIBE_CHANNEL: self._subscribe_channel,
            Action.UNSUBSCRIBE_CHANNEL: self._unsubscribe_channel,
            Action.SUBSCRIBE_ALL: self._subscribe_all,
            Action.UNSUBSCRIBE_ALL: self._unsubscribe_all,
            Action.LIST_BOOKMARKS: self._list_bookmarks,
        }
        missing = set(Action) - set(self._handlers) - {Action.UNRECOGNIZED}
        if missing:
            raise RuntimeError(f"No handler for actions: {sorted(a.value for a in missing)}")

    def handle_line(self, line: str, ctx: CommandContext) -> DispatchOutcome:
        cmd = tokenize(line)
        return self.dispatch(resolve(cmd.verb), cmd.args, ctx)

    def dispatch(self, action: Action, args: Sequence[str], ctx: CommandContext) -> DispatchOutcome:
        if action is Action.UNRECOGNIZED:
            self._log.debug("COMMAND_UNHANDLED")
            return DispatchOutcome.UNHANDLED

        self._log.debug("COMMAND_DISPATCH action=%s args=%d conn=%s", action.value, len(args), ctx.connection_id)
        try:
            if len(args) < SPEC_BY_ACTION[action].required_args:
                self._messenger.print_to_active_view(_MISSING_ARG_MESSAGES[action])
            else:
                self._handlers[action](args, ctx)
        except Exception:
            self._log.exception("COMMAND_HANDLER_ERROR action=%s", action.value)

        return DispatchOutcome.HANDLED

    # ---------------- helpers ----------------

    def _host_log(self, text: str, level: LogLevel, ctx: CommandContext | None = None) -> None:
        conn = ctx.connection_id if ctx is not None else 0
        self._messenger.log(text, level, self._source, conn)

    def _own_client_id(self, ctx: CommandContext) -> Optional[int]:
        err, client_id = self._commands.get_client_id(ctx.connection_id)
        if err != ErrorCode.OK:
            self._host_log("Error querying client ID", LogLevel.ERROR, ctx)
            return None
        return client_id

    # ---------------- handlers ----------------

    def _join_channel(self, args: Sequence[str], ctx: CommandContext) -> None:
        channel_id = parse_int_lenient(args[0])
        password = args[1] if len(args) > 1 else ""

        client_id = self._own_client_id(ctx)
        if client_id is None:
            return

        err = self._commands.request_client_move(ctx.connection_id, client_id, channel_id, password)
        if err != ErrorCode.OK:
            self._host_log("Error requesting client move", LogLevel.INFO, ctx)

    def _send_command(self, args: Sequence[str], ctx: CommandContext) -> None:
        err = self._commands.send_plugin_command(
            ctx.connection_id, ctx.plugin_id, args[0], CommandTarget.CURRENT_CHANNEL
        )
        if err != ErrorCode.OK:
            self._host_log("Error sending plugin command", LogLevel.INFO, ctx)

    def _server_info(self, args: Sequence[str], ctx: CommandContext) -> None:
        err, info = self._commands.get_server_connect_info(ctx.connection_id)
        if err == ErrorCode.OK and info is not None:
            self._messenger.print_to_active_view(
                f"Server Connect Info: {info.host}:{info.port} (pw: {info.password})"
            )
        else:
            self._messenger.print_to_active_view("No server connect info available.")

    def _channel_info(self, args: Sequence[str], ctx: CommandContext) -> None:
        client_id = self._own_client_id(ctx)
        if client_id is None:
            return

        err, channel_id = self._commands.get_channel_of_client(ctx.connection_id, client_id)
        if err != ErrorCode.OK or channel_id is None:
            self._host_log("Error querying channel ID", LogLevel.ERROR, ctx)
            return

        err, info = self._commands.get_channel_connect_info(ctx.connection_id, channel_id)
        if err == ErrorCode.OK and info is not None:
            self._messenger.print_to_active_view(
                f"Channel Connect Info: {info.path} (pw: {info.password})"
            )
        else:
            self._messenger.print_to_active_view("No channel connect info available.")

    def _avatar(self, args: Sequence[str], ctx: CommandContext) -> None:
        client_id = parse_int_lenient(args[0])
        err, path = self._commands.get_avatar(ctx.connection_id, client_id)
        if err == ErrorCode.OK:
            if path:
                self._messenger.print_to_active_view(f"Avatar path: {path}")
            else:
                self._messenger.print_to_active_view(
                    "Avatar not yet downloaded, waiting for avatar update event."
                )
        elif err != ErrorCode.DATABASE_EMPTY_RESULT:
            # DATABASE_EMPTY_RESULT: the client simply has no avatar set
            self._host_log("Error getting avatar", LogLevel.INFO, ctx)

    def _toggle_menu(self, args: Sequence[str], ctx: CommandContext) -> None:
        menu_id = parse_int_lenient(args[0])
        enabled = parse_int_lenient(args[1]) != 0 if len(args) > 1 else False
        err = self._commands.set_plugin_menu_enabled(ctx.plugin_id, menu_id, enabled)
        if err != ErrorCode.OK:
            self._host_log("Error toggling menu item", LogLevel.INFO, ctx)

    def _subscribe_channel(self, args: Sequence[str], ctx: CommandContext) -> None:
        err = self._commands.request_channel_subscribe(ctx.connection_id, [parse_int_lenient(args[0])])
        if err != ErrorCode.OK:
            self._host_log("Error subscribing channel", LogLevel.INFO, ctx)

    def _unsubscribe_channel(self, args: Sequence[str], ctx: CommandContext) -> None:
        err = self._commands.request_channel_unsubscribe(ctx.connection_id, [parse_int_lenient(args[0])])
        if err != ErrorCode.OK:
            self._host_log("Error unsubscribing channel", LogLevel.INFO, ctx)

    def _subscribe_all(self, args: Sequence[str], ctx: CommandContext) -> None:
        if self._commands.request_channel_subscribe_all(ctx.connection_id) != ErrorCode.OK:
            self._host_log("Error subscribing channel", LogLevel.INFO, ctx)

    def _unsubscribe_all(self, args: Sequence[str], ctx: CommandContext) -> None:
        if self._commands.request_channel_unsubscribe_all(ctx.connection_id) != ErrorCode.OK:
            self._host_log("Error unsubscribing channel", LogLevel.INFO, ctx)

    def _list_bookmarks(self, args: Sequence[str], ctx: CommandContext) -> None:
        err, items = self._commands.get_bookmark_list()
        if err != ErrorCode.OK:
            # Bookmarks are not tied to a server tab.
            self._host_log("Error getting bookmarks list", LogLevel.ERROR)
            return

        lines = format_bookmark_tree(items or [])
        if not lines:
            self._messenger.print_to_active_view("No bookmarks.")
            return
        for line in lines:
            self._messenger.print_to_active_view(line)
