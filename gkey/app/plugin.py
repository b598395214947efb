# gkey/app/plugin.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from gkey.app.config import GkeyConfig
from gkey.app.labels import KeyLabelResolver
from gkey.common.logging import HostLogHandler
from gkey.console.dispatcher import CommandContext, CommandDispatcher, DispatchOutcome
from gkey.core.errors import PluginStateError
from gkey.interfaces.device_source import DeviceEventSource
from gkey.interfaces.host import HostCommands, HostMessenger, HostNotifier
from gkey.model.event import DeviceEventCode
from gkey.model.identifier import encode_identifier

PACKAGE_LOGGER = "gkey"


@dataclass(frozen=True)
class PluginInfo:
    name: str
    version: str
    api_version: int
    author: str
    description: str


class GkeyPlugin:
    """
    The one object the host talks to.

    Owns the plugin id handed out by the host (set once, freed on stop), the
    device event source and the console dispatcher.
    """

    def __init__(
        self,
        config: GkeyConfig,
        *,
        source: DeviceEventSource,
        notifier: HostNotifier,
        messenger: HostMessenger,
        commands: HostCommands,
        logger: Optional[logging.Logger] = None,
    ):
        self._config = config
        self._source = source
        self._notifier = notifier
        self._messenger = messenger
        self._log = logger or logging.getLogger(__name__)

        self._plugin_id: Optional[str] = None
        self._started = False
        self._log_handler: Optional[HostLogHandler] = None
        self._saved_level = logging.NOTSET

        self._labels = KeyLabelResolver(
            source,
            keyboard_name=config.keyboard_name,
            mouse_name=config.mouse_name,
            logger=self._log,
        )
        self._dispatcher = CommandDispatcher(
            commands=commands,
            messenger=messenger,
            log_source=config.log_source,
            logger=self._log,
        )

    # --- static plugin facts ---
    @property
    def config(self) -> GkeyConfig:
        return self._config

    @property
    def plugin_id(self) -> Optional[str]:
        return self._plugin_id

    @property
    def key_prefix(self) -> str:
        return self._config.key_prefix

    @property
    def offers_configure(self) -> bool:
        return False

    @property
    def request_autoload(self) -> bool:
        return self._config.request_autoload

    @property
    def command_keyword(self) -> Optional[str]:
        return self._config.command_keyword

    def info(self) -> PluginInfo:
        c = self._config
        return PluginInfo(
            name=c.name,
            version=c.version,
            api_version=c.api_version,
            author=c.author,
            description=c.description,
        )

    # --- lifecycle ---
    def register_plugin_id(self, plugin_id: str) -> None:
        if not plugin_id:
            raise PluginStateError("Host handed out an empty plugin id.")
        if self._plugin_id is not None:
            raise PluginStateError(
                "Plugin id already registered.",
                details={"plugin_id": self._plugin_id},
            )
        self._plugin_id = str(plugin_id)
        self._log.info("PLUGIN_ID_REGISTERED id=%s", self._plugin_id)

    def start(self) -> None:
        if self._started:
            return
        if self._config.forward_logs:
            self._attach_log_handler()
        self._source.start(self.on_device_event)
        self._started = True
        self._log.info("PLUGIN_START name=%s version=%s", self._config.name, self._config.version)

    def stop(self) -> None:
        if self._started:
            try:
                self._source.stop()
            except Exception:
                self._log.exception("DEVICE_SOURCE_STOP_ERROR")
            self._started = False
            self._log.info("PLUGIN_STOP")

        self._detach_log_handler()
        self._plugin_id = None

    def __enter__(self) -> "GkeyPlugin":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _attach_log_handler(self) -> None:
        if self._log_handler is not None:
            return
        forward_level = logging.getLevelName(self._config.forward_level)
        self._log_handler = HostLogHandler(
            self._messenger,
            source=self._config.log_source,
            level=forward_level,
        )
        pkg = logging.getLogger(PACKAGE_LOGGER)
        # Records below the package logger's effective level never reach a handler.
        self._saved_level = pkg.level
        if pkg.getEffectiveLevel() > forward_level:
            pkg.setLevel(forward_level)
        pkg.addHandler(self._log_handler)

    def _detach_log_handler(self) -> None:
        if self._log_handler is None:
            return
        pkg = logging.getLogger(PACKAGE_LOGGER)
        pkg.removeHandler(self._log_handler)
        pkg.setLevel(self._saved_level)
        self._log_handler = None

    # --- host surface ---
    def on_device_event(self, code: DeviceEventCode) -> None:
        if self._plugin_id is None:
            self._log.warning("KEY_EVENT_DROPPED reason=no_plugin_id code=%s", code.as_dict())
            return

        identifier = encode_identifier(code)
        # Host convention: is_up=True on release.
        self._notifier.notify_key_event(self._plugin_id, identifier, not code.is_press)

    def display_key_text(self, identifier: str) -> str:
        return self._labels.display_label(identifier)

    def key_device_name(self, identifier: str) -> str:
        return self._labels.device_name(identifier)

    def process_command(self, connection_id: int, text: str) -> bool:
        ctx = CommandContext(connection_id=int(connection_id), plugin_id=self._plugin_id or "")
        return self._dispatcher.handle_line(text, ctx) is DispatchOutcome.HANDLED
