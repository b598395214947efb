# gkey/common/logging.py
"""
Logging glue for the plugin and the CLI.

- HostLogHandler forwards Python log records into the host's own log.
- configure_logging sets up stderr (+ optional file) output for the CLI.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from gkey.interfaces.host import HostMessenger, LogLevel

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def host_level_for(levelno: int) -> LogLevel:
    if levelno >= logging.CRITICAL:
        return LogLevel.CRITICAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARNING
    if levelno >= logging.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class HostLogHandler(logging.Handler):
    """Writes records to HostMessenger.log under a fixed source name."""

    def __init__(self, messenger: HostMessenger, *, source: str, level: int = logging.WARNING):
        super().__init__(level)
        self._messenger = messenger
        self._source = source

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._messenger.log(self.format(record), host_level_for(record.levelno), self._source, 0)
        except Exception:
            self.handleError(record)


def configure_logging(level: str | int = "WARNING", log_path: Optional[Path] = None) -> None:
    """
    Configure the root logger for CLI use (idempotent).

    Always logs to stderr; adds a file handler when `log_path` is given.
    """
    root = logging.getLogger()
    root.setLevel(level if isinstance(level, int) else level.upper())

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(sh)

    if log_path is None:
        return

    log_path.parent.mkdir(parents=True, exist_ok=True)
    target = os.path.abspath(log_path)
    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == target:
            return

    fh = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)
