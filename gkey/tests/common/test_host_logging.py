from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from gkey.common.logging import HostLogHandler, configure_logging, host_level_for
from gkey.interfaces.host import LogLevel


class FakeMessenger:
    def __init__(self, fail: bool = False):
        self.entries: list[tuple] = []
        self.fail = fail

    def print_to_active_view(self, text): ...

    def log(self, text, level, source, connection_id=0):
        if self.fail:
            raise OSError("host gone")
        self.entries.append((text, level, source, connection_id))


@pytest.mark.parametrize(
    "levelno,expected",
    [
        (logging.CRITICAL, LogLevel.CRITICAL),
        (logging.ERROR, LogLevel.ERROR),
        (logging.WARNING, LogLevel.WARNING),
        (logging.INFO, LogLevel.INFO),
        (logging.DEBUG, LogLevel.DEBUG),
    ],
)
def test_host_level_mapping(levelno, expected):
    assert host_level_for(levelno) is expected


def test_handler_forwards_records():
    m = FakeMessenger()
    log = logging.getLogger("gkey.test.forward")
    h = HostLogHandler(m, source="GKey", level=logging.INFO)
    log.addHandler(h)
    log.setLevel(logging.INFO)
    try:
        log.debug("hidden")
        log.error("bad %s", "thing")
    finally:
        log.removeHandler(h)
        log.setLevel(logging.NOTSET)

    assert m.entries == [("bad thing", LogLevel.ERROR, "GKey", 0)]


def test_handler_failure_does_not_raise(monkeypatch):
    m = FakeMessenger(fail=True)
    h = HostLogHandler(m, source="GKey")
    seen = []
    monkeypatch.setattr(h, "handleError", lambda record: seen.append(record))
    record = logging.LogRecord("gkey", logging.ERROR, __file__, 1, "boom", None, None)

    h.emit(record)
    assert seen == [record]


def test_configure_logging_adds_file_handler_once(tmp_path: Path):
    root = logging.getLogger()
    before = list(root.handlers)
    old_level = root.level
    path = tmp_path / "logs" / "gkey.log"
    try:
        configure_logging("info", path)
        configure_logging("info", path)
        target = os.path.abspath(path)
        files = [h for h in root.handlers if getattr(h, "baseFilename", None) == target]
        assert len(files) == 1
        assert root.level == logging.INFO
        assert path.parent.is_dir()
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
                h.close()
        root.setLevel(old_level)
