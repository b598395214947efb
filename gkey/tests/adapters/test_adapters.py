from __future__ import annotations

import io

from gkey.adapters.console_host import ConsoleHost, ConsoleHostState
from gkey.adapters.keymap_source import KeymapDeviceSource
from gkey.interfaces.host import ErrorCode, LogLevel
from gkey.model.event import DeviceEventCode


def test_keymap_labels():
    src = KeymapDeviceSource(keyboard_keys=6, modal_states=3, mouse_buttons=8)
    assert src.get_key_label(3, 0) == "G3"
    assert src.get_key_label(3, 2) == "G3/M2"
    assert src.get_key_label(7, 0) is None
    assert src.get_key_label(3, 3) is None
    assert src.get_button_label(8) == "Button 8"
    assert src.get_button_label(0) is None


def test_keymap_press_emits_down_then_up():
    src = KeymapDeviceSource()
    events = []
    src.press(DeviceEventCode(True, 2, 0))  # not started: ignored
    src.start(events.append)
    src.press(DeviceEventCode(True, 2, 0, is_press=False))
    assert [(e.identity, e.is_press) for e in events] == [((True, 2, 0), True), ((True, 2, 0), False)]


def test_console_host_echoes_to_stream():
    out = io.StringIO()
    host = ConsoleHost(out=out)
    host.print_to_active_view("hello")
    host.log("oops", LogLevel.ERROR, "Plugin", 4)
    host.notify_key_event("p", "keybd-g1-m0", True)
    assert out.getvalue().splitlines() == [
        "hello",
        "[ERROR] Plugin: oops (conn=4)",
        "KEY keybd-g1-m0 up (plugin=p)",
    ]


def test_console_host_move_updates_channel():
    state = ConsoleHostState()
    host = ConsoleHost(state, out=io.StringIO())
    assert host.request_client_move(1, 1, 99, "") == ErrorCode.CHANNEL_INVALID_ID
    assert host.request_client_move(1, 1, 1, "") == ErrorCode.OK
    assert host.get_channel_of_client(1, 1) == (ErrorCode.OK, 1)


def test_console_host_missing_values():
    state = ConsoleHostState(client_id=None, server=None)
    host = ConsoleHost(state, out=io.StringIO())
    assert host.get_client_id(1) == (ErrorCode.CLIENT_INVALID_ID, None)
    assert host.get_server_connect_info(1) == (ErrorCode.UNDEFINED, None)
    assert host.get_avatar(1, 5) == (ErrorCode.DATABASE_EMPTY_RESULT, None)
