from __future__ import annotations

from gkey.app.labels import KeyLabelResolver


class FakeSource:
    def __init__(self, *, button=None, key=None, raise_on=None):
        self.button = button
        self.key = key
        self.raise_on = raise_on
        self.calls: list[tuple] = []

    def start(self, callback): ...
    def stop(self): ...

    def get_button_label(self, index):
        self.calls.append(("button", index))
        if self.raise_on:
            raise self.raise_on
        return self.button

    def get_key_label(self, index, modal_state):
        self.calls.append(("key", index, modal_state))
        if self.raise_on:
            raise self.raise_on
        return self.key


def _resolver(src: FakeSource) -> KeyLabelResolver:
    return KeyLabelResolver(src, keyboard_name="KB", mouse_name="MS")


def test_keyboard_label_uses_key_and_modal():
    src = FakeSource(key="G3/M1")
    assert _resolver(src).display_label("keybd-g3-m1") == "G3/M1"
    assert src.calls == [("key", 3, 1)]


def test_mouse_label_uses_button_index():
    src = FakeSource(button="Button 6")
    assert _resolver(src).display_label("mouse-g6-m2") == "Button 6"
    assert src.calls == [("button", 6)]


def test_lookup_exception_falls_back_to_identifier():
    src = FakeSource(raise_on=UnicodeDecodeError("utf-8", b"\xff", 0, 1, "bad"))
    assert _resolver(src).display_label("keybd-g3-m1") == "keybd-g3-m1"


def test_empty_or_missing_label_falls_back_to_identifier():
    assert _resolver(FakeSource(key=None)).display_label("keybd-g3-m1") == "keybd-g3-m1"
    assert _resolver(FakeSource(key="")).display_label("keybd-g3-m1") == "keybd-g3-m1"


def test_malformed_identifier_still_resolves():
    src = FakeSource(key="G0")
    assert _resolver(src).display_label("garbage") == "G0"
    assert src.calls == [("key", 0, 0)]


def test_device_name():
    r = _resolver(FakeSource())
    assert r.device_name("mouse-g1-m0") == "MS"
    assert r.device_name("keybd-g1-m0") == "KB"
    assert r.device_name("other-plugin-key") == "KB"


def test_very_long_identifier_resolves_without_raising():
    src = FakeSource(button=None)
    ident = "mouse-g" + "1" * 5000
    assert _resolver(src).display_label(ident) == ident
    assert src.calls == [("button", 0)]
