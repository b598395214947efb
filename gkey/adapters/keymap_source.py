# gkey/adapters/keymap_source.py
from __future__ import annotations

import logging
from typing import Optional

from gkey.interfaces.device_source import DeviceEventCallback
from gkey.model.event import DeviceEventCode


class KeymapDeviceSource:
    """
    Device source without vendor SDK.

    Labels are generated from the key numbers and events are injected with
    press(); used by the CLI and tests in place of the real SDK binding.
    """

    def __init__(self, *, keyboard_keys: int = 18, modal_states: int = 3, mouse_buttons: int = 20):
        self.keyboard_keys = keyboard_keys
        self.modal_states = modal_states
        self.mouse_buttons = mouse_buttons
        self._callback: Optional[DeviceEventCallback] = None
        self._log = logging.getLogger(__name__)

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: DeviceEventCallback) -> None:
        self._callback = callback
        self._log.debug("KEYMAP_SOURCE_START")

    def stop(self) -> None:
        self._callback = None
        self._log.debug("KEYMAP_SOURCE_STOP")

    def get_button_label(self, index: int) -> Optional[str]:
        if not 1 <= index <= self.mouse_buttons:
            return None
        return f"Button {index}"

    def get_key_label(self, index: int, modal_state: int) -> Optional[str]:
        if not 1 <= index <= self.keyboard_keys or not 0 <= modal_state < self.modal_states:
            return None
        return f"G{index}" if modal_state == 0 else f"G{index}/M{modal_state}"

    def press(self, code: DeviceEventCode) -> None:
        """Deliver a key-down and key-up for `code`'s key."""
        if self._callback is None:
            self._log.warning("KEYMAP_SOURCE_NOT_STARTED")
            return
        self._callback(DeviceEventCode(code.is_secondary_device, code.key_index, code.modal_state, True))
        self._callback(DeviceEventCode(code.is_secondary_device, code.key_index, code.modal_state, False))
