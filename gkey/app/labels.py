# gkey/app/labels.py
from __future__ import annotations

import logging
from typing import Optional

from gkey.interfaces.device_source import DeviceEventSource
from gkey.model.identifier import decode_identifier, device_name


class KeyLabelResolver:
    """
    Turns stored hotkey identifiers into text for the host UI.

    Every call returns a fresh string; nothing is cached between calls.
    """

    def __init__(
        self,
        source: DeviceEventSource,
        *,
        keyboard_name: str,
        mouse_name: str,
        logger: Optional[logging.Logger] = None,
    ):
        self._source = source
        self._keyboard_name = keyboard_name
        self._mouse_name = mouse_name
        self._log = logger or logging.getLogger(__name__)

    def display_label(self, identifier: str) -> str:
        """Device label for `identifier`, or the identifier itself if the lookup fails."""
        try:
            code = decode_identifier(identifier)
            if code.is_secondary_device:
                text = self._source.get_button_label(code.key_index)
            else:
                text = self._source.get_key_label(code.key_index, code.modal_state)
        except Exception:
            self._log.warning("KEY_LABEL_LOOKUP_FAILED id=%s", identifier, exc_info=True)
            return identifier

        if not text:
            return identifier
        return str(text)

    def device_name(self, identifier: str) -> str:
        return device_name(identifier, keyboard_name=self._keyboard_name, mouse_name=self._mouse_name)
