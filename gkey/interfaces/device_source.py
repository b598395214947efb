# gkey/interfaces/device_source.py
from typing import Callable, Optional, Protocol

from gkey.model.event import DeviceEventCode

DeviceEventCallback = Callable[[DeviceEventCode], None]


class DeviceEventSource(Protocol):
    """Vendor SDK binding: delivers G-key events and resolves key labels."""
    def start(self, callback: DeviceEventCallback) -> None: ...
    def stop(self) -> None: ...
    def get_button_label(self, index: int) -> Optional[str]: ...
    def get_key_label(self, index: int, modal_state: int) -> Optional[str]: ...
