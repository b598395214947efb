# gkey/model/event.py
from __future__ import annotations

from dataclasses import dataclass

# Device SDKs report key indices and shift states as C ints.
FIELD_MAX = 2**31 - 1


@dataclass(frozen=True)
class DeviceEventCode:
    """
    One physical G-key / button event as reported by the device SDK.

    Attributes:
        is_secondary_device: True for the mouse class, False for the keyboard class.
        key_index: Ordinal of the key/button within its device class.
        modal_state: Active M-key layer at event time (0 = base layer).
        is_press: True on key-down, False on key-up. Not part of the key identity.
    """
    is_secondary_device: bool
    key_index: int
    modal_state: int = 0
    is_press: bool = True

    def __post_init__(self) -> None:
        for name in ("key_index", "modal_state"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= FIELD_MAX:
                raise ValueError(f"{name} out of range [0, {FIELD_MAX}]: {value}")

    @property
    def identity(self) -> tuple[bool, int, int]:
        """The (device class, key, modal state) triple an identifier encodes."""
        return (self.is_secondary_device, self.key_index, self.modal_state)

    def as_dict(self) -> dict:
        return {
            "is_secondary_device": self.is_secondary_device,
            "key_index": self.key_index,
            "modal_state": self.modal_state,
            "is_press": self.is_press,
        }
