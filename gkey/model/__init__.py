from .event import DeviceEventCode
from .identifier import encode_identifier, decode_identifier, device_name
from .bookmark import Bookmark

__all__ = ["DeviceEventCode",
           "encode_identifier",
           "decode_identifier",
           "device_name",
           "Bookmark"]
