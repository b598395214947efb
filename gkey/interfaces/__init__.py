from .device_source import DeviceEventSource, DeviceEventCallback
from .host import (
    CommandTarget,
    ErrorCode,
    HostCommands,
    HostMessenger,
    HostNotifier,
    LogLevel,
)

__all__ = [
    "DeviceEventSource", "DeviceEventCallback",
    "HostNotifier", "HostMessenger", "HostCommands",
    "ErrorCode", "LogLevel", "CommandTarget",
]
