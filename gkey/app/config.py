# gkey/app/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gkey.core.errors import ConfigError

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "metadata" / "plugin.yml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class GkeyConfig:
    # plugin info reported to the host
    name: str = "G-Key Plugin"
    version: str = "1.1"
    api_version: int = 26
    author: str = "Jules Blok"
    description: str = "This plugin provides support for Logitech devices with G-Keys for hotkeys."
    key_prefix: str = "gkey"
    request_autoload: bool = False
    command_keyword: Optional[str] = None

    # device family names shown next to a hotkey
    keyboard_name: str = "Logitech Keyboard"
    mouse_name: str = "Logitech Mouse"

    # host log integration
    log_source: str = "Plugin"
    forward_logs: bool = False
    forward_level: str = "WARNING"


def _check_type(name: str, value: Any, default: Any) -> None:
    if name == "command_keyword":
        ok = value is None or isinstance(value, str)
    elif isinstance(default, bool):
        ok = isinstance(value, bool)
    elif isinstance(default, int):
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, str)
    if not ok:
        raise ConfigError(
            f"Invalid value for '{name}': {value!r}.",
            hint=f"Expected {type(default).__name__ if default is not None else 'str or null'}.",
            details={"key": name},
        )


def config_from_mapping(data: Dict[str, Any]) -> GkeyConfig:
    defaults = GkeyConfig()
    known = {f.name for f in fields(GkeyConfig)}

    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(
            f"Unknown plugin config keys: {', '.join(unknown)}.",
            hint=f"Known keys: {', '.join(sorted(known))}",
        )

    for name, value in data.items():
        _check_type(name, value, getattr(defaults, name))

    level = str(data.get("forward_level", defaults.forward_level)).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"Invalid forward_level '{level}'.",
            hint=f"Use one of: {', '.join(_LOG_LEVELS)}",
        )

    return GkeyConfig(**{**data, "forward_level": level})


def load_config(path: str | Path | None = None) -> GkeyConfig:
    """
    Load plugin config from YAML.

    The file must have a `plugin:` root mapping; missing keys keep their defaults.
    With no path, the packaged default (metadata/plugin.yml) is used.
    """
    full_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not full_path.exists():
        raise ConfigError(
            f"Missing config file: {full_path}",
            hint="Pass --config <path> or drop the option to use the defaults.",
        )

    try:
        with open(full_path, "r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            "Failed to parse config file.",
            hint=str(e),
            details={"path": str(full_path)},
        ) from None

    if not isinstance(doc, dict):
        raise ConfigError("Config root must be a mapping.", details={"path": str(full_path)})

    plugin = doc.get("plugin", {})
    if plugin is None:
        plugin = {}
    if not isinstance(plugin, dict):
        raise ConfigError("'plugin' node must be a mapping.", details={"path": str(full_path)})

    return config_from_mapping(plugin)
