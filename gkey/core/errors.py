# gkey/core/errors.py
from __future__ import annotations


class GkeyError(Exception):
    """
    Base class for all expected operational errors in the G-key bridge.

    Raised only on the outer surfaces (config loading, plugin lifecycle).
    Identifier decoding and command dispatch never raise these.
    """

    #: Stable machine-readable identifier (for CLI exit mapping, host logs, etc.)
    code: str = "unknown"

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigError(GkeyError):
    """
    Plugin configuration is missing or invalid.

    Examples:
      - config file not found
      - YAML root is not a mapping / missing 'plugin' node
      - unknown key or wrong value type
    """
    code = "config_error"


# ---------------------------------------------------------------------------
# Lifecycle errors
# ---------------------------------------------------------------------------

class PluginStateError(GkeyError):
    """
    Plugin lifecycle call made in the wrong state.

    Examples:
      - plugin id registered twice
      - empty plugin id handed over by the host
    """
    code = "plugin_state_error"
