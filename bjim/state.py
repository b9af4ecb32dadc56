"""Process-wide configuration that is set once."""

from __future__ import annotations

from typing import Any

from .errors import ConfigError

_instance: Any = None


def set_global(config: Any) -> None:
    """Make ``config`` the process-wide configuration.

    Raises ConfigError if one has already been set.
    """
    global _instance
    if _instance is not None:
        raise ConfigError("Failed to globalize config")
    _instance = config


def get_global() -> Any:
    """Return the process-wide configuration.

    Raises RuntimeError if none has been set.
    """
    if _instance is None:
        raise RuntimeError("Config is not initialized")
    return _instance


def reset_global() -> None:
    """Forget the process-wide configuration."""
    global _instance
    _instance = None