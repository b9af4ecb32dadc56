"""Errors raised while loading configuration."""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """The configuration file could not be opened."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Config not found: {cause}")


class ConfigParseError(ConfigError):
    """The configuration file could not be parsed."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Failed to parse config: {cause}")