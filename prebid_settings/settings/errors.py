"""Errors raised while loading or querying application settings."""

from __future__ import annotations


class SettingsError(Exception):
    """Base class for settings failures."""


class ConfigParseError(SettingsError, ValueError):
    """Raised when the root settings document cannot be read or parsed."""


class DirectoryReadError(SettingsError, OSError):
    """Raised when the stored requests directory cannot be listed or read."""


class NotFoundError(SettingsError, KeyError):
    """Raised when a single-key lookup misses."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key

    def __str__(self) -> str:
        return str(self.args[0])
