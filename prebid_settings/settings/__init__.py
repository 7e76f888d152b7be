"""Settings store factory."""

from __future__ import annotations

from typing import Iterable, Protocol

from ..config import ServerConfig
from .errors import ConfigParseError, DirectoryReadError, NotFoundError, SettingsError
from .file_settings import FileApplicationSettings
from .models import Account, SettingsSnapshot, StoredRequestResult


class ApplicationSettings(Protocol):
    async def get_account_by_id(self, account_id: str) -> Account: ...

    async def get_ad_unit_config_by_id(self, config_id: str) -> str: ...

    async def get_stored_requests_by_id(self, ids: Iterable[str]) -> StoredRequestResult: ...


def build_settings(config: ServerConfig) -> FileApplicationSettings:
    return FileApplicationSettings.create(
        config.settings.filename,
        config.settings.stored_requests_dir,
    )


__all__ = [
    "Account",
    "ApplicationSettings",
    "ConfigParseError",
    "DirectoryReadError",
    "FileApplicationSettings",
    "NotFoundError",
    "SettingsError",
    "SettingsSnapshot",
    "StoredRequestResult",
    "build_settings",
]
