"""Application settings served from a settings document and a stored requests directory."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable

from .errors import ConfigParseError, NotFoundError
from .indices import build_account_index, build_config_index
from .loader import load_stored_requests
from .models import Account, SettingsSnapshot, StoredRequestResult
from .parser import parse_settings_document

logger = logging.getLogger(__name__)

STORED_REQUEST_NOT_FOUND = "No config found for id: {}"


class FileApplicationSettings:
    """Read-only settings loaded once from disk.

    Use ``create`` to build an instance. Every query reads the immutable
    snapshot, so one instance can be shared by any number of callers.
    """

    def __init__(self, snapshot: SettingsSnapshot) -> None:
        self._snapshot = snapshot

    @classmethod
    def create(
        cls, settings_path: str | Path, stored_requests_dir: str | Path
    ) -> FileApplicationSettings:
        settings_path = Path(settings_path)
        try:
            raw = settings_path.read_bytes()
        except OSError as exc:
            raise ConfigParseError(
                f"cannot read settings document {settings_path}: {exc}"
            ) from exc
        document = parse_settings_document(raw)
        snapshot = SettingsSnapshot(
            accounts=build_account_index(document),
            configs=build_config_index(document),
            stored_requests=load_stored_requests(Path(stored_requests_dir)),
        )
        logger.info(
            "Loaded file settings from %s: accounts=%d configs=%d stored_requests=%d",
            settings_path,
            len(snapshot.accounts),
            len(snapshot.configs),
            len(snapshot.stored_requests),
        )
        return cls(snapshot)

    @property
    def snapshot(self) -> SettingsSnapshot:
        return self._snapshot

    async def get_account_by_id(self, account_id: str) -> Account:
        if account_id not in self._snapshot.accounts:
            raise NotFoundError("Account", account_id)
        return Account(id=account_id)

    async def get_ad_unit_config_by_id(self, config_id: str) -> str:
        try:
            return self._snapshot.configs[config_id]
        except KeyError as exc:
            raise NotFoundError("AdUnitConfig", config_id) from exc

    async def get_stored_requests_by_id(self, ids: Iterable[str]) -> StoredRequestResult:
        """Resolve a batch of stored request ids.

        Never raises for unknown ids: each miss is reported in ``errors`` in
        request order, and every id that was found is returned. ``ids`` is a
        collection of ids; a bare string is rejected with ``TypeError``.
        """
        if isinstance(ids, str):
            raise TypeError("ids must be a collection of stored request ids, not a str")
        stored_requests = self._snapshot.stored_requests
        found: dict[str, str] = {}
        errors: list[str] = []
        for stored_id in dict.fromkeys(ids):
            content = stored_requests.get(stored_id)
            if content is None:
                errors.append(STORED_REQUEST_NOT_FOUND.format(stored_id))
            else:
                found[stored_id] = content
        return StoredRequestResult(
            stored_id_to_content=MappingProxyType(found),
            errors=tuple(errors),
        )
