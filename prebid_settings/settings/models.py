"""Value types returned by the settings store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class Account:
    id: str
    price_granularity: str | None = None


@dataclass(frozen=True)
class StoredRequestResult:
    """Stored requests resolved for one batch lookup.

    ``errors`` holds one message per requested id that was not found, in the
    order the ids were requested.
    """

    stored_id_to_content: Mapping[str, str]
    errors: tuple[str, ...] = ()


@dataclass(frozen=True)
class SettingsSnapshot:
    accounts: frozenset[str]
    configs: Mapping[str, str]
    stored_requests: Mapping[str, str]
