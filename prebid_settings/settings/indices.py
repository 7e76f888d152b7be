"""Indices built from the parsed settings document."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from .errors import ConfigParseError
from .parser import read_section


def build_account_index(document: Mapping[str, Any]) -> frozenset[str]:
    accounts: set[str] = set()
    for account in read_section(document, "accounts"):
        if account is None:
            continue
        if isinstance(account, (dict, list)):
            raise ConfigParseError(f"account id must be a scalar, got {account!r}")
        accounts.add(str(account))
    return frozenset(accounts)


def build_config_index(document: Mapping[str, Any]) -> Mapping[str, str]:
    """Map ad-unit config ids to their raw config strings.

    Entries without an id (or that are not mappings at all) are skipped. An
    entry with an id but no config resolves to the empty string.
    """
    configs: dict[str, str] = {}
    for entry in read_section(document, "configs"):
        if not isinstance(entry, dict):
            continue
        config_id = entry.get("id")
        if config_id is None or isinstance(config_id, (dict, list)):
            continue
        value = entry.get("config")
        if value is None:
            configs[str(config_id)] = ""
        elif not isinstance(value, (dict, list)):
            configs[str(config_id)] = str(value)
    return MappingProxyType(configs)
