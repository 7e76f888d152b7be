"""Stored request directory loading."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from .errors import DirectoryReadError

STORED_REQUEST_EXTENSION = ".json"


def load_stored_requests(directory: Path) -> Mapping[str, str]:
    """Read every ``*.json`` file directly under ``directory``.

    The stored request id is the file name without its extension and the
    value is the file content decoded as UTF-8, with undecodable bytes
    replaced rather than rejected. Other files are never opened.
    """
    directory = Path(directory)
    try:
        entries = sorted(directory.iterdir(), key=lambda path: path.name)
    except OSError as exc:
        raise DirectoryReadError(
            f"cannot list stored requests directory {directory}: {exc}"
        ) from exc

    stored_requests: dict[str, str] = {}
    for path in entries:
        if not path.name.endswith(STORED_REQUEST_EXTENSION) or not path.is_file():
            continue
        stored_id = path.name[: -len(STORED_REQUEST_EXTENSION)]
        try:
            stored_requests[stored_id] = path.read_bytes().decode("utf-8", errors="replace")
        except OSError as exc:
            raise DirectoryReadError(f"cannot read stored request {path}: {exc}") from exc
    return MappingProxyType(stored_requests)
