"""Configuration helpers for the settings server."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

_DEFAULT_SERVER_CONFIG = Path(__file__).resolve().parent / "server.yaml"


@dataclass(frozen=True)
class FileSettingsConfig:
    filename: Path
    stored_requests_dir: Path


@dataclass(frozen=True)
class ServerConfig:
    listen: Mapping[str, Any]
    settings: FileSettingsConfig


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return yaml.safe_load(path.read_text()) or {}


def _resolve(base_dir: Path, value: str | Path) -> Path:
    path = Path(value)
    return path if path.is_absolute() else base_dir / path


def load_server_config(path: Path) -> ServerConfig:
    """Build a ``ServerConfig`` from a YAML file.

    Relative settings paths resolve against the directory holding the file.
    ``PBS_SETTINGS_FILE`` and ``PBS_STORED_REQUESTS_DIR`` override them as-is.
    """
    data = _load_yaml(path)
    base_dir = path.resolve().parent
    settings = data.get("settings") or {}
    filename = os.getenv("PBS_SETTINGS_FILE") or _resolve(
        base_dir, settings.get("filename", "settings.yaml")
    )
    stored_requests_dir = os.getenv("PBS_STORED_REQUESTS_DIR") or _resolve(
        base_dir, settings.get("stored_requests_dir", "stored_requests")
    )
    return ServerConfig(
        listen=data.get("listen", {}),
        settings=FileSettingsConfig(
            filename=Path(filename),
            stored_requests_dir=Path(stored_requests_dir),
        ),
    )


@lru_cache(maxsize=1)
def get_server_config() -> ServerConfig:
    return load_server_config(Path(os.getenv("PBS_CONFIG_PATH", _DEFAULT_SERVER_CONFIG)))
