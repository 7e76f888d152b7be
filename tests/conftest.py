from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def stored_requests_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "stored_requests"
    directory.mkdir()
    return directory


@pytest.fixture
def write_settings(tmp_path: Path):
    """Write a root settings document and return its path."""

    def _write(content: str) -> Path:
        path = tmp_path / "settings.yaml"
        path.write_text(content)
        return path

    return _write
