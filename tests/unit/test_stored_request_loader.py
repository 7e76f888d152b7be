"""Unit tests for loading the stored requests directory."""

from __future__ import annotations

from pathlib import Path

import pytest

from prebid_settings.settings.errors import DirectoryReadError
from prebid_settings.settings.loader import load_stored_requests


class TestLoadStoredRequests:
    def test_loads_json_files_by_stem(self, stored_requests_dir: Path):
        (stored_requests_dir / "1.json").write_text("value1")
        (stored_requests_dir / "imp-2.json").write_text('{"id": "imp-2"}')

        stored = load_stored_requests(stored_requests_dir)

        assert dict(stored) == {"1": "value1", "imp-2": '{"id": "imp-2"}'}

    def test_content_is_kept_byte_for_byte(self, stored_requests_dir: Path):
        (stored_requests_dir / "crlf.json").write_bytes(b'{\r\n  "a": 1\r\n}\r\n')

        stored = load_stored_requests(stored_requests_dir)

        assert stored["crlf"] == '{\r\n  "a": 1\r\n}\r\n'

    def test_other_extensions_are_never_read(self, stored_requests_dir: Path, monkeypatch):
        (stored_requests_dir / "1.json").write_text("value1")
        (stored_requests_dir / "1.txt").write_text("ignored")
        (stored_requests_dir / "notes.json.bak").write_text("ignored")
        read_paths: list[str] = []
        real_read_bytes = Path.read_bytes

        def _recording_read_bytes(self: Path) -> bytes:
            read_paths.append(self.name)
            return real_read_bytes(self)

        monkeypatch.setattr(Path, "read_bytes", _recording_read_bytes)

        stored = load_stored_requests(stored_requests_dir)

        assert read_paths == ["1.json"]
        assert dict(stored) == {"1": "value1"}

    def test_subdirectories_are_not_scanned(self, stored_requests_dir: Path):
        nested = stored_requests_dir / "nested.json"
        nested.mkdir()
        (nested / "inner.json").write_text("inner")

        assert dict(load_stored_requests(stored_requests_dir)) == {}

    def test_empty_directory(self, stored_requests_dir: Path):
        assert dict(load_stored_requests(stored_requests_dir)) == {}

    def test_missing_directory_raises(self, tmp_path: Path):
        with pytest.raises(DirectoryReadError) as excinfo:
            load_stored_requests(tmp_path / "missing")
        assert isinstance(excinfo.value.__cause__, FileNotFoundError)

    def test_file_instead_of_directory_raises(self, tmp_path: Path):
        path = tmp_path / "not-a-dir"
        path.write_text("")
        with pytest.raises(DirectoryReadError):
            load_stored_requests(path)

    def test_undecodable_bytes_do_not_abort_loading(self, stored_requests_dir: Path):
        (stored_requests_dir / "1.json").write_bytes(b'{"name": "caf\xe9"}')
        (stored_requests_dir / "2.json").write_text("value2")

        stored = load_stored_requests(stored_requests_dir)

        assert stored["1"] == '{"name": "caf\ufffd"}'
        assert stored["2"] == "value2"
