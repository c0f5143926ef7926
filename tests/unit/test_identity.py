"""Unit tests for server identity lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from gxpfru.core.identity import read_first_line, read_server_id
from gxpfru.exceptions import IdentitySourceUnavailableError


class TestReadServerId:
    def test_single_line(self, tmp_path: Path):
        path = tmp_path / "server_id"
        path.write_text("SN123\n")
        assert read_server_id(path) == "SN123"

    def test_no_trailing_newline(self, tmp_path: Path):
        path = tmp_path / "server_id"
        path.write_text("SN123")
        assert read_server_id(path) == "SN123"

    def test_crlf(self, tmp_path: Path):
        path = tmp_path / "server_id"
        path.write_bytes(b"SN123\r\n")
        assert read_server_id(path) == "SN123"

    def test_only_first_line(self, tmp_path: Path):
        path = tmp_path / "server_id"
        path.write_text("first\nsecond\n")
        assert read_server_id(path) == "first"

    def test_missing_file(self, tmp_path: Path):
        assert read_server_id(tmp_path / "missing") == "Unknown"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "server_id"
        path.write_text("")
        assert read_server_id(path) == "Unknown"

    def test_directory(self, tmp_path: Path):
        assert read_server_id(tmp_path) == "Unknown"


class TestReadFirstLine:
    def test_raises_for_missing(self, tmp_path: Path):
        with pytest.raises(IdentitySourceUnavailableError) as excinfo:
            read_first_line(tmp_path / "missing")
        assert excinfo.value.path == str(tmp_path / "missing")
