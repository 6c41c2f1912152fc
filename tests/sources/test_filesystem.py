from __future__ import annotations

from pathlib import Path

import pytest

from envstore.sources import (
    FileContentSource,
    InMemoryContentSource,
    create_content_source,
)


class TestFileContentSource:
    def test_reads_relative_to_base_dir(self, tmp_path: Path) -> None:
        (tmp_path / "assets").mkdir()
        (tmp_path / "assets" / ".env").write_text("A=1\n", encoding="utf-8")
        source = FileContentSource(tmp_path)

        assert source.read_text("assets/.env") == "A=1\n"

    def test_absolute_path_ignores_base_dir(self, tmp_path: Path) -> None:
        env_file = tmp_path / "abs.env"
        env_file.write_text("B=2", encoding="utf-8")
        source = FileContentSource(tmp_path / "elsewhere")

        assert source.read_text(str(env_file)) == "B=2"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileContentSource(tmp_path).read_text("missing.env")

    def test_directory_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(IsADirectoryError):
            FileContentSource().read_text(str(tmp_path))


class TestInMemoryContentSource:
    def test_serves_registered_content(self) -> None:
        source = InMemoryContentSource({"assets/.env": "A=1"})
        source.add("other.env", "B=2")

        assert source.read_text("assets/.env") == "A=1"
        assert source.read_text("other.env") == "B=2"
        assert source.requests == ["assets/.env", "other.env"]

    def test_unknown_path_raises(self) -> None:
        with pytest.raises(FileNotFoundError, match="missing.env"):
            InMemoryContentSource().read_text("missing.env")


def test_create_content_source_selects_backend(tmp_path: Path) -> None:
    assert isinstance(create_content_source(tmp_path), FileContentSource)
    assert isinstance(create_content_source(files={"a": "b"}), InMemoryContentSource)
