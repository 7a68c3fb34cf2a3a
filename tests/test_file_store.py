"""Tests for diffy_setup.store.file_store module."""

import json
import stat
from pathlib import Path
from unittest.mock import patch

import pytest

from diffy_setup.store.file_store import FileStore
from diffy_setup.utils.errors import CacheWriteError, ExitCode


class TestFileStoreGetSet:
    def test_get_missing_returns_none(self, store: FileStore):
        assert store.get("u1-diffy-key") is None
        assert store.has("u1-diffy-key") is False

    def test_set_then_get(self, store: FileStore):
        store.set("u1-diffy-key", "GOODKEY")
        assert store.get("u1-diffy-key") == "GOODKEY"
        assert store.has("u1-diffy-key") is True

    def test_value_is_json_encoded_on_disk(self, store: FileStore, build_tools_dir: Path):
        store.set("u1-diffy-project", "42")
        assert json.loads((build_tools_dir / "u1-diffy-project").read_text()) == "42"

    def test_last_write_wins(self, store: FileStore):
        store.set("u1-diffy-key", "first")
        store.set("u1-diffy-key", "second")
        assert store.get("u1-diffy-key") == "second"

    def test_creates_missing_directory(self, tmp_path: Path):
        store = FileStore(tmp_path / "nested" / "build-tools")
        store.set("key", "value")
        assert store.get("key") == "value"

    def test_entry_is_owner_only(self, store: FileStore, build_tools_dir: Path):
        store.set("secret", "value")
        mode = stat.S_IMODE((build_tools_dir / "secret").stat().st_mode)
        assert mode == 0o600

    def test_unsafe_characters_are_replaced(self, store: FileStore, build_tools_dir: Path):
        store.set("user/1:diffy-key", "v")
        assert (build_tools_dir / "user_1_diffy-key").is_file()
        assert store.get("user/1:diffy-key") == "v"

    def test_rejects_empty_key(self, store: FileStore):
        with pytest.raises(ValueError):
            store.set("..", "v")

    def test_non_serializable_value_leaves_no_temp_file(
        self, store: FileStore, build_tools_dir: Path
    ):
        with pytest.raises(TypeError):
            store.set("bad", object())
        assert list(build_tools_dir.iterdir()) == []

    @patch("diffy_setup.store.file_store.os.replace", side_effect=OSError("Read-only file system"))
    def test_write_failure_raises_cache_write_error(
        self, mock_replace, store: FileStore, build_tools_dir: Path
    ):
        with pytest.raises(CacheWriteError, match="u1-diffy-key") as exc_info:
            store.set("u1-diffy-key", "GOODKEY")

        assert isinstance(exc_info.value.__cause__, OSError)
        assert exc_info.value.exit_code == ExitCode.GENERAL_ERROR
        assert list(build_tools_dir.iterdir()) == []

    def test_directory_failure_raises_cache_write_error(self, tmp_path: Path):
        blocker = tmp_path / "build-tools"
        blocker.write_text("not a directory")
        store = FileStore(blocker / "nested")

        with pytest.raises(CacheWriteError):
            store.set("key", "value")

    def test_corrupt_entry_reads_as_none(self, store: FileStore, build_tools_dir: Path):
        (build_tools_dir / "broken").write_text("{not json")
        assert store.get("broken") is None


class TestFileStoreListing:
    def test_keys_sorted(self, store: FileStore):
        store.set("b", 1)
        store.set("a", 2)
        assert store.keys() == ["a", "b"]

    def test_items_decodes_values(self, store: FileStore):
        store.set("site", "mysite")
        assert list(store.items()) == [("site", "mysite")]

    def test_listing_missing_directory_is_empty(self, tmp_path: Path):
        assert FileStore(tmp_path / "absent").keys() == []

    def test_remove(self, store: FileStore):
        store.set("k", "v")
        store.remove("k")
        store.remove("k")
        assert store.get("k") is None
