"""File-backed key/value store for cached credentials.

Each key is stored as its own file inside the store directory. The file
body is a single JSON-encoded value, matching the layout the hosting
platform CLI uses for its build-tools cache, so entries written here can
be read back by that tool and vice versa.

Concurrency Model:
    Single process, no locking. Writes are atomic (tempfile + os.replace),
    so a reader never sees a partially written entry. Last writer wins.
"""

from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from diffy_setup.utils.errors import CacheWriteError

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_.\-]")


class FileStore:
    """Directory of JSON-encoded scalar entries, one file per key.

    Attributes:
        directory: Directory holding the entry files
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def _get_path(self, key: str) -> Path:
        """Map a key to a file path, replacing characters unsafe in file names."""
        safe_key = _UNSAFE_KEY_CHARS.sub("_", key)
        if not safe_key.strip("."):
            raise ValueError(f"Invalid store key: {key!r}")
        return self.directory / safe_key

    def get(self, key: str) -> Any | None:
        """Return the decoded value for key, or None if absent or unreadable."""
        path = self._get_path(key)
        if not path.is_file():
            return None
        return self._read(path)

    def has(self, key: str) -> bool:
        return self._get_path(key).is_file()

    def set(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value.

        Raises:
            TypeError: If value is not JSON-serializable
            CacheWriteError: If the directory cannot be created or written
        """
        path = self._get_path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._atomic_write(path, value)
        except OSError as e:
            raise CacheWriteError(
                f"Could not write cache entry {key} in {self.directory}: {e}"
            ) from e
        logger.debug("Stored cache entry %s", key)

    def remove(self, key: str) -> None:
        self._get_path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        """Names of all entries currently in the store, sorted."""
        return sorted(path.name for path in self._iter_entries())

    def items(self) -> Iterator[tuple[str, Any]]:
        """Iterate over (file name, decoded value) pairs."""
        for path in sorted(self._iter_entries()):
            yield path.name, self._read(path)

    def _iter_entries(self) -> Iterator[Path]:
        if not self.directory.is_dir():
            return
        for path in self.directory.iterdir():
            # Skip in-flight temp files from _atomic_write
            if path.is_file() and not path.name.startswith(".store_"):
                yield path

    def _read(self, path: Path) -> Any | None:
        try:
            return json.loads(path.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            logger.warning(f"Failed to read cache entry {path}: {e}")
            return None

    def _atomic_write(self, path: Path, value: Any) -> None:
        """Write value to file atomically using temp file + rename.

        The temp file is removed on any failure, including serialization
        errors, and the entry is created with owner-only permissions.
        """
        fd, tmp_path = tempfile.mkstemp(prefix=".store_", dir=self.directory)
        success = False
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(value, f)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, path)
            success = True
        finally:
            if not success:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass


__all__ = ["FileStore"]
