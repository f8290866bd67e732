"""
Local filesystem key-value backend.

Each key is one file under ``base_path``. Writes land in a sibling temp file
that is then renamed over the target, so a crash mid-write leaves the
previous value intact.
"""

import os
from collections.abc import AsyncIterator
from pathlib import Path

import aiofiles
import aiofiles.os
from loguru import logger

from .base import KeyValueStore, StorageError, StorageKeyError, StoragePermissionError

_TMP_SUFFIX = ".tmp"


class LocalStorage(KeyValueStore):
    """Local filesystem storage backend."""

    def __init__(self, base_path: str = "~/.daybook-data/storage", **config):
        super().__init__(**config)
        self.base_path = Path(base_path).expanduser().resolve()
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, key: str) -> Path:
        """Resolve a storage key to an absolute path under ``base_path``.

        Rejects unsafe keys (absolute paths, traversal, empty keys, and
        backslash-delimited paths) to prevent writes outside ``base_path``.
        """
        raw_key = key.strip()
        if not raw_key:
            raise StoragePermissionError("Storage key cannot be empty.")
        if "\x00" in raw_key:
            raise StoragePermissionError("Storage key cannot contain null bytes.")
        if "\\" in raw_key:
            raise StoragePermissionError("Storage key cannot contain backslashes. Use '/' separators.")

        key_path = Path(raw_key)
        if key_path.is_absolute() or raw_key.startswith("~"):
            raise StoragePermissionError(f"Unsafe storage key '{key}': absolute paths are not allowed.")

        full_path = (self.base_path / key_path).resolve()
        try:
            full_path.relative_to(self.base_path)
        except ValueError as e:
            raise StoragePermissionError(f"Unsafe storage key '{key}': path traversal is not allowed.") from e
        return full_path

    async def get(self, key: str) -> bytes:
        path = self._get_full_path(key)
        if not path.is_file():
            raise StorageKeyError(f"Key not found: {key}")

        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot read {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    async def set(self, key: str, data: bytes) -> None:
        path = self._get_full_path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + _TMP_SUFFIX)

        try:
            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(data)
            await aiofiles.os.replace(tmp_path, path)
        except PermissionError as e:
            raise StoragePermissionError(f"Cannot write to {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot write to {path}: {e}") from e

        logger.debug(f"Wrote {len(data)} bytes to {path}")

    async def exists(self, key: str) -> bool:
        return self._get_full_path(key).is_file()

    async def delete(self, key: str) -> bool:
        path = self._get_full_path(key)
        if not path.is_file():
            return False
        await aiofiles.os.remove(path)
        return True

    async def list_keys(self, prefix: str = "") -> AsyncIterator[str]:
        for root, _dirs, files in os.walk(self.base_path):
            for file in sorted(files):
                if file.endswith(_TMP_SUFFIX):
                    continue
                key = (Path(root) / file).relative_to(self.base_path).as_posix()
                if prefix and not key.startswith(prefix):
                    continue
                yield key
