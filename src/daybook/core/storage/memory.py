"""In-memory key-value backend for tests and embedding."""

from collections.abc import AsyncIterator

from .base import KeyValueStore, StorageKeyError


class MemoryStorage(KeyValueStore):
    """Dict-backed storage. Values are copied in and out as bytes."""

    def __init__(self, initial: dict[str, bytes] | None = None, **config):
        super().__init__(**config)
        self._data: dict[str, bytes] = dict(initial or {})

    async def get(self, key: str) -> bytes:
        try:
            return self._data[key]
        except KeyError:
            raise StorageKeyError(f"Key not found: {key}") from None

    async def set(self, key: str, data: bytes) -> None:
        self._data[key] = bytes(data)

    async def exists(self, key: str) -> bool:
        return key in self._data

    async def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    async def list_keys(self, prefix: str = "") -> AsyncIterator[str]:
        for key in sorted(self._data):
            if key.startswith(prefix):
                yield key

    def snapshot(self) -> dict[str, bytes]:
        """Return a copy of the raw stored values."""
        return dict(self._data)
