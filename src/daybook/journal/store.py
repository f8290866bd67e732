"""JournalStore: the in-memory journal mirrored to a key-value backend.

The store owns three collections (entries, folders, categories), kept newest
first. Reads are synchronous and never touch the backend; they return copies.
Mutations update memory immediately and then write the whole affected collection back to the
backend; that write is best-effort, and failures are logged, not raised.

No operation raises for an unknown id: deletes, renames and moves of missing
records are silent no-ops, and lookups return None.

Example::

    store = JournalStore(LocalStorage("~/.daybook-data/storage"))
    await store.load()

    entry = Entry.new(title="Monday")
    await store.save_entry(entry)
    await store.add_tag_to_entry(entry.id, "Work")
    store.get_entries_by_tag("work")
"""

from __future__ import annotations

import asyncio
from collections import Counter
from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeVar

from loguru import logger

from daybook.core.exceptions import DataProcessingError
from daybook.core.storage import KeyValueStore, StorageError

from .codec import (
    CATEGORIES_KEY,
    COLLECTION_KEYS,
    ENTRIES_KEY,
    FOLDERS_KEY,
    SCHEMA_VERSION_KEY,
    decode_collection,
    decode_version,
    encode_collection,
    encode_version,
)
from .config import JournalConfig
from .filters import EntryFilter, filter_entries
from .migrations import CURRENT_SCHEMA_VERSION, Collections, migrate
from .models import Category, Entry, Folder, normalize_tag
from .sentiment import analyze_sentiment

T = TypeVar("T", Entry, Folder, Category)


def _index_of(records: list[T], record_id: str) -> int:
    for i, record in enumerate(records):
        if record.id == record_id:
            return i
    return -1


class JournalStore:
    """Entries, folders and categories with write-through persistence.

    Construct one per process and pass it to whatever needs it. Call
    :meth:`load` before use; mutations made earlier stay in memory only.
    """

    def __init__(self, backend: KeyValueStore, config: JournalConfig | None = None):
        self.backend = backend
        self.config = config or JournalConfig()
        self._entries: list[Entry] = []
        self._folders: list[Folder] = []
        self._categories: list[Category] = []
        self._loaded = False
        self._write_lock = asyncio.Lock()

    # -- Views ------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        """Whether :meth:`load` has completed. Writes are skipped until then."""
        return self._loaded

    @property
    def entries(self) -> tuple[Entry, ...]:
        """Copies of the stored entries; change them through the store."""
        return tuple(replace(e) for e in self._entries)

    @property
    def folders(self) -> tuple[Folder, ...]:
        return tuple(self._folders)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories)

    # -- Loading ----------------------------------------------------------

    async def load(self) -> None:
        """Read, migrate and build all collections from the backend.

        A collection that cannot be read or parsed is logged and replaced
        with an empty one; loading itself never fails.
        """
        raw = Collections(
            entries=await self._read_collection(ENTRIES_KEY),
            folders=await self._read_collection(FOLDERS_KEY),
            categories=await self._read_collection(CATEGORIES_KEY),
        )
        stored_version = await self._read_version()
        raw, version = migrate(raw, stored_version, self.config.category_palette)

        self._entries = self._build(raw.entries, Entry.from_dict, "entry")
        self._folders = self._build(raw.folders, Folder.from_dict, "folder")
        self._categories = self._build(raw.categories, Category.from_dict, "category")
        self._loaded = True

        logger.info(
            f"Journal loaded: {len(self._entries)} entries, {len(self._folders)} folders, "
            f"{len(self._categories)} categories (schema v{version})"
        )

        if version != stored_version:
            await self.flush()

    async def _read_collection(self, key: str) -> list[dict[str, Any]]:
        try:
            data = await self.backend.get_or_none(key)
        except (StorageError, OSError) as e:
            logger.error(f"Could not read '{key}', starting with an empty collection: {e}")
            return []
        if data is None:
            return []
        try:
            return decode_collection(data)
        except DataProcessingError as e:
            logger.error(f"Could not parse '{key}', starting with an empty collection: {e}")
            return []

    async def _read_version(self) -> int:
        try:
            return decode_version(await self.backend.get_or_none(SCHEMA_VERSION_KEY))
        except (StorageError, OSError, DataProcessingError) as e:
            # Migrations are idempotent, so re-running them from scratch is safe
            logger.warning(f"Could not read schema version, assuming legacy data: {e}")
            return 0

    @staticmethod
    def _build(records: list[dict[str, Any]], factory: Callable[[dict[str, Any]], T], kind: str) -> list[T]:
        built: list[T] = []
        seen: set[str] = set()
        for record in records:
            try:
                item = factory(record)
            except (ValueError, TypeError) as e:
                logger.warning(f"Skipping unreadable {kind} record {record.get('id')!r}: {e}")
                continue
            if item.id in seen:
                logger.warning(f"Skipping duplicate {kind} id {item.id!r}")
                continue
            seen.add(item.id)
            built.append(item)
        return built

    # -- Persistence ------------------------------------------------------

    def _serialize(self, key: str) -> bytes:
        if key == ENTRIES_KEY:
            return encode_collection([e.to_dict() for e in self._entries])
        if key == FOLDERS_KEY:
            return encode_collection([f.to_dict() for f in self._folders])
        if key == CATEGORIES_KEY:
            return encode_collection([c.to_dict() for c in self._categories])
        if key == SCHEMA_VERSION_KEY:
            return encode_version(CURRENT_SCHEMA_VERSION)
        raise KeyError(key)

    async def _persist(self, *keys: str) -> None:
        if not self._loaded:
            logger.debug(f"Journal not loaded yet, skipping write of {', '.join(keys)}")
            return
        async with self._write_lock:
            for key in keys:
                # Serialize under the lock so the last write always carries the latest state
                data = self._serialize(key)
                try:
                    await self.backend.set(key, data)
                except (StorageError, OSError) as e:
                    logger.error(f"Failed to persist '{key}': {e}")

    async def flush(self) -> None:
        """Write every collection and the schema version to the backend."""
        await self._persist(*COLLECTION_KEYS, SCHEMA_VERSION_KEY)

    # -- Entries ----------------------------------------------------------

    async def save_entry(self, entry: Entry) -> None:
        """Insert or replace an entry by id.

        Existing entries keep their position; new ones go to the front.
        With sentiment enabled the score is recomputed from title and
        content, overwriting whatever the caller set.
        """
        if self.config.sentiment_enabled:
            entry = replace(entry, sentiment=analyze_sentiment(entry.text))
        else:
            entry = replace(entry)

        index = _index_of(self._entries, entry.id)
        if index >= 0:
            self._entries[index] = entry
        else:
            self._entries.insert(0, entry)
        await self._persist(ENTRIES_KEY)

    async def delete_entry(self, entry_id: str) -> None:
        index = _index_of(self._entries, entry_id)
        if index < 0:
            return
        del self._entries[index]
        await self._persist(ENTRIES_KEY)

    def get_entry(self, entry_id: str) -> Entry | None:
        """A copy of the stored entry, or None."""
        index = _index_of(self._entries, entry_id)
        return replace(self._entries[index]) if index >= 0 else None

    async def _update_entry(self, entry_id: str, **changes: Any) -> None:
        index = _index_of(self._entries, entry_id)
        if index < 0:
            return
        self._entries[index] = replace(self._entries[index], **changes)
        await self._persist(ENTRIES_KEY)

    # -- Folders ----------------------------------------------------------

    async def create_folder(self, name: str) -> Folder:
        folder = Folder.new(name)
        self._folders.insert(0, folder)
        await self._persist(FOLDERS_KEY)
        return folder

    def get_folder(self, folder_id: str) -> Folder | None:
        index = _index_of(self._folders, folder_id)
        return self._folders[index] if index >= 0 else None

    async def delete_folder(self, folder_id: str) -> None:
        """Remove a folder and move its entries back to the root bucket."""
        index = _index_of(self._folders, folder_id)
        if index >= 0:
            del self._folders[index]
        # Entries are detached even when the folder itself is already gone
        detached = self._detach("folder_id", folder_id)
        if index < 0 and not detached:
            return
        await self._persist(FOLDERS_KEY, ENTRIES_KEY)

    async def rename_folder(self, folder_id: str, new_name: str) -> None:
        index = _index_of(self._folders, folder_id)
        if index < 0:
            return
        self._folders[index] = replace(self._folders[index], name=new_name)
        await self._persist(FOLDERS_KEY)

    async def move_entry(self, entry_id: str, folder_id: str | None) -> None:
        """File an entry under ``folder_id`` (None = root).

        The folder is not required to exist.
        """
        await self._update_entry(entry_id, folder_id=folder_id)

    def get_entries_by_folder(self, folder_id: str | None) -> list[Entry]:
        return [replace(e) for e in self._entries if e.folder_id == folder_id]

    def _detach(self, field_name: str, target: str) -> int:
        """Clear ``field_name`` on every entry pointing at ``target``."""
        count = 0
        for i, entry in enumerate(self._entries):
            if getattr(entry, field_name) == target:
                self._entries[i] = replace(entry, **{field_name: None})
                count += 1
        return count

    # -- Tags -------------------------------------------------------------

    async def add_tag_to_entry(self, entry_id: str, tag: str) -> None:
        tag = normalize_tag(tag)
        entry = self.get_entry(entry_id)
        if not tag or entry is None or tag in entry.tags:
            return
        await self._update_entry(entry_id, tags=[*entry.tags, tag])

    async def remove_tag_from_entry(self, entry_id: str, tag: str) -> None:
        tag = normalize_tag(tag)
        entry = self.get_entry(entry_id)
        if entry is None or tag not in entry.tags:
            return
        await self._update_entry(entry_id, tags=[t for t in entry.tags if t != tag])

    def get_entries_by_tag(self, tag: str) -> list[Entry]:
        tag = normalize_tag(tag)
        return [replace(e) for e in self._entries if tag in e.tags]

    def get_all_tags(self) -> list[str]:
        """Every tag in use, sorted and deduplicated."""
        return sorted({tag for entry in self._entries for tag in entry.tags})

    def get_tag_counts(self) -> dict[str, int]:
        """Number of entries carrying each tag, keyed in sorted tag order."""
        counts = Counter(tag for entry in self._entries for tag in entry.tags)
        return {tag: counts[tag] for tag in sorted(counts)}

    # -- Categories -------------------------------------------------------

    async def create_category(self, name: str, color: str | None = None) -> Category:
        """Create a category. Without a colour, the next palette colour is used."""
        if not color:
            color = self.config.palette_color(len(self._categories))
        category = Category.new(name, color)
        self._categories.insert(0, category)
        await self._persist(CATEGORIES_KEY)
        return category

    def get_category(self, category_id: str) -> Category | None:
        index = _index_of(self._categories, category_id)
        return self._categories[index] if index >= 0 else None

    async def delete_category(self, category_id: str) -> None:
        """Remove a category and clear it from every entry that used it."""
        index = _index_of(self._categories, category_id)
        if index >= 0:
            del self._categories[index]
        detached = self._detach("category", category_id)
        if index < 0 and not detached:
            return
        await self._persist(CATEGORIES_KEY, ENTRIES_KEY)

    async def rename_category(self, category_id: str, new_name: str) -> None:
        await self._update_category(category_id, name=new_name)

    async def update_category_color(self, category_id: str, color: str) -> None:
        await self._update_category(category_id, color=color)

    async def _update_category(self, category_id: str, **changes: Any) -> None:
        index = _index_of(self._categories, category_id)
        if index < 0:
            return
        self._categories[index] = replace(self._categories[index], **changes)
        await self._persist(CATEGORIES_KEY)

    async def set_entry_category(self, entry_id: str, category_id: str | None) -> None:
        await self._update_entry(entry_id, category=category_id)

    def get_entries_by_category(self, category_id: str) -> list[Entry]:
        return [replace(e) for e in self._entries if e.category == category_id]

    # -- Queries ----------------------------------------------------------

    def filter_entries(self, criteria: EntryFilter) -> list[Entry]:
        """Entries matching ``criteria``, newest first."""
        return [replace(e) for e in filter_entries(self._entries, criteria)]
