"""Editing session for a single entry with debounced autosave.

Mirrors the journal's editor pane: keystrokes update a draft, and the draft
is saved once typing pauses for ``autosave_delay`` seconds. Closing the
session writes any edit still waiting.
"""

from __future__ import annotations

from dataclasses import replace

from .autosave import Debouncer
from .models import DEFAULT_TITLE, Entry, utcnow
from .store import JournalStore


class EntrySession:
    """Holds the draft title/content of one entry and autosaves it."""

    def __init__(self, store: JournalStore, entry: Entry, delay: float | None = None):
        self.store = store
        self.entry = entry
        self.title = entry.title
        self.content = entry.content
        self._dirty = False
        self._debouncer = Debouncer(store.config.autosave_delay if delay is None else delay, self.save)

    @property
    def dirty(self) -> bool:
        """Whether there are edits that have not been saved yet."""
        return self._dirty

    def edit(self, *, title: str | None = None, content: str | None = None) -> None:
        """Apply an edit to the draft and restart the autosave timer."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
        self._dirty = True
        self._debouncer.schedule()

    async def save(self) -> Entry:
        """Write the draft through the store now.

        A blank title is saved as "Untitled" and ``updated_at`` is bumped.
        The store's copy (with recomputed sentiment) becomes the session's entry.
        """
        current = self.store.get_entry(self.entry.id) or self.entry
        updated = replace(
            current,
            title=self.title or DEFAULT_TITLE,
            content=self.content,
            updated_at=utcnow(),
        )
        self._dirty = False
        await self.store.save_entry(updated)
        self.entry = self.store.get_entry(updated.id) or updated
        return self.entry

    async def close(self) -> None:
        """Flush a pending autosave, if any."""
        if self._dirty:
            await self._debouncer.flush()
        else:
            self._debouncer.cancel()
