"""Tests for daybook.journal.editor."""

import asyncio
from datetime import timedelta

import pytest

from daybook.journal import EntrySession
from daybook.journal.models import Entry


@pytest.fixture
def stale_entry():
    entry = Entry.new(title="Draft", content="start")
    entry.updated_at = entry.updated_at - timedelta(days=1)
    return entry


class TestEntrySession:
    @pytest.mark.asyncio
    async def test_autosaves_after_quiet_period(self, store, stale_entry):
        await store.save_entry(stale_entry)
        session = EntrySession(store, stale_entry)

        session.edit(content="I feel grateful")
        assert session.dirty
        assert store.get_entry(stale_entry.id).content == "start"

        await asyncio.sleep(0.05)
        saved = store.get_entry(stale_entry.id)
        assert saved.content == "I feel grateful"
        assert saved.sentiment == 1.0
        assert saved.updated_at > stale_entry.updated_at
        assert not session.dirty

    @pytest.mark.asyncio
    async def test_rapid_edits_save_final_state(self, store, stale_entry):
        await store.save_entry(stale_entry)
        session = EntrySession(store, stale_entry, delay=0.05)
        for text in ("a", "ab", "abc"):
            session.edit(content=text)
        await asyncio.sleep(0.15)
        assert store.get_entry(stale_entry.id).content == "abc"

    @pytest.mark.asyncio
    async def test_blank_title_saved_as_untitled(self, store, stale_entry):
        await store.save_entry(stale_entry)
        session = EntrySession(store, stale_entry)
        session.edit(title="")
        await session.close()
        assert store.get_entry(stale_entry.id).title == "Untitled"

    @pytest.mark.asyncio
    async def test_close_flushes_pending_edit(self, store, stale_entry):
        await store.save_entry(stale_entry)
        session = EntrySession(store, stale_entry, delay=10)
        session.edit(title="Final")
        await session.close()
        assert store.get_entry(stale_entry.id).title == "Final"
        assert session.entry.title == "Final"

    @pytest.mark.asyncio
    async def test_close_without_edits_writes_nothing(self, store, stale_entry):
        await store.save_entry(stale_entry)
        session = EntrySession(store, stale_entry)
        await session.close()
        assert store.get_entry(stale_entry.id).updated_at == stale_entry.updated_at

    @pytest.mark.asyncio
    async def test_save_keeps_store_side_changes(self, store, stale_entry):
        await store.save_entry(stale_entry)
        session = EntrySession(store, stale_entry, delay=10)
        await store.add_tag_to_entry(stale_entry.id, "work")
        session.edit(content="edited")
        await session.close()
        saved = store.get_entry(stale_entry.id)
        assert saved.tags == ["work"]
        assert saved.content == "edited"

    @pytest.mark.asyncio
    async def test_save_creates_missing_entry(self, store):
        entry = Entry.new(title="Brand new")
        session = EntrySession(store, entry)
        session.edit(content="body")
        await session.save()
        assert store.get_entry(entry.id).content == "body"
        assert store.entries[0].id == entry.id
