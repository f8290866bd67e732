"""Tests for daybook.journal.models."""

from datetime import datetime, timezone

import pytest

from daybook.journal.models import Category, Entry, Folder, normalize_tag, normalize_tags


class TestEntry:
    def test_new_defaults(self):
        entry = Entry.new()
        assert entry.title == "Untitled"
        assert entry.content == ""
        assert entry.created_at == entry.updated_at
        assert entry.created_at.tzinfo is not None
        assert entry.folder_id is None
        assert entry.tags == []
        assert entry.sentiment is None

    def test_new_ids_are_unique(self):
        assert len({Entry.new().id for _ in range(50)}) == 50

    def test_empty_id_raises(self):
        with pytest.raises(ValueError, match="non-empty string"):
            Entry(id="")

    def test_tags_normalized_on_create(self):
        entry = Entry(id="1", tags=["Work", " work ", "", "   ", "Travel"])
        assert entry.tags == ["work", "travel"]

    def test_text_joins_title_and_content(self):
        assert Entry(id="1", title="Day", content="was fine").text == "Day was fine"

    def test_to_dict_omits_unset_optionals(self):
        data = Entry(id="1", title="t", content="c").to_dict()
        assert data["id"] == "1"
        assert "folderId" not in data
        assert "category" not in data
        assert "sentiment" not in data
        assert data["tags"] == []

    def test_dict_roundtrip(self):
        entry = Entry(
            id="abc",
            title="Trip",
            content="Went to the coast",
            created_at=datetime(2024, 1, 5, 9, 30, tzinfo=timezone.utc),
            updated_at=datetime(2024, 1, 6, 10, 0, tzinfo=timezone.utc),
            folder_id="f1",
            tags=["travel"],
            category="c1",
            sentiment=0.5,
        )
        assert Entry.from_dict(entry.to_dict()) == entry

    def test_from_dict_javascript_timestamps(self):
        entry = Entry.from_dict(
            {
                "id": "1704447000000",
                "title": "Old",
                "content": "",
                "createdAt": "2024-01-05T09:30:00.000Z",
                "updatedAt": "2024-01-05T09:31:00.000Z",
            }
        )
        assert entry.created_at == datetime(2024, 1, 5, 9, 30, tzinfo=timezone.utc)
        assert entry.folder_id is None
        assert entry.tags == []

    def test_from_dict_missing_updated_at_falls_back_to_created(self):
        entry = Entry.from_dict({"id": "1", "createdAt": "2024-01-05"})
        assert entry.updated_at == entry.created_at == datetime(2024, 1, 5)

    def test_repr_truncates_title(self):
        assert "..." in repr(Entry(id="1", title="x" * 100))


class TestFolderAndCategory:
    def test_folder_roundtrip(self):
        folder = Folder.new("Work")
        assert Folder.from_dict(folder.to_dict()) == folder

    def test_folder_without_id_raises(self):
        with pytest.raises(ValueError):
            Folder.from_dict({"name": "nameless"})

    def test_category_roundtrip(self):
        category = Category.new("Health", "#10B981")
        data = category.to_dict()
        assert data["color"] == "#10B981"
        assert Category.from_dict(data) == category

    def test_category_without_id_raises(self):
        with pytest.raises(ValueError):
            Category.from_dict({"name": "x", "color": "#000"})


class TestTagNormalization:
    def test_normalize_tag(self):
        assert normalize_tag("  Gratitude ") == "gratitude"

    def test_normalize_tags_skips_non_strings(self):
        assert normalize_tags(["a", 3, None, "A", "b"]) == ["a", "b"]

    def test_normalize_tags_none(self):
        assert normalize_tags(None) == []
