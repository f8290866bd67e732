"""Tests for daybook.journal.migrations."""

import copy

from daybook.journal.migrations import CURRENT_SCHEMA_VERSION, Collections, migrate


def _legacy():
    return Collections(
        entries=[{"id": "1", "title": "Old", "content": "", "createdAt": "2024-01-01T00:00:00Z"}],
        folders=[{"id": "f1", "name": "Work", "createdAt": "2024-01-01T00:00:00Z"}],
        categories=[{"id": "c1", "name": "Health"}, {"id": "c2", "name": "Fun", "color": "#123456"}],
    )


def test_legacy_data_gets_every_field():
    data, version = migrate(_legacy(), 0, palette=["#AAAAAA", "#BBBBBB"])
    assert version == CURRENT_SCHEMA_VERSION
    entry = data.entries[0]
    assert entry["folderId"] is None
    assert entry["sentiment"] is None
    assert entry["tags"] == []
    assert entry["category"] is None
    assert data.categories[0]["color"] == "#AAAAAA"
    assert data.categories[1]["color"] == "#123456"


def test_existing_values_preserved():
    data = Collections(entries=[{"id": "1", "folderId": "f1", "sentiment": 0.5, "tags": ["Work", "work", " "]}])
    data, _ = migrate(data, 0)
    entry = data.entries[0]
    assert entry["folderId"] == "f1"
    assert entry["sentiment"] == 0.5
    assert entry["tags"] == ["work"]


def test_non_list_tags_reset():
    data, _ = migrate(Collections(entries=[{"id": "1", "tags": "work"}]), 2)
    assert data.entries[0]["tags"] == []


def test_current_version_is_noop():
    legacy = _legacy()
    data, version = migrate(legacy, CURRENT_SCHEMA_VERSION)
    assert version == CURRENT_SCHEMA_VERSION
    assert "folderId" not in data.entries[0]


def test_partial_migration_runs_only_newer_steps():
    data, version = migrate(Collections(entries=[{"id": "1"}]), 2)
    assert version == 3
    assert "folderId" not in data.entries[0]
    assert data.entries[0]["tags"] == []


def test_future_version_left_alone():
    data, version = migrate(Collections(entries=[{"id": "1"}]), 99)
    assert version == 99
    assert data.entries == [{"id": "1"}]


def test_idempotent():
    once, _ = migrate(_legacy(), 0)
    twice, _ = migrate(copy.deepcopy(once), 0)
    assert twice == once
