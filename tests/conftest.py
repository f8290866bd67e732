"""Shared test fixtures for daybook."""

import os
import tempfile

import pytest
import pytest_asyncio
from loguru import logger

from daybook.core.storage import MemoryStorage
from daybook.journal import JournalConfig, JournalStore


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
            "storage_dir": os.path.join(tmp_dir, "data", "storage"),
        },
        "journal": {
            "autosave_delay": 0.5,
            "sentiment_enabled": False,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def backend():
    return MemoryStorage()


@pytest_asyncio.fixture
async def store(backend):
    """A loaded JournalStore over an empty in-memory backend."""
    journal = JournalStore(backend, JournalConfig(autosave_delay=0.01))
    await journal.load()
    return journal
