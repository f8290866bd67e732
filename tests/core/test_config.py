"""Tests for daybook.core.config."""

import json
import os

import yaml

from daybook.core.config import Config


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.get("paths.data_dir").endswith(".daybook-data")
        assert config.get("journal.autosave_delay") == 1.0
        assert config.get("journal.sentiment_enabled") is True
        assert config.get("logging.level") == "WARNING"

    def test_custom_data_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("paths.data_dir") == tmp_dir
        assert config.get("paths.storage_dir") == os.path.join(tmp_dir, "storage")
        assert config.get_storage_dir() == os.path.join(tmp_dir, "storage")

    def test_custom_env_prefix(self, monkeypatch, tmp_dir):
        monkeypatch.setenv("MYJOURNAL_JOURNAL__AUTOSAVE_DELAY", "3")
        config = Config(env_prefix="MYJOURNAL_", data_dir=tmp_dir)
        assert config.get("journal.autosave_delay") == "3"

    def test_yaml_config_file(self, tmp_config_file, tmp_dir):
        config = Config(config_file=tmp_config_file)
        assert config.get("journal.autosave_delay") == 0.5
        assert config.get("journal.sentiment_enabled") is False
        assert config.get_storage_dir() == os.path.join(tmp_dir, "data", "storage")

    def test_json_config_file(self, tmp_dir):
        path = os.path.join(tmp_dir, "config.json")
        with open(path, "w") as f:
            json.dump({"logging": {"level": "DEBUG"}}, f)
        config = Config(config_file=path, data_dir=tmp_dir)
        assert config.get("logging.level") == "DEBUG"
        # Untouched defaults survive the merge
        assert config.get("logging.file") == ""

    def test_missing_config_file_uses_defaults(self, tmp_dir):
        config = Config(config_file=os.path.join(tmp_dir, "nope.yaml"), data_dir=tmp_dir)
        assert config.get("journal.autosave_delay") == 1.0

    def test_env_overrides_file(self, tmp_dir, monkeypatch):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"journal": {"sentiment_enabled": True}}, f)

        monkeypatch.setenv("DAYBOOK_JOURNAL__SENTIMENT_ENABLED", "false")
        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("journal.sentiment_enabled") == "false"

    def test_get_missing_key(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_get_data_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get_data_dir() == tmp_dir

    def test_ensure_directories(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.ensure_directories()
        assert os.path.isdir(os.path.join(tmp_dir, "storage"))
        assert os.path.isdir(os.path.join(tmp_dir, "logs"))

    def test_extra_defaults(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"journal": {"category_palette": ["#000000"]}})
        assert config.get("journal.category_palette") == ["#000000"]
        assert config.get("journal.autosave_delay") == 1.0
