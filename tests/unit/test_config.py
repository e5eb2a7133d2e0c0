from __future__ import annotations

import json
import logging
from pathlib import Path

from extrestore.config import Config
from extrestore.config_store import ConfigStore


def test_config_store_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    payload = {"restore": {"enabled": False}}
    ConfigStore.save(str(path), payload)
    assert ConfigStore.load(str(path)) == payload


def test_config_store_load_missing(tmp_path: Path) -> None:
    assert ConfigStore.load(str(tmp_path / "missing.json")) is None


def test_config_store_load_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]")
    assert ConfigStore.load(str(path)) is None


def test_config_store_load_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert ConfigStore.load(str(path)) is None


def test_config_creates_default_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    config = Config(str(path))
    assert path.exists()
    assert json.loads(path.read_text()) == config.config
    assert config.get_header_size() == 512
    assert config.get_database_path() is None
    assert config.is_restore_enabled() is True
    assert config.allow_overwrite() is False


def test_config_default_path_is_under_home(isolated_home: Path) -> None:
    config = Config()
    assert Path(config.config_path) == isolated_home / ".extrestore" / "config.json"
    assert Path(config.config_path).exists()


def test_config_merges_user_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "database": {"path": "~/sigs.db"},
                "matching": {"header_size": 64},
                "custom": {"flag": True},
            }
        )
    )
    config = Config(str(path))
    assert config.get_header_size() == 64
    assert config.get_database_path() == str(Path("~/sigs.db").expanduser())
    assert config.get("database", "encoding") == "utf-8"
    assert config.get("custom", "flag") is True
    assert "custom" in config


def test_config_defaults_are_not_shared(tmp_path: Path) -> None:
    first = Config(str(tmp_path / "a.json"))
    first.set("restore", "enabled", False)
    second = Config(str(tmp_path / "b.json"))
    assert second.is_restore_enabled() is True
    assert Config.DEFAULT_CONFIG["restore"]["enabled"] is True


def test_config_invalid_header_size_falls_back(tmp_path: Path) -> None:
    config = Config(str(tmp_path / "config.json"))
    config.set("matching", "header_size", "lots")
    assert config.get_header_size() == 512
    config.set("matching", "header_size", -5)
    assert config.get_header_size() == 512


def test_config_log_level(tmp_path: Path) -> None:
    config = Config(str(tmp_path / "config.json"))
    assert config.get_log_level() == logging.WARNING
    config.set("logging", "level", "debug")
    assert config.get_log_level() == logging.DEBUG
    config.set("logging", "level", "chatty")
    assert config.get_log_level() == logging.WARNING


def test_config_header_size_is_capped(tmp_path: Path) -> None:
    config = Config(str(tmp_path / "config.json"))
    config.set("matching", "header_size", 10**13)
    assert config.get_header_size() == 512
    config.set("matching", "header_size", 513)
    assert config.get_header_size() == 512
