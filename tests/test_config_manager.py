from __future__ import annotations

import json
from pathlib import Path

import pytest

from sidediff.errors import ConfigError
from sidediff.models.compare import DiffOptions
from sidediff.services.config_manager import DEFAULT_MAX_TABLE_CELLS, ConfigManager


def test_defaults_when_no_file(isolated_config: Path) -> None:
    manager = ConfigManager.get_instance()

    assert manager.config_file == isolated_config / "config.json"
    assert manager.get_options() == DiffOptions()
    assert manager.get_max_cells() == DEFAULT_MAX_TABLE_CELLS
    assert manager.get("server") == {"host": "127.0.0.1", "port": 8000}


def test_singleton_until_reset() -> None:
    first = ConfigManager.get_instance()
    assert ConfigManager.get_instance() is first
    ConfigManager.reset_instance()
    assert ConfigManager.get_instance() is not first


def test_save_and_reload(isolated_config: Path) -> None:
    manager = ConfigManager.get_instance()
    manager.set("options", {"ignore_case": True, "trim_trailing_whitespace": False, "inline_token_diff": False})

    stored = json.loads((isolated_config / "config.json").read_text(encoding="utf-8"))
    assert stored["options"]["ignore_case"] is True

    ConfigManager.reset_instance()
    reloaded = ConfigManager.get_instance()
    assert reloaded.get_options() == DiffOptions(ignore_case=True, inline_token_diff=False)


def test_partial_file_is_merged_with_defaults(isolated_config: Path) -> None:
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(
        json.dumps({"limits": {"max_table_cells": 0}, "options": {"ignore_case": True}}),
        encoding="utf-8",
    )

    manager = ConfigManager.get_instance()
    assert manager.get_max_cells() is None
    options = manager.get_options()
    assert options.ignore_case is True
    assert options.inline_token_diff is True
    assert manager.get("server")["port"] == 8000


def test_corrupt_file_falls_back_to_defaults(isolated_config: Path) -> None:
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text("{not json", encoding="utf-8")

    assert ConfigManager.get_instance().get_options() == DiffOptions()


def test_get_config_returns_a_copy() -> None:
    manager = ConfigManager.get_instance()
    config = manager.get_config()
    config["options"]["ignore_case"] = True
    assert manager.get_options().ignore_case is False


def test_save_failure_raises_config_error(isolated_config: Path) -> None:
    manager = ConfigManager.get_instance()
    # a directory where the file should be makes the write fail
    (isolated_config / "config.json").mkdir(parents=True)

    with pytest.raises(ConfigError, match="Failed to save config"):
        manager.save_config({"limits": {"max_table_cells": 10}})


def test_unparseable_limit_falls_back_to_default(isolated_config: Path) -> None:
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(
        json.dumps({"limits": {"max_table_cells": "abc"}}),
        encoding="utf-8",
    )

    assert ConfigManager.get_instance().get_max_cells() == DEFAULT_MAX_TABLE_CELLS


def test_numeric_string_limit_is_accepted(isolated_config: Path) -> None:
    isolated_config.mkdir(parents=True, exist_ok=True)
    (isolated_config / "config.json").write_text(
        json.dumps({"limits": {"max_table_cells": "100"}}),
        encoding="utf-8",
    )

    assert ConfigManager.get_instance().get_max_cells() == 100
