"""
Configuration Manager - Handle diff defaults and limits persistence
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from sidediff.errors import ConfigError
from sidediff.models.compare import DiffOptions

logger = logging.getLogger(__name__)

DEFAULT_MAX_TABLE_CELLS = 25_000_000


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # 1st: environment variable
        config_dir = os.environ.get("SIDEDIFF_CONFIG_DIR")

        # 2nd: ~/.sidediff
        if not config_dir:
            config_dir = os.path.expanduser("~/.sidediff")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("[ConfigManager] Cannot write to %s: %s", config_dir, e)
            self._config_file = None

        # last resort: temp directory
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "sidediff"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.info("[ConfigManager] Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the singleton so the next call re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling gaps with defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file, encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("[ConfigManager] Error loading config: %s", e)
            return config

        if not isinstance(stored, dict):
            logger.warning("[ConfigManager] Ignoring non-object config in %s", self._config_file)
            return config

        for section, values in stored.items():
            if isinstance(values, dict) and isinstance(config.get(section), dict):
                config[section] = {**config[section], **values}
            else:
                config[section] = values
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "options": DiffOptions().model_dump(),
            "limits": {"max_table_cells": DEFAULT_MAX_TABLE_CELLS},
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        # Merge with existing config
        self._config.update(config)

        try:
            self._config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)

    def get_options(self) -> DiffOptions:
        """Default diff options for requests that carry none"""
        return DiffOptions(**self.get("options", {}))

    def get_max_cells(self) -> int | None:
        """Cell budget for one LCS table; None or 0 disables the limit"""
        limit = self.get("limits", {}).get("max_table_cells")
        if not limit:
            return None
        try:
            return int(limit)
        except (TypeError, ValueError):
            logger.warning(
                "[ConfigManager] Invalid max_table_cells %r, using %d",
                limit,
                DEFAULT_MAX_TABLE_CELLS,
            )
            return DEFAULT_MAX_TABLE_CELLS
