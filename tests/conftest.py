"""Pytest configuration shared across the suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from sidediff.services.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config singleton at a fresh directory for every test"""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("SIDEDIFF_CONFIG_DIR", str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()
