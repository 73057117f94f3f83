"""Keep config and log files inside each test's tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from notefloat import config, logging_setup


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path: Path) -> Path:
    config_dir = tmp_path / "config"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_PATH", config_dir / "config.json")
    monkeypatch.setattr(logging_setup, "LOG_DIR", config_dir)
    monkeypatch.setattr(logging_setup, "LOG_FILE", config_dir / "notefloat.log")
    return tmp_path
