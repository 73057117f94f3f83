"""Tests for environment checks."""

from pathlib import Path
from unittest.mock import patch

from notefloat import platform_setup


def test_check_storage_creates_folder(tmp_path: Path):
    ok, msg = platform_setup.check_storage(tmp_path / "notes")
    assert ok
    assert (tmp_path / "notes").is_dir()
    assert list((tmp_path / "notes").iterdir()) == []


def test_check_openai_missing():
    with patch.object(platform_setup.shutil, "which", return_value=None):
        ok, msg = platform_setup.check_openai_cli()
    assert not ok
    assert "fall back" in msg


def test_check_git_missing():
    with patch.object(platform_setup.shutil, "which", return_value=None):
        ok, _ = platform_setup.check_git()
    assert not ok


def test_run_all_checks_names(tmp_path: Path):
    names = [name for name, _, _ in platform_setup.run_all_checks(tmp_path)]
    assert names == ["Storage", "git", "OpenAI CLI"]
