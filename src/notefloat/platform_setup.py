"""Environment checks: git, the OpenAI CLI, and the notes folder."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def _run(cmd: list[str]) -> tuple[int, str]:
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=10)
        return result.returncode, result.stdout.strip()
    except FileNotFoundError:
        return -1, ""
    except subprocess.TimeoutExpired:
        return -2, ""


def check_git() -> tuple[bool, str]:
    """Check if git is installed (needed for git sync)."""
    if not shutil.which("git"):
        return False, (
            "git not found. Install it with your package manager, e.g.\n"
            "  brew install git  /  apt install git\n"
            "Needed for git-init, git-sync and the git_sync timer."
        )
    code, version = _run(["git", "--version"])
    if code != 0:
        return False, "git is on PATH but 'git --version' failed."
    return True, version or "git is available."


def check_openai_cli() -> tuple[bool, str]:
    """Check if the OpenAI CLI is installed (optional, for AI summaries)."""
    if shutil.which("openai"):
        return True, "OpenAI CLI is available."
    return False, (
        "OpenAI CLI not found. Install it with:\n"
        "  pip install openai\n"
        "Without it, summaries fall back to line/word/character counts."
    )


def check_storage(storage_path: str | Path) -> tuple[bool, str]:
    """Check that the notes folder exists (creating it) and is writable."""
    path = Path(storage_path).expanduser()
    try:
        path.mkdir(parents=True, exist_ok=True)
        probe = path / ".notefloat-write-test"
        probe.write_text("", encoding="utf-8")
        probe.unlink()
    except OSError as exc:
        logger.error("Notes folder %s is not writable: %s", path, exc)
        return False, f"Notes folder {path} is not writable: {exc}"
    return True, f"Notes folder: {path}"


def run_all_checks(storage_path: str | Path) -> list[tuple[str, bool, str]]:
    """Run environment checks. Returns list of (check_name, passed, message)."""
    results: list[tuple[str, bool, str]] = []

    ok, msg = check_storage(storage_path)
    results.append(("Storage", ok, msg))

    ok, msg = check_git()
    results.append(("git", ok, msg))

    ok, msg = check_openai_cli()
    results.append(("OpenAI CLI", ok, msg))

    return results
