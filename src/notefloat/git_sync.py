"""Git sync for the notes folder: init, add/commit/push, remote setup.

Every command runs with ``cwd`` set to the storage folder and an
argument list, never through a shell. Results come back as
``(ok, message)`` so callers can show the message at the right level.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

GITIGNORE_CONTENT = "# NoteFloat gitignore\n*.swp\n*.swo\n"
INITIAL_COMMIT_MESSAGE = "Initial NoteFloat commit"

_GIT_TIMEOUT = 60


def _run(cmd: list[str], cwd: str | Path) -> tuple[int, str, str]:
    try:
        result = subprocess.run(
            cmd, cwd=str(cwd), capture_output=True, text=True, timeout=_GIT_TIMEOUT,
        )
        return result.returncode, result.stdout.strip(), result.stderr.strip()
    except FileNotFoundError:
        return -1, "", f"{cmd[0]} not found"
    except subprocess.TimeoutExpired:
        return -2, "", f"{' '.join(cmd)} timed out"


def git_available() -> bool:
    return shutil.which("git") is not None


def is_git_repo(path: str | Path) -> bool:
    if not Path(path).is_dir():
        return False
    code, out, _ = _run(["git", "rev-parse", "--is-inside-work-tree"], path)
    return code == 0 and "true" in out


def sync(path: str | Path, message: str) -> tuple[bool, str]:
    """Stage everything, commit (empty commits allowed), and push."""
    if not is_git_repo(path):
        msg = "Git repository not found in notes directory. Please initialize one manually."
        logger.warning(msg)
        return False, msg

    code, _, err = _run(["git", "add", "."], path)
    if code != 0:
        logger.error("git add failed in %s: %s", path, err)
        return False, "Failed to stage notes for commit"

    code, _, err = _run(["git", "commit", "-m", message, "--allow-empty"], path)
    if code != 0:
        logger.error("git commit failed in %s: %s", path, err)
        return False, "Failed to commit notes"

    code, _, err = _run(["git", "push"], path)
    if code != 0:
        logger.error("git push failed in %s: %s", path, err)
        return False, "Failed to push notes to git repository"

    logger.info("Notes synced to git repository at %s", path)
    return True, "Notes synced to git repository"


def add_remote(path: str | Path, url: str) -> tuple[bool, str]:
    code, _, err = _run(["git", "remote", "add", "origin", url], path)
    if code != 0:
        logger.error("git remote add failed in %s: %s", path, err)
        return False, "Failed to add git remote"
    logger.info("Git remote origin set to %s", url)
    return True, "Git remote added. Use 'notefloat git-sync' to push changes."


def init_repo(path: str | Path, remote: str | None = None) -> tuple[bool, str]:
    """Initialise a repository in *path* with a .gitignore and a first commit."""
    path = Path(path).expanduser()
    path.mkdir(parents=True, exist_ok=True)

    if is_git_repo(path):
        msg = f"Git repository already initialized in {path}"
        logger.info(msg)
        return True, msg

    code, _, err = _run(["git", "init"], path)
    if code != 0:
        logger.error("git init failed in %s: %s", path, err)
        return False, "Failed to initialize git repository"

    (path / ".gitignore").write_text(GITIGNORE_CONTENT, encoding="utf-8")

    _run(["git", "add", "."], path)
    code, _, err = _run(["git", "commit", "-m", INITIAL_COMMIT_MESSAGE], path)
    if code != 0:
        # A missing user.name/user.email must not block the init itself.
        logger.warning("Initial commit failed in %s: %s", path, err)

    msg = f"Git repository initialized in {path}"
    logger.info(msg)

    if remote:
        ok, remote_msg = add_remote(path, remote)
        if not ok:
            return False, remote_msg
        msg = f"{msg}. {remote_msg}"
    return True, msg
