"""Tests for git sync helpers with git calls faked out."""

from pathlib import Path
from unittest.mock import patch

from notefloat import git_sync


class FakeGit:
    """Stand-in for git_sync._run that records commands and scripts exit codes."""

    def __init__(self, repo: bool = True, fail: tuple[str, ...] = ()):
        self.repo = repo
        self.fail = fail
        self.calls: list[list[str]] = []

    def __call__(self, cmd, cwd):
        self.calls.append(cmd)
        sub = cmd[1]
        if sub == "rev-parse":
            return (0, "true", "") if self.repo else (128, "", "fatal: not a git repository")
        if sub in self.fail:
            return 1, "", f"error: {sub} failed"
        if sub == "init":
            self.repo = True
        return 0, "", ""

    def subcommands(self) -> list[str]:
        return [c[1] for c in self.calls]


class TestSync:
    def test_missing_repo(self, tmp_path: Path):
        fake = FakeGit(repo=False)
        with patch.object(git_sync, "_run", fake):
            ok, msg = git_sync.sync(tmp_path, "Auto-sync NoteFloat notes")
        assert ok is False
        assert "Please initialize one manually" in msg
        assert fake.subcommands() == ["rev-parse"]

    def test_add_commit_push(self, tmp_path: Path):
        fake = FakeGit()
        with patch.object(git_sync, "_run", fake):
            ok, msg = git_sync.sync(tmp_path, "Auto-sync NoteFloat notes")
        assert ok is True
        assert msg == "Notes synced to git repository"
        assert fake.subcommands() == ["rev-parse", "add", "commit", "push"]
        assert fake.calls[2] == ["git", "commit", "-m", "Auto-sync NoteFloat notes", "--allow-empty"]

    def test_push_failure(self, tmp_path: Path):
        with patch.object(git_sync, "_run", FakeGit(fail=("push",))):
            ok, msg = git_sync.sync(tmp_path, "m")
        assert ok is False
        assert msg == "Failed to push notes to git repository"

    def test_commit_failure_skips_push(self, tmp_path: Path):
        fake = FakeGit(fail=("commit",))
        with patch.object(git_sync, "_run", fake):
            ok, _ = git_sync.sync(tmp_path, "m")
        assert ok is False
        assert "push" not in fake.subcommands()


class TestInitRepo:
    def test_already_initialized(self, tmp_path: Path):
        fake = FakeGit(repo=True)
        with patch.object(git_sync, "_run", fake):
            ok, msg = git_sync.init_repo(tmp_path)
        assert ok is True
        assert "already initialized" in msg
        assert not (tmp_path / ".gitignore").exists()

    def test_fresh_init_writes_gitignore_and_commits(self, tmp_path: Path):
        fake = FakeGit(repo=False)
        notes = tmp_path / "notes"
        with patch.object(git_sync, "_run", fake):
            ok, msg = git_sync.init_repo(notes)
        assert ok is True
        assert msg == f"Git repository initialized in {notes}"
        assert (notes / ".gitignore").read_text() == "# NoteFloat gitignore\n*.swp\n*.swo\n"
        assert ["git", "commit", "-m", "Initial NoteFloat commit"] in fake.calls

    def test_init_failure(self, tmp_path: Path):
        with patch.object(git_sync, "_run", FakeGit(repo=False, fail=("init",))):
            ok, msg = git_sync.init_repo(tmp_path)
        assert ok is False
        assert msg == "Failed to initialize git repository"

    def test_init_with_remote(self, tmp_path: Path):
        fake = FakeGit(repo=False)
        with patch.object(git_sync, "_run", fake):
            ok, _ = git_sync.init_repo(tmp_path, remote="git@example.com:me/notes.git")
        assert ok is True
        assert ["git", "remote", "add", "origin", "git@example.com:me/notes.git"] in fake.calls

    def test_remote_failure(self, tmp_path: Path):
        with patch.object(git_sync, "_run", FakeGit(fail=("remote",))):
            ok, msg = git_sync.add_remote(tmp_path, "bad")
        assert ok is False
        assert msg == "Failed to add git remote"


def test_is_git_repo_false_for_missing_dir(tmp_path: Path):
    assert git_sync.is_git_repo(tmp_path / "nope") is False


def test_run_reports_missing_binary(tmp_path: Path):
    code, _, err = git_sync._run(["notefloat-no-such-binary"], tmp_path)
    assert code == -1
    assert "not found" in err
