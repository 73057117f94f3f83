"""Periodic snapshots and git sync on background timers."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from notefloat import git_sync
from notefloat.session import NoteSession

logger = logging.getLogger(__name__)


class RepeatingTimer(threading.Thread):
    """Call *function* every *interval* seconds until ``stop()``.

    The first call happens one interval after ``start()``. A failing call is
    logged and the timer keeps running.
    """

    def __init__(self, interval: float, function: Callable[[], object], name: str = "notefloat-timer"):
        super().__init__(name=name, daemon=True)
        self.interval = interval
        self.function = function
        self._stopped = threading.Event()

    def run(self) -> None:
        while not self._stopped.wait(self.interval):
            try:
                self.function()
            except Exception:
                logger.exception("%s run failed", self.name)

    def stop(self) -> None:
        self._stopped.set()

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()


class SyncScheduler:
    """Owns the periodic-save and git-sync timers for a session."""

    def __init__(self, session: NoteSession, cfg: dict[str, Any]):
        self.session = session
        self.cfg = cfg
        self.snapshot_timer: RepeatingTimer | None = None
        self.git_timer: RepeatingTimer | None = None

    @property
    def storage_path(self):
        return self.session.store.storage_path

    def snapshot(self) -> None:
        paths = self.session.save_all()
        if paths:
            logger.debug("Periodic save wrote %d note(s)", len(paths))

    def sync_now(self) -> tuple[bool, str]:
        """Flush every open note, then commit and push the notes folder."""
        self.session.save_all()
        return git_sync.sync(
            self.storage_path,
            self.cfg.get("git_sync_message", "Auto-sync NoteFloat notes"),
        )

    def start(self) -> None:
        if self.cfg.get("periodic_save", True) and self.snapshot_timer is None:
            interval = self.cfg.get("periodic_save_interval", 60000) / 1000.0
            self.snapshot_timer = RepeatingTimer(interval, self.snapshot, name="notefloat-snapshot")
            self.snapshot_timer.start()
            logger.info("Periodic save every %.0fs", interval)

        if self.cfg.get("git_sync", False):
            self.start_git_sync()

    def start_git_sync(self) -> bool:
        """Start the git timer. Return False if git is unavailable."""
        if self.git_timer is not None:
            return True
        if not git_sync.git_available():
            logger.warning("Git not found in PATH. Git sync disabled.")
            return False
        interval = self.cfg.get("git_sync_interval", 300000) / 1000.0
        self.git_timer = RepeatingTimer(interval, self.sync_now, name="notefloat-git-sync")
        self.git_timer.start()
        logger.info("Git sync every %.0fs", interval)
        return True

    def stop(self) -> None:
        for timer in (self.snapshot_timer, self.git_timer):
            if timer is not None:
                timer.stop()
        self.snapshot_timer = None
        self.git_timer = None
