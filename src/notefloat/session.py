"""Note session: open buffers, current category, and the edit triggers.

This is the editor-independent half of notefloat. The TUI (and anything
else that edits notes) calls into a ``NoteSession``: ``open``/``toggle``
when a note is shown, ``edit`` on every text change, ``close`` when the
note loses focus, and ``shutdown`` on exit.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from notefloat.autosave import Debouncer
from notefloat.notes import NoteBuffer, NoteStore, category_title
from notefloat.summarizer import Summary, summarize

logger = logging.getLogger(__name__)

SIDEBAR_HEADER = "NoteFloat Categories"


class NoteSession:
    """Tracks open note buffers and persists them through a NoteStore."""

    def __init__(
        self,
        store: NoteStore,
        categories: list[str],
        default_category: str | None = None,
        auto_save: bool = True,
        debounce_ms: int = 1000,
        cfg: dict[str, Any] | None = None,
    ):
        self.store = store
        self.categories = list(categories)
        self.current_category = default_category or (self.categories[0] if self.categories else "quick")
        self.window_open = False
        self.auto_save = auto_save
        self.cfg = cfg or {}
        self._buffers: dict[str, NoteBuffer] = {}
        self._lock = threading.RLock()
        self._debouncer = Debouncer(debounce_ms / 1000.0, self.save)

    @classmethod
    def from_config(cls, cfg: dict[str, Any]) -> "NoteSession":
        return cls(
            store=NoteStore(cfg["storage_path"]),
            categories=cfg["categories"],
            default_category=cfg.get("default_category"),
            auto_save=cfg.get("auto_save", True),
            debounce_ms=cfg.get("debounce_ms", 1000),
            cfg=cfg,
        )

    # -- buffers ---------------------------------------------------------

    def buffer(self, category: str) -> NoteBuffer | None:
        with self._lock:
            return self._buffers.get(category)

    def _ensure_buffer(self, category: str) -> NoteBuffer:
        with self._lock:
            buf = self._buffers.get(category)
            if buf is None:
                buf = NoteBuffer(category=category, text=self.store.load(category))
                self._buffers[category] = buf
                logger.debug("Loaded note buffer for %s", category)
            return buf

    # -- window triggers -------------------------------------------------

    def open(self, category: str | None = None) -> NoteBuffer:
        """Show *category* (default: the current one), loading it on first use."""
        category = category or self.current_category
        self.store.path_for(category)  # rejects unusable names early
        with self._lock:
            self.store.ensure_storage()
            buf = self._ensure_buffer(category)
            self.current_category = category
            self.window_open = True
        return buf

    def close(self) -> None:
        """The note lost focus: save it and hide it."""
        with self._lock:
            if self.current_category in self._buffers:
                self.save(self.current_category)
            self.window_open = False

    def toggle(self, category: str | None = None) -> bool:
        """Hide the note if it is showing, otherwise open it. Return the new state."""
        category = category or self.current_category
        with self._lock:
            if self.window_open and category == self.current_category:
                self.close()
            else:
                if self.window_open and self.current_category in self._buffers:
                    self.save(self.current_category)
                self.open(category)
            return self.window_open

    def change_category(self, category: str) -> NoteBuffer:
        if category not in self.categories:
            logger.error("Invalid note category: %s", category)
            raise ValueError(f"Invalid note category: {category}")
        with self._lock:
            if self.window_open:
                self.save(self.current_category)
            return self.open(category)

    # -- edits and saves -------------------------------------------------

    def edit(self, category: str, text: str) -> None:
        """Replace the buffer text and schedule a debounced save."""
        with self._lock:
            buf = self._ensure_buffer(category)
            if buf.text == text:
                return
            buf.text = text
            buf.dirty = True
        if self.auto_save:
            self._debouncer.trigger(category)

    def save(self, category: str) -> Path | None:
        """Write one buffer to disk. Categories without a buffer are ignored."""
        with self._lock:
            buf = self._buffers.get(category)
            if buf is None:
                return None
            path = self.store.save(category, buf.text)
            buf.dirty = False
            return path

    def save_all(self) -> list[Path]:
        with self._lock:
            paths = [self.save(category) for category in list(self._buffers)]
        return [p for p in paths if p is not None]

    def has_pending_save(self, category: str) -> bool:
        return self._debouncer.pending(category)

    def shutdown(self) -> list[Path]:
        """Cancel pending autosaves and write every buffer."""
        self._debouncer.cancel_all()
        paths = self.save_all()
        logger.info("Saved %d note(s) on shutdown", len(paths))
        return paths

    # -- listing ---------------------------------------------------------

    def list_categories(self) -> list[str]:
        return [category_title(c) for c in self.categories]

    def sidebar_lines(self) -> list[str]:
        lines = [SIDEBAR_HEADER, "=" * len(SIDEBAR_HEADER)]
        for category in self.categories:
            prefix = ">" if category == self.current_category and self.window_open else " "
            lines.append(f"{prefix} {category_title(category)}")
        return lines

    def category_from_sidebar_line(self, line: str) -> str | None:
        if line[:2] in ("> ", "  "):
            line = line[2:]
        category = line.strip().lower()
        return category if category in self.categories else None

    # -- summary ---------------------------------------------------------

    def summarize(self, category: str | None = None) -> Summary:
        if category is None:
            if not self.window_open:
                raise RuntimeError("No note open to summarize")
            category = self.current_category
        with self._lock:
            buf = self._buffers.get(category)
            text = buf.text if buf is not None else self.store.load(category)
        return summarize(category, text, self.cfg)
