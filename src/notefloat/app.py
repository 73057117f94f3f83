"""Textual TUI for editing a note category.

Layout:
┌──────────────────────┐ ╭──── 📝 Todo Notes ────╮
│ NoteFloat Categories │ │ # Todo Notes          │
│ ==================== │ │                       │
│ > Todo               │ │ - buy milk            │
│   Code               │ │                       │
└──────────────────────┘ ╰───────────────────────╯
  ^s Save  ^b Sidebar  ^l Categories  ^k Summarize  ^g Git sync  ^q Quit
"""

from __future__ import annotations

import logging
from typing import Any

from textual import work
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, OptionList, Static, TextArea
from textual.widgets.option_list import Option

from notefloat.notes import NoteBuffer, category_title
from notefloat.output import copy_to_clipboard
from notefloat.screens.base import NOTE_BINDINGS
from notefloat.screens.modals import CategorySelectScreen, SummaryScreen
from notefloat.session import NoteSession
from notefloat.snapshot import SyncScheduler
from notefloat.summarizer import Summary

logger = logging.getLogger(__name__)


class NoteFloatApp(App[None]):
    """Single-note editor with a category sidebar."""

    CSS = """
    #main {
        height: 1fr;
        align: center middle;
    }

    #sidebar {
        height: 100%;
        border: round $accent;
        border-title-align: center;
        padding: 0 1;
    }

    #sidebar-list {
        height: 1fr;
        border: none;
    }

    #note-panel {
        border: round $accent;
        border-title-align: center;
    }

    #note-editor {
        height: 1fr;
        border: none;
    }

    #summary-container, #category-select-container {
        align: center middle;
        width: 60;
        height: auto;
        max-height: 20;
        background: $surface;
        border: round $accent;
        padding: 1 2;
    }

    #summary-title, #category-select-title {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    SummaryScreen, CategorySelectScreen {
        align: center middle;
    }
    """

    BINDINGS = NOTE_BINDINGS

    def __init__(
        self,
        session: NoteSession,
        cfg: dict[str, Any],
        category: str | None = None,
        scheduler: SyncScheduler | None = None,
    ):
        super().__init__()
        self.session = session
        self.cfg = cfg
        self.initial_category = category
        self.scheduler = scheduler or SyncScheduler(session, cfg)
        self._left = False

    def compose(self) -> ComposeResult:
        with Horizontal(id="main"):
            with Vertical(id="sidebar"):
                yield Static("", id="sidebar-header")
                yield OptionList(id="sidebar-list")
            with Vertical(id="note-panel"):
                yield TextArea(id="note-editor")
        yield Footer()

    def on_mount(self) -> None:
        pct = int(float(self.cfg.get("size", 0.6)) * 100)
        panel = self.query_one("#note-panel", Vertical)
        panel.styles.width = f"{pct}%"
        panel.styles.height = f"{pct}%"

        sidebar = self.query_one("#sidebar", Vertical)
        sidebar.styles.width = int(self.cfg.get("sidebar_width", 30))
        sidebar.border_title = "📒 Notes"
        sidebar.display = False

        self._show(self.session.open(self.initial_category))
        self.scheduler.start()

    def _show(self, buf: NoteBuffer) -> None:
        panel = self.query_one("#note-panel", Vertical)
        panel.border_title = f"📝 {category_title(buf.category)} Notes"
        editor = self.query_one("#note-editor", TextArea)
        editor.load_text(buf.text)
        editor.focus()
        self._refresh_sidebar()

    def _refresh_sidebar(self) -> None:
        lines = self.session.sidebar_lines()
        self.query_one("#sidebar-header", Static).update("\n".join(lines[:2]))
        option_list = self.query_one("#sidebar-list", OptionList)
        option_list.clear_options()
        option_list.add_options(
            Option(line, id=category)
            for line, category in zip(lines[2:], self.session.categories)
        )

    def _change(self, category: str) -> None:
        try:
            buf = self.session.change_category(category)
        except ValueError as exc:
            self.notify(str(exc), severity="error")
            return
        self._show(buf)

    # -- events ----------------------------------------------------------

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.session.edit(self.session.current_category, event.text_area.text)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        if event.option_list.id != "sidebar-list":
            return
        category = event.option.id
        if category:
            self._change(category)

    # -- actions ---------------------------------------------------------

    def action_save(self) -> None:
        path = self.session.save(self.session.current_category)
        if path is not None:
            self.notify(f"Saved {path.name}")

    def action_toggle_sidebar(self) -> None:
        sidebar = self.query_one("#sidebar", Vertical)
        sidebar.display = not sidebar.display
        if sidebar.display:
            self._refresh_sidebar()
            self.query_one("#sidebar-list", OptionList).focus()
        else:
            self.query_one("#note-editor", TextArea).focus()

    def _modal_open(self) -> bool:
        return len(self.screen_stack) > 1

    def action_select_category(self) -> None:
        if self._modal_open():
            return
        self.push_screen(
            CategorySelectScreen(self.session.categories, self.session.current_category),
            self._on_category_selected,
        )

    def _on_category_selected(self, category: str | None) -> None:
        if category:
            self._change(category)

    def action_summarize(self) -> None:
        if self._modal_open():
            return
        if not self.session.window_open:
            self.notify("No note open to summarize", severity="error")
            return
        screen = SummaryScreen()
        self.push_screen(screen)
        self._run_summary(screen)

    @work(thread=True, exclusive=True, group="summary")
    def _run_summary(self, screen: SummaryScreen) -> None:
        summary = self.session.summarize()
        self.call_from_thread(self._summary_ready, screen, summary)

    def _summary_ready(self, screen: SummaryScreen, summary: Summary) -> None:
        screen.show(summary)
        if summary.ok and self.cfg.get("auto_clipboard", False):
            if copy_to_clipboard(summary.text):
                self.notify("Summary copied to clipboard")

    def action_git_sync(self) -> None:
        self.notify("Syncing notes...")
        self._run_git_sync()

    @work(thread=True, exclusive=True, group="git")
    def _run_git_sync(self) -> None:
        ok, msg = self.scheduler.sync_now()
        self.call_from_thread(self.notify, msg, severity="information" if ok else "error")

    def action_leave(self) -> None:
        """Save everything, stop the timers, and exit."""
        if not self._left:
            self._left = True
            self.scheduler.stop()
            self.session.close()
            self.session.shutdown()
        self.exit(None)

    async def action_quit(self) -> None:
        self.action_leave()
