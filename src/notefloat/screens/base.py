"""Shared bindings for the notefloat TUI."""

from __future__ import annotations

from textual.binding import Binding


NOTE_BINDINGS = [
    Binding("ctrl+s", "save", "Save", key_display="^s"),
    Binding("ctrl+b", "toggle_sidebar", "Sidebar", key_display="^b", priority=True),
    Binding("ctrl+l", "select_category", "Categories", key_display="^l", priority=True),
    Binding("ctrl+k", "summarize", "Summarize", key_display="^k", priority=True),
    Binding("ctrl+g", "git_sync", "Git sync", key_display="^g"),
    Binding("escape", "leave", "Close", show=False),
    Binding("ctrl+q", "leave", "Quit", key_display="^q", priority=True),
]

MODAL_BINDINGS = [
    Binding("escape", "cancel", "Close"),
    Binding("q", "cancel", "Close", show=False),
    Binding("ctrl+c", "cancel", "Close", show=False, priority=True),
]
