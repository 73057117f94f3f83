"""Modal screens: summary viewer and category picker."""

from __future__ import annotations

from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, OptionList, Static
from textual.widgets.option_list import Option

from notefloat.notes import category_title
from notefloat.screens.base import MODAL_BINDINGS
from notefloat.summarizer import Summary


class SummaryScreen(ModalScreen[None]):
    """Show a note summary; any close key dismisses it."""

    BINDINGS = MODAL_BINDINGS

    def __init__(self, summary: Summary | None = None) -> None:
        super().__init__()
        self.summary = summary

    def compose(self):
        body = self.summary.text if self.summary else "Generating summary...\n\nPlease wait..."
        yield Vertical(
            Label(" Summary ", id="summary-title"),
            Static(body, id="summary-body", markup=False),
            id="summary-container",
        )

    def on_mount(self) -> None:
        if self.summary is not None:
            self.query_one("#summary-body", Static).update(self.summary.text)

    def show(self, summary: Summary) -> None:
        self.summary = summary
        if self.is_mounted:
            self.query_one("#summary-body", Static).update(summary.text)

    def action_cancel(self) -> None:
        self.dismiss(None)


class CategorySelectScreen(ModalScreen[str | None]):
    """Pick a note category; dismisses with the lower-case category name."""

    BINDINGS = MODAL_BINDINGS

    def __init__(self, categories: list[str], current: str | None = None) -> None:
        super().__init__()
        self.categories = categories
        self.current = current

    def compose(self):
        options = []
        for category in self.categories:
            marker = " ◄" if category == self.current else ""
            options.append(Option(f"{category_title(category)}{marker}", id=category))
        yield Vertical(
            Label("Select Note Category", id="category-select-title"),
            OptionList(*options, id="category-list"),
            id="category-select-container",
        )

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.dismiss(None)
