"""Note store: one markdown file per category.

Each category maps to ``<storage>/<category>.md``. A category that has
never been saved loads as a fresh heading (``# Todo Notes``) followed by
two empty lines.

Buffer text is the editor view of a note: lines joined by ``\\n`` with no
trailing terminator. On disk every line ends with a newline.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


def category_title(category: str) -> str:
    """Upper-case the first character only: ``todo`` -> ``Todo``."""
    return category[:1].upper() + category[1:]


def default_note(category: str) -> str:
    return f"# {category_title(category)} Notes\n\n"


@dataclass
class NoteBuffer:
    """In-memory copy of one category's note."""

    category: str
    text: str
    dirty: bool = False

    @property
    def lines(self) -> list[str]:
        return self.text.split("\n")


class NoteStore:
    """Reads and writes category notes under a single storage folder."""

    def __init__(self, storage_path: str | Path):
        self.storage_path = Path(storage_path).expanduser()

    def ensure_storage(self) -> Path:
        self.storage_path.mkdir(parents=True, exist_ok=True)
        return self.storage_path

    def path_for(self, category: str) -> Path:
        if not category or "/" in category or "\\" in category or category.startswith("."):
            raise ValueError(f"Invalid note category: {category!r}")
        return self.storage_path / f"{category}{NOTE_SUFFIX}"

    def exists(self, category: str) -> bool:
        return self.path_for(category).is_file()

    def load(self, category: str) -> str:
        """Return the saved note, or the default heading if none exists yet."""
        path = self.path_for(category)
        if not path.is_file():
            return default_note(category)
        text = path.read_text(encoding="utf-8")
        return text[:-1] if text.endswith("\n") else text

    def save(self, category: str, text: str) -> Path:
        """Write *text* so that every line is newline-terminated."""
        path = self.path_for(category)
        self.ensure_storage()
        path.write_text(text + "\n", encoding="utf-8")
        logger.debug("Saved %s (%d lines)", path, text.count("\n") + 1)
        return path

    def list_files(self) -> list[Path]:
        if not self.storage_path.is_dir():
            return []
        return sorted(self.storage_path.glob(f"*{NOTE_SUFFIX}"))
