"""Summary output: Markdown with YAML front matter, saving, clipboard."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import yaml

from notefloat.notes import category_title
from notefloat.summarizer import Summary

logger = logging.getLogger(__name__)

SUMMARY_DIRNAME = "summaries"


def build_summary_markdown(summary: Summary, now: datetime | None = None) -> str:
    """Build a Markdown string with YAML front matter for a summary."""
    now = now or datetime.now()

    front_matter: dict = {
        "title": f"{category_title(summary.category)} Note Summary",
        "date": now.isoformat(timespec="seconds"),
        "category": summary.category,
        "source": summary.source,
    }
    if summary.source == "ai" and summary.model:
        front_matter["model"] = summary.model

    lines = ["---"]
    lines.append(yaml.dump(front_matter, default_flow_style=False, sort_keys=False).strip())
    lines.append("---")
    lines.append("")
    lines.extend(summary.lines)
    lines.append("")
    return "\n".join(lines)


def save_summary(summary: Summary, folder: str | Path, now: datetime | None = None) -> Path:
    """Write *summary* to ``<folder>/summaries/<category>_<timestamp>.md``."""
    now = now or datetime.now()
    out_dir = Path(folder).expanduser() / SUMMARY_DIRNAME
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{summary.category}_{now.strftime('%Y-%m-%d_%H-%M-%S')}.md"
    path.write_text(build_summary_markdown(summary, now), encoding="utf-8")
    logger.info("Summary saved: %s", path)
    return path


def copy_to_clipboard(text: str) -> bool:
    """Copy text to system clipboard. Returns True on success."""
    try:
        import pyperclip
        pyperclip.copy(text)
        logger.info("Summary copied to clipboard.")
        return True
    except Exception as exc:
        logger.warning("Could not copy to clipboard: %s", exc)
        return False
