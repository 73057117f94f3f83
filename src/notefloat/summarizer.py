"""Note summaries via the OpenAI CLI, with a statistics fallback.

If ``openai`` is on PATH the prompt plus note text is written to a temp
file and handed to ``openai api completions.create``. Otherwise the
summary is a small markdown block of line, word, and character counts.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from typing import Any

from notefloat.notes import category_title

logger = logging.getLogger(__name__)

FAILED_LINES = [
    "Failed to generate summary.",
    "",
    "Make sure OpenAI CLI is configured correctly.",
]


@dataclass
class NoteStats:
    lines: int
    words: int
    chars: int


@dataclass
class Summary:
    category: str
    lines: list[str] = field(default_factory=list)
    source: str = "stats"  # "ai", "stats" or "error"
    model: str | None = None

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    @property
    def ok(self) -> bool:
        return self.source != "error"


def note_stats(text: str) -> NoteStats:
    """Count buffer lines, whitespace-separated words, and characters (no newlines)."""
    lines = text.split("\n")
    return NoteStats(
        lines=len(lines),
        words=sum(len(line.split()) for line in lines),
        chars=sum(len(line) for line in lines),
    )


def openai_available() -> bool:
    return shutil.which("openai") is not None


def stats_summary(category: str, text: str) -> Summary:
    stats = note_stats(text)
    return Summary(
        category=category,
        source="stats",
        lines=[
            f"# {category_title(category)} Note Summary",
            "",
            f"- **Lines**: {stats.lines}",
            f"- **Words**: {stats.words}",
            f"- **Characters**: {stats.chars}",
            "",
            "For AI-powered summarization, install the OpenAI CLI",
        ],
    )


def build_command(prompt_file: str, cfg: dict[str, Any]) -> list[str]:
    return [
        "openai", "api", "completions.create",
        "-m", str(cfg.get("summarize_model", "text-davinci-003")),
        "-f", prompt_file,
        "-t", str(cfg.get("summarize_temperature", 0.7)),
        "-M", str(cfg.get("summarize_max_tokens", 200)),
    ]


def ai_summary(category: str, text: str, cfg: dict[str, Any]) -> Summary:
    """Run the OpenAI CLI on *text*. Never raises for CLI failures."""
    model = str(cfg.get("summarize_model", "text-davinci-003"))
    prompt = cfg.get("summarize_prompt", "")

    fd, prompt_file = tempfile.mkstemp(prefix="notefloat-", suffix=".txt")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(prompt + text)

        cmd = build_command(prompt_file, cfg)
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=cfg.get("summarize_timeout", 120),
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.error("OpenAI CLI failed to run: %s", exc)
            return Summary(category=category, lines=list(FAILED_LINES), source="error", model=model)
    finally:
        try:
            os.remove(prompt_file)
        except OSError:
            logger.warning("Could not remove temp file %s", prompt_file)

    if result.returncode != 0:
        logger.error("OpenAI CLI exited with %s: %s", result.returncode, result.stderr.strip())
        return Summary(category=category, lines=list(FAILED_LINES), source="error", model=model)

    out_lines = [line for line in result.stdout.splitlines() if line != ""]
    if out_lines:
        return Summary(category=category, lines=out_lines, source="ai", model=model)

    err = result.stderr.strip()
    if err:
        logger.error("OpenAI CLI reported: %s", err)
        return Summary(
            category=category,
            lines=["Error generating summary:", "", err],
            source="error",
            model=model,
        )
    return Summary(category=category, lines=list(FAILED_LINES), source="error", model=model)


def summarize(category: str, text: str, cfg: dict[str, Any]) -> Summary:
    if openai_available():
        return ai_summary(category, text, cfg)
    logger.info("OpenAI CLI not found; using statistics summary for %s", category)
    return stats_summary(category, text)
