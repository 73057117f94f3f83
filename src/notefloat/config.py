"""Load, save, and validate the JSON config at ~/.config/notefloat/config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "notefloat"
CONFIG_PATH = CONFIG_DIR / "config.json"

DEFAULTS: dict[str, dict[str, Any]] = {
    "storage_path": {
        "value": "~/.local/share/notefloat",
        "description": "Folder holding one <category>.md file per note category.",
    },
    "categories": {
        "value": ["quick", "todo", "code", "meeting", "project"],
        "description": "Note categories that can be opened.",
    },
    "default_category": {
        "value": "quick",
        "description": "Category opened when none is given. Must be one of categories.",
    },
    "size": {
        "value": 0.6,
        "description": "Note panel size as a fraction of the terminal (0-1].",
    },
    "sidebar_width": {
        "value": 30,
        "description": "Width of the category sidebar in cells.",
    },
    "auto_save": {
        "value": True,
        "description": "Save the note automatically once typing pauses.",
    },
    "debounce_ms": {
        "value": 1000,
        "description": "Idle time in milliseconds before an automatic save.",
    },
    "periodic_save": {
        "value": True,
        "description": "Flush all open notes to disk on a fixed interval.",
    },
    "periodic_save_interval": {
        "value": 60000,
        "description": "Periodic save interval in milliseconds.",
    },
    "git_sync": {
        "value": False,
        "description": "Commit and push the notes folder on a fixed interval.",
    },
    "git_sync_interval": {
        "value": 300000,
        "description": "Git sync interval in milliseconds.",
    },
    "git_sync_message": {
        "value": "Auto-sync NoteFloat notes",
        "description": "Commit message used by git sync.",
    },
    "summarize_prompt": {
        "value": "Summarize the following note in 3 bullet points:\n\n",
        "description": "Prompt prepended to the note text sent to the OpenAI CLI.",
    },
    "summarize_model": {
        "value": "text-davinci-003",
        "description": "Model passed to the OpenAI CLI.",
    },
    "summarize_temperature": {
        "value": 0.7,
        "description": "Sampling temperature passed to the OpenAI CLI.",
    },
    "summarize_max_tokens": {
        "value": 200,
        "description": "Maximum tokens passed to the OpenAI CLI.",
    },
    "summarize_timeout": {
        "value": 120,
        "description": "Seconds to wait for the OpenAI CLI before giving up.",
    },
    "auto_clipboard": {
        "value": False,
        "description": "Copy summaries to the clipboard.",
    },
}

_POSITIVE_KEYS = (
    "debounce_ms",
    "periodic_save_interval",
    "git_sync_interval",
    "sidebar_width",
    "summarize_timeout",
)


def _ensure_dir() -> None:
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)


def load_config() -> dict[str, Any]:
    """Return a flat dict of {key: value} from the config file, merged with defaults."""
    values: dict[str, Any] = {k: v["value"] for k, v in DEFAULTS.items()}

    if CONFIG_PATH.exists():
        try:
            raw = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
            for key, entry in raw.items():
                if key.startswith("_"):
                    continue
                if isinstance(entry, dict) and "value" in entry:
                    values[key] = entry["value"]
                else:
                    values[key] = entry
        except (json.JSONDecodeError, OSError, AttributeError) as exc:
            logger.warning("Could not read config at %s: %s", CONFIG_PATH, exc)

    return values


def validate_config(values: dict[str, Any]) -> None:
    """Raise ValueError if *values* cannot drive a session."""
    for key in _POSITIVE_KEYS:
        val = values.get(key, DEFAULTS[key]["value"])
        if not isinstance(val, (int, float)) or isinstance(val, bool) or val <= 0:
            raise ValueError(f"{key} must be a positive number, got {val!r}")

    size = values.get("size", DEFAULTS["size"]["value"])
    if not isinstance(size, (int, float)) or not 0 < size <= 1:
        raise ValueError(f"size must be between 0 and 1, got {size!r}")

    categories = values.get("categories") or []
    if not categories:
        raise ValueError("categories must list at least one category")

    default = values.get("default_category")
    if default not in categories:
        raise ValueError(f"default_category {default!r} is not one of {categories}")


def save_config(values: dict[str, Any]) -> None:
    """Write current values back to the config file, preserving descriptions."""
    _ensure_dir()
    data: dict[str, Any] = {
        "_description": "NoteFloat configuration. Edit values below; descriptions are for reference."
    }
    for key, meta in DEFAULTS.items():
        data[key] = {
            "value": values.get(key, meta["value"]),
            "description": meta["description"],
        }
    CONFIG_PATH.write_text(
        json.dumps(data, indent=4, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    logger.info("Config saved to %s", CONFIG_PATH)


def get(key: str) -> Any:
    """Convenience: load config and return one value."""
    return load_config()[key]


def init_config_if_missing() -> bool:
    """Create default config file if it doesn't exist. Return True if created."""
    if CONFIG_PATH.exists():
        return False
    defaults = {k: v["value"] for k, v in DEFAULTS.items()}
    save_config(defaults)
    return True
