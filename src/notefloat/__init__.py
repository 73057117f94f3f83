"""notefloat — floating markdown scratch notes with autosave and git sync."""

__version__ = "0.1.0"
