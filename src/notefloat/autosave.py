"""Debounced autosave: coalesce bursts of edits into one save per idle period."""

from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Thread-safe per-key debouncer.

    ``trigger(key)`` (re)starts the timer for *key*; the callback runs with
    *key* once ``delay`` seconds pass without another trigger for that key.
    Keys are independent: editing one note never postpones another's save.
    """

    def __init__(self, delay: float, callback: Callable[[str], object]):
        self.delay = delay
        self._callback = callback
        self._timers: dict[str, threading.Timer] = {}
        self._lock = threading.Lock()

    def trigger(self, key: str) -> None:
        with self._lock:
            old = self._timers.pop(key, None)
            if old is not None:
                old.cancel()
            timer = threading.Timer(self.delay, self._fire, args=(key,))
            timer.daemon = True
            timer.name = f"notefloat-autosave-{key}"
            self._timers[key] = timer
            timer.start()

    def _fire(self, key: str) -> None:
        with self._lock:
            # Superseded or cancelled after this timer thread already started.
            if self._timers.get(key) is not threading.current_thread():
                return
            del self._timers[key]
        try:
            self._callback(key)
        except Exception:
            logger.exception("Autosave failed for %s", key)

    def pending(self, key: str) -> bool:
        with self._lock:
            return key in self._timers

    def cancel(self, key: str) -> bool:
        """Drop the pending save for *key*. Return True if one was pending."""
        with self._lock:
            timer = self._timers.pop(key, None)
        if timer is None:
            return False
        timer.cancel()
        return True

    def cancel_all(self) -> None:
        with self._lock:
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()

    def flush(self, key: str) -> bool:
        """Run a pending save for *key* right away. Return True if one ran."""
        if not self.cancel(key):
            return False
        try:
            self._callback(key)
        except Exception:
            logger.exception("Autosave failed for %s", key)
        return True
