"""Tests for the per-key debouncer."""

import threading
import time

from notefloat.autosave import Debouncer


class Recorder:
    def __init__(self):
        self.calls: list[str] = []
        self.event = threading.Event()

    def __call__(self, key: str) -> None:
        self.calls.append(key)
        self.event.set()


class TestDebouncer:
    def test_burst_coalesces_to_one_call(self):
        rec = Recorder()
        deb = Debouncer(0.05, rec)
        for _ in range(5):
            deb.trigger("todo")
            time.sleep(0.01)
        assert rec.event.wait(1.0)
        time.sleep(0.1)
        assert rec.calls == ["todo"]
        assert not deb.pending("todo")

    def test_keys_are_independent(self):
        rec = Recorder()
        deb = Debouncer(0.05, rec)
        deb.trigger("todo")
        deb.trigger("code")
        time.sleep(0.3)
        assert sorted(rec.calls) == ["code", "todo"]

    def test_cancel(self):
        rec = Recorder()
        deb = Debouncer(0.05, rec)
        deb.trigger("todo")
        assert deb.pending("todo")
        assert deb.cancel("todo") is True
        assert deb.cancel("todo") is False
        time.sleep(0.15)
        assert rec.calls == []

    def test_cancel_all(self):
        rec = Recorder()
        deb = Debouncer(0.05, rec)
        deb.trigger("a")
        deb.trigger("b")
        deb.cancel_all()
        time.sleep(0.15)
        assert rec.calls == []

    def test_flush_runs_pending_now(self):
        rec = Recorder()
        deb = Debouncer(10, rec)
        deb.trigger("quick")
        assert deb.flush("quick") is True
        assert rec.calls == ["quick"]
        assert deb.flush("quick") is False

    def test_flush_logs_callback_errors(self, caplog):
        def boom(key):
            raise OSError("disk full")

        deb = Debouncer(10, boom)
        deb.trigger("todo")
        with caplog.at_level("ERROR", logger="notefloat.autosave"):
            assert deb.flush("todo") is True
        assert "Autosave failed for todo" in caplog.text
        assert not deb.pending("todo")

    def test_callback_errors_are_contained(self):
        calls = []

        def boom(key):
            calls.append(key)
            raise OSError("disk full")

        deb = Debouncer(0.01, boom)
        deb.trigger("todo")
        time.sleep(0.1)
        deb.trigger("todo")
        time.sleep(0.1)
        assert calls == ["todo", "todo"]
