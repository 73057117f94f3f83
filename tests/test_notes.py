"""Tests for notes module."""

from pathlib import Path

import pytest

from notefloat.notes import NoteBuffer, NoteStore, category_title, default_note


class TestTitles:
    def test_first_letter_only(self):
        assert category_title("todo") == "Todo"
        assert category_title("myNotes") == "MyNotes"

    def test_default_note_lines(self):
        buf = NoteBuffer(category="todo", text=default_note("todo"))
        assert buf.lines == ["# Todo Notes", "", ""]


class TestNoteStore:
    def test_path_for(self, tmp_path: Path):
        store = NoteStore(tmp_path)
        assert store.path_for("quick") == tmp_path / "quick.md"

    @pytest.mark.parametrize("bad", ["", "../etc", "a/b", ".hidden", "a\\b"])
    def test_rejects_unusable_names(self, tmp_path: Path, bad: str):
        with pytest.raises(ValueError):
            NoteStore(tmp_path).path_for(bad)

    def test_load_missing_returns_default(self, tmp_path: Path):
        store = NoteStore(tmp_path / "notes")
        assert store.load("meeting") == "# Meeting Notes\n\n"
        assert not store.exists("meeting")

    def test_save_terminates_every_line(self, tmp_path: Path):
        store = NoteStore(tmp_path / "notes")
        path = store.save("todo", "# Todo Notes\n\n- milk")
        assert path.read_text() == "# Todo Notes\n\n- milk\n"

    def test_save_creates_storage(self, tmp_path: Path):
        store = NoteStore(tmp_path / "deep" / "notes")
        store.save("quick", "x")
        assert (tmp_path / "deep" / "notes" / "quick.md").is_file()

    def test_empty_buffer_writes_one_line(self, tmp_path: Path):
        path = NoteStore(tmp_path).save("quick", "")
        assert path.read_text() == "\n"

    def test_saved_default_note_keeps_three_lines(self, tmp_path: Path):
        store = NoteStore(tmp_path)
        path = store.save("todo", default_note("todo"))
        assert path.read_text() == "# Todo Notes\n\n\n"
        assert store.load("todo") == default_note("todo")

    def test_load_empty_file(self, tmp_path: Path):
        (tmp_path / "quick.md").write_text("")
        assert NoteStore(tmp_path).load("quick") == ""

    def test_list_files(self, tmp_path: Path):
        store = NoteStore(tmp_path)
        assert store.list_files() == []
        store.save("todo", "a")
        store.save("code", "b")
        assert [p.name for p in store.list_files()] == ["code.md", "todo.md"]
