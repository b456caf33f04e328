import sys
import os
import logging

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from plain_notes.vault import filesystem
from plain_notes.vault.filesystem import atomic_write_text
from plain_notes.vault.repo import NoteRepository


def test_atomic_write_overwrites_and_leaves_no_temp(tmp_path):
    path = tmp_path / "a.txt"
    path.write_text("long old content", encoding="utf-8")

    atomic_write_text(path, "new")

    assert path.read_text(encoding="utf-8") == "new"
    assert [p.name for p in tmp_path.iterdir()] == ["a.txt"]


def test_atomic_write_keeps_newlines_verbatim(tmp_path):
    path = tmp_path / "crlf.txt"
    atomic_write_text(path, "a\r\nb\n")
    assert path.read_bytes() == b"a\r\nb\n"


def test_repo_lists_only_top_level_note_files(tmp_path):
    repo = NoteRepository(tmp_path)
    repo.write("one", "1")
    (tmp_path / ".tmp-0123abcd").write_text("partial", encoding="utf-8")
    (tmp_path / "other.md").write_text("x", encoding="utf-8")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "two.txt").write_text("2", encoding="utf-8")

    assert [repo.title_of(p) for p in repo.iter_note_files()] == ["one"]
    assert repo.read_path(repo.note_path("one")) == "1"


def test_repo_remove(tmp_path):
    repo = NoteRepository(tmp_path)
    repo.write("gone", "x")
    assert repo.remove("gone") is True
    assert repo.remove("gone") is False


def test_custom_extension(tmp_path):
    repo = NoteRepository(tmp_path, extension=".note")
    path = repo.write("x", "y")
    assert path.name == "x.note"
    assert repo.title_of(path) == "x"


def test_repo_lists_dot_titles_but_not_bare_extension(tmp_path):
    repo = NoteRepository(tmp_path)
    repo.write(".plan", "secret")
    (tmp_path / ".txt").write_text("no title", encoding="utf-8")

    assert [repo.title_of(p) for p in repo.iter_note_files()] == [".plan"]


def test_atomic_write_temp_name_does_not_grow_with_target(tmp_path):
    long_name = "日" * 80 + ".txt"
    path = tmp_path / long_name
    atomic_write_text(path, "body")
    assert path.read_text(encoding="utf-8") == "body"
    assert [p.name for p in tmp_path.iterdir()] == [long_name]


def test_atomic_write_failure_before_temp_exists_is_quiet(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(filesystem, "temp_name", lambda: "x" * 300)

    with caplog.at_level(logging.WARNING, logger="plain_notes"):
        with pytest.raises(OSError):
            atomic_write_text(tmp_path / "a.txt", "body")

    assert "Could not remove temp file" not in caplog.text
    assert list(tmp_path.iterdir()) == []
