"""Tests for the file-based document store."""

import pytest

from xbot.adapters.file_store import FileDocumentStore
from xbot.ports.document_store import DocumentNotFound, RevisionConflict, StoreError


@pytest.fixture
def store(tmp_path):
    return FileDocumentStore(tmp_path / "notes")


class TestFileDocumentStore:
    def test_creates_root(self, store):
        assert store.root.is_dir()

    def test_fetch_missing(self, store):
        with pytest.raises(DocumentNotFound):
            store.fetch("notes.md")

    def test_create_then_fetch(self, store):
        revision = store.write("notes.md", "hello\n", None)
        document = store.fetch("notes.md")

        assert document.content == "hello\n"
        assert document.revision == revision

    def test_creates_nested_dirs(self, store):
        store.write("2024/june.md", "x", None)
        assert (store.root / "2024" / "june.md").read_text() == "x"

    def test_update_with_current_revision(self, store):
        first = store.write("notes.md", "one", None)
        second = store.write("notes.md", "two", first)

        assert second != first
        assert store.fetch("notes.md").content == "two"

    def test_stale_revision_conflicts(self, store):
        first = store.write("notes.md", "one", None)
        store.write("notes.md", "two", first)

        with pytest.raises(RevisionConflict):
            store.write("notes.md", "three", first)
        assert store.fetch("notes.md").content == "two"

    def test_create_over_existing_conflicts(self, store):
        store.write("notes.md", "one", None)
        with pytest.raises(RevisionConflict):
            store.write("notes.md", "two", None)

    def test_utf8_round_trip(self, store):
        store.write("notes.md", "日本語 ✓", None)
        assert store.fetch("notes.md").content == "日本語 ✓"

    def test_undecodable_file_is_a_store_error(self, store):
        (store.root / "notes.md").write_bytes(b"\xff\xfe")
        with pytest.raises(StoreError, match="Failed to read"):
            store.fetch("notes.md")

    def test_directory_in_place_of_file(self, store):
        (store.root / "notes.md").mkdir()
        with pytest.raises(StoreError):
            store.fetch("notes.md")
        with pytest.raises(StoreError):
            store.write("notes.md", "x", None)

    def test_unwritable_parent_is_a_store_error(self, store):
        (store.root / "blocker").write_text("not a directory")
        with pytest.raises(StoreError, match="Failed to write"):
            store.write("blocker/notes.md", "x", None)
