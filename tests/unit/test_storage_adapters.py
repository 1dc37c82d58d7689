"""Unit tests for the key-value storage adapters."""

import sqlite3

import pytest

from knowledgequest.adapters.outbound.storage import (
    InMemoryStorageAdapter,
    JsonFileStorageAdapter,
    SQLiteStorageAdapter,
)
from knowledgequest.core.domain.exceptions import (
    CorruptStateError,
    StorageReadError,
    StorageWriteError,
)
from knowledgequest.core.services import DocumentStore


@pytest.fixture(params=["json", "sqlite", "memory"])
def any_storage(request, tmp_path):
    """Each storage backend, freshly created."""
    if request.param == "json":
        return JsonFileStorageAdapter(tmp_path / "data")
    if request.param == "sqlite":
        return SQLiteStorageAdapter(tmp_path / "kq.db")
    return InMemoryStorageAdapter()


@pytest.mark.unit
class TestStorageContract:
    """Behaviour shared by every backend."""

    def test_missing_key_returns_none(self, any_storage):
        assert any_storage.get_item("kq_docs") is None

    def test_set_then_get(self, any_storage):
        any_storage.set_item("kq_docs", '[{"title": "Café ☕"}]')

        assert any_storage.get_item("kq_docs") == '[{"title": "Café ☕"}]'

    def test_overwrite_replaces_value(self, any_storage):
        any_storage.set_item("kq_docs", "first")
        any_storage.set_item("kq_docs", "second")

        assert any_storage.get_item("kq_docs") == "second"

    def test_keys_are_independent(self, any_storage):
        any_storage.set_item("a", "1")
        any_storage.set_item("b", "2")

        assert any_storage.get_item("a") == "1"
        assert any_storage.get_item("b") == "2"

    def test_document_store_round_trip(self, any_storage):
        store = DocumentStore(any_storage)
        store.load()
        store.add("Travel", "Book flights two weeks ahead.", "Finance")

        reloaded = DocumentStore(any_storage)

        assert reloaded.load() == store.documents


@pytest.mark.unit
class TestJsonFileStorageAdapter:
    def test_creates_data_dir(self, tmp_path):
        JsonFileStorageAdapter(tmp_path / "nested" / "data")

        assert (tmp_path / "nested" / "data").is_dir()

    def test_one_file_per_key(self, tmp_path):
        adapter = JsonFileStorageAdapter(tmp_path)
        adapter.set_item("kq_docs", "[]")

        assert (tmp_path / "kq_docs.json").read_text(encoding="utf-8") == "[]"

    def test_no_temp_files_left_behind(self, tmp_path):
        adapter = JsonFileStorageAdapter(tmp_path)
        adapter.set_item("kq_docs", "one")
        adapter.set_item("kq_docs", "two")

        assert [p.name for p in tmp_path.iterdir()] == ["kq_docs.json"]

    @pytest.mark.parametrize("key", ["../escape", "a/b", "", ".", "..", "spaces here"])
    def test_invalid_keys_rejected(self, tmp_path, key):
        adapter = JsonFileStorageAdapter(tmp_path)

        with pytest.raises(ValueError):
            adapter.set_item(key, "x")
        with pytest.raises(ValueError):
            adapter.get_item(key)

    def test_undecodable_file_raises_corrupt_state(self, tmp_path):
        (tmp_path / "kq_docs.json").write_bytes(b"\xff\xfe\xfa")
        adapter = JsonFileStorageAdapter(tmp_path)

        with pytest.raises(CorruptStateError) as exc_info:
            adapter.get_item("kq_docs")

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)

    def test_unreadable_entry_raises_read_error(self, tmp_path):
        (tmp_path / "kq_docs.json").mkdir()
        adapter = JsonFileStorageAdapter(tmp_path)

        with pytest.raises(StorageReadError) as exc_info:
            adapter.get_item("kq_docs")

        assert not isinstance(exc_info.value, CorruptStateError)
        assert isinstance(exc_info.value.cause, OSError)

    def test_write_failure_raises_write_error(self, tmp_path, monkeypatch):
        adapter = JsonFileStorageAdapter(tmp_path)
        adapter.set_item("kq_docs", "original")

        def broken_replace(src, dst):
            raise PermissionError("read-only")

        monkeypatch.setattr("knowledgequest.adapters.outbound.storage.json_file_adapter.os.replace", broken_replace)

        with pytest.raises(StorageWriteError):
            adapter.set_item("kq_docs", "new")

        assert adapter.get_item("kq_docs") == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["kq_docs.json"]


@pytest.mark.unit
class TestSQLiteStorageAdapter:
    def test_init_db(self, tmp_path):
        """Database initialization creates the key-value table."""
        db_file = tmp_path / "test.db"
        SQLiteStorageAdapter(db_file)

        with sqlite3.connect(db_file) as conn:
            row = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='kv_store'"
            ).fetchone()
        assert row == ("kv_store",)

    def test_upsert_keeps_single_row(self, tmp_path):
        db_file = tmp_path / "test.db"
        adapter = SQLiteStorageAdapter(db_file)
        adapter.set_item("kq_docs", "a")
        adapter.set_item("kq_docs", "b")

        with sqlite3.connect(db_file) as conn:
            count = conn.execute("SELECT count(*) FROM kv_store").fetchone()[0]
        assert count == 1

    def test_creates_parent_directory(self, tmp_path):
        SQLiteStorageAdapter(tmp_path / "deep" / "dir" / "kq.db")

        assert (tmp_path / "deep" / "dir" / "kq.db").exists()

    def test_unusable_database_raises_write_error(self, tmp_path):
        db_dir = tmp_path / "actually_a_dir.db"
        db_dir.mkdir()

        with pytest.raises(StorageWriteError):
            SQLiteStorageAdapter(db_dir)


@pytest.mark.unit
class TestInMemoryStorageAdapter:
    def test_initial_items_are_copied(self):
        initial = {"kq_docs": "[]"}
        adapter = InMemoryStorageAdapter(initial)
        adapter.set_item("kq_docs", "changed")

        assert initial == {"kq_docs": "[]"}

    def test_counts_writes(self):
        adapter = InMemoryStorageAdapter()
        adapter.set_item("a", "1")
        adapter.set_item("a", "2")

        assert adapter.writes == 2
