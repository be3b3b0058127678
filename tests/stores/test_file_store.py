# tests/stores/test_file_store.py
"""Tests for the filesystem record store."""

import json
import logging
import os

import pytest

from qbank.exceptions import InvalidKeyError, StorageWriteError
from qbank.stores import FileRecordStore, RecordStore


@pytest.fixture
def base_dir(temp_dir):
    return os.path.join(temp_dir, "records")


@pytest.fixture
def store(base_dir):
    return FileRecordStore(base_dir)


class TestFileRecordStore:
    def test_is_record_store(self, store):
        assert isinstance(store, RecordStore)

    def test_set_and_get(self, store):
        store.set("acme", "upsc_questions", [{"id": "q1"}, {"id": "q2"}])
        assert store.get("acme", "upsc_questions") == [{"id": "q1"}, {"id": "q2"}]

    def test_get_missing_returns_default(self, store):
        assert store.get("acme", "missing") is None
        assert store.get("acme", "missing", []) == []

    def test_layout_one_directory_per_tenant(self, store, base_dir):
        store.set("acme", "upsc_questions", [])
        path = os.path.join(base_dir, "acme", "upsc_questions.json")
        assert os.path.isfile(path)
        with open(path, encoding="utf-8") as f:
            assert json.load(f) == []

    def test_creates_tenant_directory_on_first_write(self, store, base_dir):
        assert not os.path.exists(os.path.join(base_dir, "acme"))
        store.set("acme", "k", 1)
        assert os.path.isdir(os.path.join(base_dir, "acme"))

    def test_overwrite(self, store):
        store.set("acme", "k", {"v": 1})
        store.set("acme", "k", {"v": 2})
        assert store.get("acme", "k") == {"v": 2}

    def test_preserves_unicode(self, store, base_dir):
        store.set("acme", "k", ["संविधान"])
        assert store.get("acme", "k") == ["संविधान"]

    def test_no_temp_files_left_behind(self, store, base_dir):
        store.set("acme", "k", [1, 2, 3])
        assert os.listdir(os.path.join(base_dir, "acme")) == ["k.json"]

    def test_tenant_isolation(self, store):
        store.set("acme", "k", "acme value")
        store.set("globex", "k", "globex value")
        assert store.get("acme", "k") == "acme value"
        assert store.get("globex", "k") == "globex value"

        store.remove("acme", "k")
        assert store.get("acme", "k") is None
        assert store.get("globex", "k") == "globex value"

    def test_corrupt_file_returns_default_and_logs(self, store, base_dir, caplog):
        tenant_dir = os.path.join(base_dir, "acme")
        os.makedirs(tenant_dir)
        with open(os.path.join(tenant_dir, "k.json"), "w", encoding="utf-8") as f:
            f.write("{not json")

        with caplog.at_level(logging.WARNING, logger="qbank.stores.file_store"):
            assert store.get("acme", "k", "fallback") == "fallback"
        assert "Could not read k" in caplog.text

    def test_remove_missing_is_noop(self, store):
        store.remove("acme", "never-written")

    def test_list_keys(self, store):
        assert store.list_keys("acme") == []
        store.set("acme", "b", 1)
        store.set("acme", "a", 2)
        assert store.list_keys("acme") == ["a", "b"]

    def test_clear_tenant(self, store):
        store.set("acme", "a", 1)
        store.set("acme", "b", 2)
        store.set("globex", "a", 3)
        store.clear_tenant("acme")
        assert store.list_keys("acme") == []
        assert store.list_keys("globex") == ["a"]

    def test_unserializable_value_raises(self, store):
        with pytest.raises(StorageWriteError) as exc_info:
            store.set("acme", "k", {"bad": object()})
        assert exc_info.value.tenant_id == "acme"
        assert exc_info.value.key == "k"

    def test_write_failure_raises(self, temp_dir):
        # A regular file where the base directory should be
        blocker = os.path.join(temp_dir, "blocker")
        with open(blocker, "w", encoding="utf-8") as f:
            f.write("")
        store = FileRecordStore(blocker)

        with pytest.raises(StorageWriteError):
            store.set("acme", "k", 1)

    def test_rejects_path_traversal(self, store):
        with pytest.raises(InvalidKeyError):
            store.set("../outside", "k", 1)
        with pytest.raises(InvalidKeyError):
            store.get("acme", "../k")
