"""
Tests for the JSON document store.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path

# Make the campus package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from campus.domain.seed import seed_document  # noqa: E402
from campus.repositories.json_storage import JsonDocumentStore  # noqa: E402


def test_missing_file_loads_empty_document(tmp_path):
    store = JsonDocumentStore(tmp_path / "data.json")
    assert store.load() == {"users": [], "resources": [], "bookings": []}
    assert not store.exists()


def test_corrupt_file_falls_back_to_empty_document(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonDocumentStore(path)
    assert store.load() == {"users": [], "resources": [], "bookings": []}


def test_partial_document_gets_missing_collections(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"users": [{"id": "u1"}], "bookings": None}), encoding="utf-8")
    db = JsonDocumentStore(path).load()
    assert db["users"] == [{"id": "u1"}]
    assert db["resources"] == []
    assert db["bookings"] == []


def test_save_writes_pretty_printed_document(tmp_path):
    path = tmp_path / "nested" / "data.json"
    store = JsonDocumentStore(path)
    db = {"users": [{"id": "u1", "fullName": "Ada"}], "resources": [], "bookings": []}
    assert store.save(db) is True
    text = path.read_text(encoding="utf-8")
    assert text.startswith("{\n  ")
    assert json.loads(text) == db
    assert store.load() == db


def test_save_reports_io_fault_instead_of_raising(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = JsonDocumentStore(blocker / "data.json")
    assert store.save({"users": [], "resources": [], "bookings": []}) is False


def test_initialize_seeds_only_once(tmp_path):
    store = JsonDocumentStore(tmp_path / "data.json")
    assert store.initialize(seed_document()) is True
    db = store.load()
    assert [r["id"] for r in db["resources"]] == [1, 2, 3, 4, 5, 6]
    db["resources"].pop()
    store.save(db)
    assert store.initialize(seed_document()) is False
    assert len(store.load()["resources"]) == 5
