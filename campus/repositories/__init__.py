"""
Persistence adapters.

Every backend exposes the same document contract (load/save/locked/initialize)
so services never care whether the data lives in a JSON file or in SQL tables.
"""
from __future__ import annotations

from campus.core.config import Settings
from campus.repositories.base import COLLECTIONS, DocumentStore, empty_document
from campus.repositories.json_storage import JsonDocumentStore
from campus.repositories.sql_storage import SQLDocumentStore


def build_store(settings: Settings) -> DocumentStore:
    """Pick the backend named by STORAGE_BACKEND."""
    backend = settings.storage_backend
    if backend == "json":
        return JsonDocumentStore(settings.data_file)
    if backend == "sql":
        return SQLDocumentStore(settings.database_url)
    raise RuntimeError(f"Unknown STORAGE_BACKEND '{backend}' (expected 'json' or 'sql').")


__all__ = ["COLLECTIONS", "DocumentStore", "JsonDocumentStore", "SQLDocumentStore", "build_store", "empty_document"]
