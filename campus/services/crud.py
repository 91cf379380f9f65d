"""Generic create/read/update/delete over one collection of the document."""
from __future__ import annotations

import logging
from typing import Any, Optional

from campus.domain.ids import new_id
from campus.repositories.base import DocumentStore
from campus.repositories.collections import find_by_id, find_index
from campus.services.errors import NotFoundError, StoreWriteError

logger = logging.getLogger(__name__)


class CollectionService:
    """Load the whole document, touch one collection, write the whole document back."""

    collection: str = ""
    label: str = "Record"

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    # -------------------------------------- helpers --------------------------------------
    def _commit(self, db: dict, failure: str) -> None:
        if not self.store.save(db):
            raise StoreWriteError(failure)

    def _not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    def _prepare_new(self, fields: dict) -> dict:
        return dict(fields)

    def _prepare_patch(self, fields: dict) -> dict:
        patch = dict(fields)
        patch.pop("id", None)
        return patch

    # -------------------------------------- reads --------------------------------------
    def list_all(self) -> list[dict]:
        return self.store.load()[self.collection]

    def find(self, record_id: Any) -> Optional[dict]:
        return find_by_id(self.store.load()[self.collection], record_id)

    def get(self, record_id: Any) -> dict:
        record = self.find(record_id)
        if record is None:
            raise self._not_found()
        return record

    # -------------------------------------- writes --------------------------------------
    def create(self, fields: dict) -> dict:
        prepared = self._prepare_new(fields)
        prepared.pop("id", None)
        record = {"id": new_id(), **prepared}
        with self.store.locked():
            db = self.store.load()
            db[self.collection].append(record)
            self._commit(db, f"Failed to create {self.label.lower()}")
        logger.info("Created %s %s", self.label.lower(), record["id"])
        return record

    def update(self, record_id: Any, fields: dict) -> dict:
        with self.store.locked():
            db = self.store.load()
            items = db[self.collection]
            idx = find_index(items, record_id)
            if idx == -1:
                raise self._not_found()
            items[idx] = {**items[idx], **self._prepare_patch(fields)}
            self._commit(db, f"Failed to update {self.label.lower()}")
            updated = items[idx]
        logger.info("Updated %s %s", self.label.lower(), record_id)
        return updated

    def delete(self, record_id: Any, *, failure: str | None = None) -> dict:
        """Remove a record and return it. Related records are left untouched."""
        with self.store.locked():
            db = self.store.load()
            items = db[self.collection]
            idx = find_index(items, record_id)
            if idx == -1:
                raise self._not_found()
            removed = items.pop(idx)
            self._commit(db, failure or f"Failed to delete {self.label.lower()}")
        logger.info("Deleted %s %s", self.label.lower(), record_id)
        return removed
