"""Document store contract shared by the JSON and SQL backends."""
from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

COLLECTIONS = ("users", "resources", "bookings")


def empty_document() -> dict:
    return {name: [] for name in COLLECTIONS}


def db_defaults(db: dict | None) -> dict:
    """Make sure every collection exists and is a list."""
    if not isinstance(db, dict):
        return empty_document()
    for name in COLLECTIONS:
        if not isinstance(db.get(name), list):
            db[name] = []
    return db


class DocumentStore:
    """Holds the three collections; read wholesale, rewritten wholesale.

    Callers wrap load -> mutate -> save in ``locked()`` so that only one
    writer touches the document at a time within this process.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[None]:
        with self._lock:
            yield

    def load(self) -> dict:
        raise NotImplementedError

    def save(self, db: dict) -> bool:
        raise NotImplementedError

    def exists(self) -> bool:
        raise NotImplementedError

    def initialize(self, seed: dict) -> bool:
        """Write ``seed`` only when no document has been stored yet."""
        with self.locked():
            if self.exists():
                return False
            return self.save(db_defaults(seed))
