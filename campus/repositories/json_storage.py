"""
JSON file backend.

The whole document lives in one pretty-printed file. Reads never raise: a
missing or corrupt file yields an empty document. Writes go through a temp
file and ``os.replace`` so a crash mid-write leaves the previous version.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from campus.repositories.base import DocumentStore, db_defaults, empty_document

logger = logging.getLogger(__name__)


class JsonDocumentStore(DocumentStore):
    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> dict:
        if not self.path.exists():
            return empty_document()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return db_defaults(json.load(f))
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s, falling back to an empty document: %s", self.path, exc)
            return empty_document()

    def save(self, db: dict) -> bool:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(db, ensure_ascii=False, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
            return True
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write %s: %s", self.path, exc)
            return False
