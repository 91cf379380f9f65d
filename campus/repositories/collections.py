"""Linear lookups over the collections of a loaded document.

There is no secondary index: every lookup scans the list. That is fine for
a campus-sized dataset and nothing more.
"""
from __future__ import annotations

from typing import Any, Iterable, Optional

from campus.domain.ids import same_id

EXACT = "exact"
CONTAINS = "contains"


def find_index(collection: list[dict], record_id: Any) -> int:
    for idx, record in enumerate(collection):
        if same_id(record.get("id"), record_id):
            return idx
    return -1


def find_by_id(collection: Iterable[dict], record_id: Any) -> Optional[dict]:
    for record in collection:
        if same_id(record.get("id"), record_id):
            return record
    return None


def filter_by_field(collection: Iterable[dict], field: str, value: Any, match: str = EXACT) -> list[dict]:
    """Records whose ``field`` equals ``value`` (as strings), or contains it case-insensitively."""
    if match == EXACT:
        return [r for r in collection if same_id(r.get(field), value)]
    if match == CONTAINS:
        needle = str(value or "").lower()
        return [r for r in collection if needle in str(r.get(field) or "").lower()]
    raise ValueError(f"Unknown match mode: {match}")
