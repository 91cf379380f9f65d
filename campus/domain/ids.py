"""Identifier helpers."""
from __future__ import annotations

import uuid
from typing import Any


def new_id() -> str:
    """Collision-resistant id for newly created records."""
    return uuid.uuid4().hex


def same_id(left: Any, right: Any) -> bool:
    """Ids match by string equality, so 1 and "1" refer to the same record."""
    if left is None or right is None:
        return False
    return str(left) == str(right)
