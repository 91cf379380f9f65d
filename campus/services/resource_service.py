"""Bookable resources (rooms, courts, halls)."""
from __future__ import annotations

from campus.repositories.collections import CONTAINS, filter_by_field
from campus.services.crud import CollectionService


class ResourceService(CollectionService):
    """The ``available`` flag is informational; booking never consults it."""

    collection = "resources"
    label = "Resource"

    def by_type(self, type_label: str) -> list[dict]:
        """Case-insensitive substring match: "room" finds "Study Room" and "Conference Room"."""
        return filter_by_field(self.list_all(), "type", type_label, match=CONTAINS)
