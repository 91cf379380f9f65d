"""Booking creation, cancellation and per-user/per-resource views."""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any, Optional

from campus.domain.ids import new_id, same_id
from campus.domain.schedule import conflicts_with, is_upcoming
from campus.repositories.base import DocumentStore
from campus.repositories.collections import filter_by_field, find_by_id
from campus.services.crud import CollectionService
from campus.services.errors import BookingConflictError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

STATUS_CONFIRMED = "Confirmed"


def _today() -> date:
    return datetime.now(timezone.utc).date()


class BookingService(CollectionService):
    collection = "bookings"
    label = "Booking"

    def __init__(self, store: DocumentStore, *, allow_double_booking: bool = False) -> None:
        super().__init__(store)
        self.allow_double_booking = allow_double_booking

    def for_user(self, user_id: Any) -> list[dict]:
        return filter_by_field(self.list_all(), "userId", user_id)

    def for_resource(self, resource_id: Any) -> list[dict]:
        return filter_by_field(self.list_all(), "resourceId", resource_id)

    def book(self, user_id: Any, resource_id: Any, day: str, start_time: str, end_time: str) -> dict:
        """Create a confirmed booking.

        User and resource names are copied into the booking now and never
        refreshed afterwards. Unless double booking is allowed, an overlapping
        slot on the same resource and day is rejected.
        """
        with self.store.locked():
            db = self.store.load()
            resource = find_by_id(db["resources"], resource_id)
            user = find_by_id(db["users"], user_id)
            if resource is None or user is None:
                raise NotFoundError("Resource or User not found")
            if not self.allow_double_booking:
                for existing in db["bookings"]:
                    if conflicts_with(existing, resource_id, day, start_time, end_time):
                        raise BookingConflictError(
                            f"{resource.get('name') or 'Resource'} is already booked on {day} "
                            f"from {existing.get('startTime')} to {existing.get('endTime')}"
                        )
            booking = {
                "id": new_id(),
                "userId": user_id,
                "userName": user.get("fullName"),
                "resourceId": resource_id,
                "resourceName": resource.get("name"),
                "resourceType": resource.get("type"),
                "date": day,
                "startTime": start_time,
                "endTime": end_time,
                "status": STATUS_CONFIRMED,
                "bookedOn": _today().isoformat(),
            }
            db["bookings"].append(booking)
            self._commit(db, "Failed to create booking")
        logger.info("Booking %s: resource %s on %s %s-%s", booking["id"], resource_id, day, start_time, end_time)
        return booking

    def cancel(self, booking_id: Any) -> dict:
        """Remove a booking and return it. Anyone holding the id may cancel."""
        return self.delete(booking_id, failure="Failed to cancel booking")

    def cancel_for_user(self, booking_id: Any, user_id: Any) -> dict:
        with self.store.locked():
            booking = self.find(booking_id)
            if booking is None:
                raise self._not_found()
            if not same_id(booking.get("userId"), user_id):
                raise ForbiddenError("Booking belongs to another user")
            return self.delete(booking_id, failure="Failed to cancel booking")

    def dashboard(self, user_id: Any, today: Optional[date] = None) -> dict:
        """Upcoming bookings (date >= today) plus the full history of a user."""
        day = today or _today()
        history = self.for_user(user_id)
        return {
            "activeBookings": [b for b in history if is_upcoming(b, day)],
            "history": history,
        }
