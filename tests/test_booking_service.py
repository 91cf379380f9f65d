"""
Booking flow against a temporary JSON store.
"""
from __future__ import annotations

import sys
import threading
from datetime import date
from pathlib import Path

import pytest

# Make the campus package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from campus.domain.seed import seed_document  # noqa: E402
from campus.repositories.json_storage import JsonDocumentStore  # noqa: E402
from campus.services.booking_service import BookingService  # noqa: E402
from campus.services.errors import (  # noqa: E402
    BookingConflictError,
    ForbiddenError,
    NotFoundError,
    StoreWriteError,
)
from campus.services.resource_service import ResourceService  # noqa: E402
from campus.services.user_service import UserService  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    store = JsonDocumentStore(tmp_path / "data.json")
    store.initialize(seed_document())
    return store


@pytest.fixture()
def student(store):
    return UserService(store).register("R100", "Ada Lovelace", "2001-05-04", "p", "Student")


def test_booking_copies_names_at_creation_time(store, student):
    bookings = BookingService(store)
    booking = bookings.book(student["id"], 1, "2025-01-10", "10:00", "11:00")

    assert booking["userName"] == "Ada Lovelace"
    assert booking["resourceName"] == "Study Room 102"
    assert booking["resourceType"] == "Study Room"
    assert booking["status"] == "Confirmed"
    assert booking["bookedOn"] == date.fromisoformat(booking["bookedOn"]).isoformat()

    ResourceService(store).update(1, {"name": "Renamed Room"})
    UserService(store).update(student["id"], {"fullName": "Someone Else"})
    stored = bookings.get(booking["id"])
    assert stored["resourceName"] == "Study Room 102"
    assert stored["userName"] == "Ada Lovelace"


def test_booking_ignores_available_flag(store, student):
    ResourceService(store).update(4, {"available": False})
    booking = BookingService(store).book(student["id"], "4", "2025-01-10", "18:00", "19:00")
    assert booking["resourceName"] == "Badminton Court"


@pytest.mark.parametrize("user_id, resource_id", [("missing", 1), (None, 1), ("student", 999)])
def test_booking_with_missing_reference_fails_without_appending(store, student, user_id, resource_id):
    bookings = BookingService(store)
    uid = student["id"] if user_id == "student" else user_id
    with pytest.raises(NotFoundError) as excinfo:
        bookings.book(uid, resource_id, "2025-01-10", "10:00", "11:00")
    assert excinfo.value.message == "Resource or User not found"
    assert bookings.list_all() == []


def test_overlapping_slot_is_rejected_by_default(store, student):
    bookings = BookingService(store)
    bookings.book(student["id"], 1, "2025-01-10", "10:00", "11:00")

    with pytest.raises(BookingConflictError):
        bookings.book(student["id"], "1", "2025-01-10", "10:30", "11:30")

    bookings.book(student["id"], 1, "2025-01-10", "11:00", "12:00")
    bookings.book(student["id"], 1, "2025-01-11", "10:30", "11:30")
    bookings.book(student["id"], 2, "2025-01-10", "10:30", "11:30")
    assert len(bookings.list_all()) == 4


def test_double_booking_allowed_when_configured(store, student):
    bookings = BookingService(store, allow_double_booking=True)
    first = bookings.book(student["id"], 1, "2025-01-10", "10:00", "11:00")
    second = bookings.book(student["id"], 1, "2025-01-10", "10:30", "11:30")
    assert first["id"] != second["id"]
    assert len(bookings.for_resource(1)) == 2


def test_cancel_removes_exactly_one_booking(store, student):
    bookings = BookingService(store)
    keep = bookings.book(student["id"], 1, "2025-01-10", "08:00", "09:00")
    drop = bookings.book(student["id"], 2, "2025-01-10", "08:00", "09:00")

    removed = bookings.cancel(drop["id"])

    assert removed == drop
    assert bookings.list_all() == [keep]


def test_cancel_unknown_booking_leaves_collection_unchanged(store, student):
    bookings = BookingService(store)
    existing = bookings.book(student["id"], 1, "2025-01-10", "08:00", "09:00")
    with pytest.raises(NotFoundError):
        bookings.cancel("does-not-exist")
    assert bookings.list_all() == [existing]


def test_cancel_for_user_checks_ownership(store, student):
    other = UserService(store).register("R200", "Grace Hopper", "1999-12-09", "q", "Faculty")
    bookings = BookingService(store)
    booking = bookings.book(student["id"], 3, "2025-01-10", "08:00", "09:00")

    with pytest.raises(ForbiddenError):
        bookings.cancel_for_user(booking["id"], other["id"])
    assert bookings.cancel_for_user(booking["id"], student["id"])["id"] == booking["id"]


def test_deleting_resource_leaves_orphaned_bookings(store, student):
    bookings = BookingService(store)
    booking = bookings.book(student["id"], 5, "2025-01-10", "08:00", "09:00")
    ResourceService(store).delete(5)
    assert bookings.get(booking["id"])["resourceName"] == "Tennis Court"


def test_dashboard_splits_upcoming_and_history(store, student):
    bookings = BookingService(store)
    past = bookings.book(student["id"], 1, "2025-01-09", "08:00", "09:00")
    upcoming = bookings.book(student["id"], 1, "2025-01-12", "08:00", "09:00")

    view = bookings.dashboard(student["id"], today=date(2025, 1, 10))

    assert view["activeBookings"] == [upcoming]
    assert view["history"] == [past, upcoming]


def test_write_fault_surfaces_as_store_error(store, student, monkeypatch):
    bookings = BookingService(store)
    monkeypatch.setattr(store, "save", lambda db: False)
    with pytest.raises(StoreWriteError):
        bookings.book(student["id"], 1, "2025-01-10", "10:00", "11:00")
    monkeypatch.undo()
    assert bookings.list_all() == []


def test_cancel_write_fault_names_cancellation(store, student, monkeypatch):
    bookings = BookingService(store)
    booking = bookings.book(student["id"], 1, "2025-01-10", "10:00", "11:00")
    monkeypatch.setattr(store, "save", lambda db: False)
    with pytest.raises(StoreWriteError) as excinfo:
        bookings.cancel(booking["id"])
    assert excinfo.value.message == "Failed to cancel booking"
    with pytest.raises(StoreWriteError) as excinfo:
        bookings.cancel_for_user(booking["id"], student["id"])
    assert excinfo.value.message == "Failed to cancel booking"


def test_concurrent_bookings_are_all_kept(store, student):
    bookings = BookingService(store, allow_double_booking=True)
    start = threading.Barrier(20)
    errors = []

    def worker():
        start.wait()
        try:
            bookings.book(student["id"], 1, "2025-01-10", "10:00", "11:00")
        except Exception as exc:  # noqa: BLE001 - collected and asserted below
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(bookings.list_all()) == 20
    assert len({b["id"] for b in bookings.list_all()}) == 20
