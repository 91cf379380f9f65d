"""Time slot helpers for bookings."""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Mapping, Optional


def parse_time(value: Any) -> Optional[time]:
    """Parse "HH:MM" (or "HH:MM:SS"); returns None for anything else."""
    raw = str(value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(raw, fmt).time()
        except ValueError:
            continue
    return None


def parse_date(value: Any) -> Optional[date]:
    raw = str(value or "").strip()
    try:
        return date.fromisoformat(raw[:10])
    except ValueError:
        return None


def overlaps(start_a: Any, end_a: Any, start_b: Any, end_b: Any) -> bool:
    """Half-open interval overlap: [start_a, end_a) against [start_b, end_b).

    Slots with unparseable bounds never overlap anything.
    """
    a1, b1, a2, b2 = parse_time(start_a), parse_time(end_a), parse_time(start_b), parse_time(end_b)
    if None in (a1, b1, a2, b2):
        return False
    return a1 < b2 and a2 < b1


def conflicts_with(booking: Mapping[str, Any], resource_id: Any, day: Any, start: Any, end: Any) -> bool:
    """True when an existing booking holds the same resource on the same day in an overlapping slot."""
    if str(booking.get("resourceId")) != str(resource_id):
        return False
    if str(booking.get("date") or "").strip() != str(day or "").strip():
        return False
    return overlaps(booking.get("startTime"), booking.get("endTime"), start, end)


def is_upcoming(booking: Mapping[str, Any], today: date) -> bool:
    booked_day = parse_date(booking.get("date"))
    return booked_day is not None and booked_day >= today
