"""Initial document written the first time the store is created."""
from __future__ import annotations

import copy

DEFAULT_RESOURCES = [
    {
        "id": 1,
        "name": "Study Room 102",
        "type": "Study Room",
        "building": "Main Library",
        "capacity": 30,
        "facilities": ["High-Speed Computers", "Programming Software", "Wi-Fi"],
        "available": True,
    },
    {
        "id": 2,
        "name": "Meeting Room A",
        "type": "Conference Room",
        "building": "Admin Block",
        "capacity": 15,
        "facilities": ["Projector", "Whiteboard", "Video Conference"],
        "available": True,
    },
    {
        "id": 3,
        "name": "Conference Hall 1",
        "type": "Conference Room",
        "building": "Academic Building",
        "capacity": 50,
        "facilities": ["Audio System", "Podium", "AC"],
        "available": True,
    },
    {
        "id": 4,
        "name": "Badminton Court",
        "type": "Sports Facility",
        "building": "Sports Complex",
        "capacity": 4,
        "facilities": ["Outdoor Court", "Night Lights", "Equipment Rental"],
        "available": True,
    },
    {
        "id": 5,
        "name": "Tennis Court",
        "type": "Sports Facility",
        "building": "Sports Complex",
        "capacity": 4,
        "facilities": ["Outdoor Court", "Night Lights", "Equipment Rental"],
        "available": True,
    },
    {
        "id": 6,
        "name": "Reading Hall A",
        "type": "Library Resource",
        "building": "Main Library",
        "capacity": 50,
        "facilities": ["Silent Zone", "Individual Desks", "AC"],
        "available": True,
    },
]


def seed_document() -> dict:
    return {"users": [], "resources": copy.deepcopy(DEFAULT_RESOURCES), "bookings": []}
