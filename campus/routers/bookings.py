from __future__ import annotations

from fastapi import APIRouter, Request

from campus.routers.common import app_state, error_response
from campus.schemas import BookingRequest
from campus.services.booking_service import BookingService
from campus.services.errors import CampusError

router = APIRouter(prefix="/api/bookings", tags=["bookings"])


def _bookings(request: Request) -> BookingService:
    return app_state(request, "booking_service")


@router.get("")
def list_bookings(request: Request):
    return _bookings(request).list_all()


@router.get("/user/{user_id}")
def bookings_for_user(user_id: str, request: Request):
    return _bookings(request).for_user(user_id)


@router.get("/resource/{resource_id}")
def bookings_for_resource(resource_id: str, request: Request):
    return _bookings(request).for_resource(resource_id)


@router.get("/{booking_id}")
def get_booking(booking_id: str, request: Request):
    try:
        return _bookings(request).get(booking_id)
    except CampusError as exc:
        return error_response(exc)


@router.post("", status_code=201)
def create_booking(body: BookingRequest, request: Request):
    try:
        return _bookings(request).book(body.userId, body.resourceId, body.date, body.startTime, body.endTime)
    except CampusError as exc:
        return error_response(exc)


@router.put("/{booking_id}")
def update_booking(booking_id: str, payload: dict, request: Request):
    try:
        return _bookings(request).update(booking_id, payload)
    except CampusError as exc:
        return error_response(exc)


@router.delete("/{booking_id}")
def cancel_booking(booking_id: str, request: Request):
    try:
        booking = _bookings(request).cancel(booking_id)
    except CampusError as exc:
        return error_response(exc)
    return {"success": True, "message": "Booking cancelled", "booking": booking}
