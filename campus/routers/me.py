"""Endpoints scoped to the logged-in user (dashboard, own bookings)."""
from __future__ import annotations

from fastapi import APIRouter, Request

from campus.routers.common import app_state, error_response
from campus.schemas import SessionBookingRequest
from campus.services.booking_service import BookingService
from campus.services.errors import CampusError, NotAuthenticatedError
from campus.services.session_service import session_token
from campus.services.user_service import UserService, public_user

router = APIRouter(prefix="/api/me", tags=["session"])


def _current_user(request: Request) -> dict:
    user_id = app_state(request, "sessions").resolve(session_token(request))
    users: UserService = app_state(request, "user_service")
    user = users.find(user_id) if user_id else None
    if user is None:
        raise NotAuthenticatedError("Login required")
    return user


def _bookings(request: Request) -> BookingService:
    return app_state(request, "booking_service")


@router.get("")
def me(request: Request):
    try:
        return public_user(_current_user(request))
    except CampusError as exc:
        return error_response(exc)


@router.get("/dashboard")
def dashboard(request: Request):
    try:
        user = _current_user(request)
    except CampusError as exc:
        return error_response(exc)
    return {"user": public_user(user), **_bookings(request).dashboard(user.get("id"))}


@router.post("/bookings", status_code=201)
def book_as_current_user(body: SessionBookingRequest, request: Request):
    try:
        user = _current_user(request)
        return _bookings(request).book(user.get("id"), body.resourceId, body.date, body.startTime, body.endTime)
    except CampusError as exc:
        return error_response(exc)


@router.delete("/bookings/{booking_id}")
def cancel_own_booking(booking_id: str, request: Request):
    try:
        user = _current_user(request)
        booking = _bookings(request).cancel_for_user(booking_id, user.get("id"))
    except CampusError as exc:
        return error_response(exc)
    return {"success": True, "message": "Booking cancelled", "booking": booking}
