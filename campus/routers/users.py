from __future__ import annotations

from fastapi import APIRouter, Request

from campus.routers.common import app_state, error_response
from campus.services.errors import CampusError
from campus.services.user_service import UserService, public_user

router = APIRouter(prefix="/api/users", tags=["users"])


def _users(request: Request) -> UserService:
    return app_state(request, "user_service")


@router.get("")
def list_users(request: Request):
    return [public_user(u) for u in _users(request).list_all()]


@router.get("/{user_id}")
def get_user(user_id: str, request: Request):
    try:
        return public_user(_users(request).get(user_id))
    except CampusError as exc:
        return error_response(exc)


@router.post("", status_code=201)
def create_user(payload: dict, request: Request):
    try:
        return public_user(_users(request).create(payload))
    except CampusError as exc:
        return error_response(exc)


@router.put("/{user_id}")
def update_user(user_id: str, payload: dict, request: Request):
    try:
        return public_user(_users(request).update(user_id, payload))
    except CampusError as exc:
        return error_response(exc)


@router.delete("/{user_id}")
def delete_user(user_id: str, request: Request):
    try:
        _users(request).delete(user_id)
    except CampusError as exc:
        return error_response(exc)
    return {"success": True, "message": "User deleted"}
