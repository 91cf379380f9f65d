from __future__ import annotations

from fastapi import APIRouter, Request

from campus.routers.common import app_state, error_response
from campus.services.errors import CampusError
from campus.services.resource_service import ResourceService

router = APIRouter(prefix="/api/resources", tags=["resources"])


def _resources(request: Request) -> ResourceService:
    return app_state(request, "resource_service")


@router.get("")
def list_resources(request: Request):
    return _resources(request).list_all()


@router.get("/type/{type_label}")
def resources_by_type(type_label: str, request: Request):
    return _resources(request).by_type(type_label)


@router.get("/{resource_id}")
def get_resource(resource_id: str, request: Request):
    try:
        return _resources(request).get(resource_id)
    except CampusError as exc:
        return error_response(exc)


@router.post("", status_code=201)
def create_resource(payload: dict, request: Request):
    try:
        return _resources(request).create(payload)
    except CampusError as exc:
        return error_response(exc)


@router.put("/{resource_id}")
def update_resource(resource_id: str, payload: dict, request: Request):
    try:
        return _resources(request).update(resource_id, payload)
    except CampusError as exc:
        return error_response(exc)


@router.delete("/{resource_id}")
def delete_resource(resource_id: str, request: Request):
    try:
        _resources(request).delete(resource_id)
    except CampusError as exc:
        return error_response(exc)
    return {"success": True, "message": "Resource deleted"}
