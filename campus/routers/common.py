from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from campus.services.errors import CampusError


def app_state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} is not configured")
    return value


def error_response(err: CampusError) -> JSONResponse:
    return JSONResponse({"error": err.message}, status_code=err.status_code)
