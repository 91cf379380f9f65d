from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from campus.core.rate_limiter import RateLimitExceeded, rate_limit_ip
from campus.routers.common import app_state, error_response
from campus.schemas import LoginRequest, RegistrationRequest
from campus.services.auth_service import AuthService
from campus.services.errors import CampusError, InvalidCredentialsError
from campus.services.session_service import (
    clear_session_cookie,
    session_token,
    set_session_cookie,
)
from campus.services.user_service import UserService, public_user

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", status_code=201)
def register(body: RegistrationRequest, request: Request):
    users: UserService = app_state(request, "user_service")
    try:
        user = users.register(
            body.registrationNumber,
            body.fullName,
            body.dateOfBirth,
            body.password,
            body.role,
            email=body.email,
            phone_number=body.phoneNumber,
            department=body.department,
        )
    except CampusError as exc:
        return error_response(exc)
    return public_user(user)


@router.post("/login")
def login(body: LoginRequest, request: Request):
    settings = app_state(request, "settings")
    try:
        rate_limit_ip(
            app_state(request, "rate_limiter"),
            request,
            "auth:login",
            limit=settings.login_rate_limit,
            window_seconds=settings.login_rate_window,
        )
    except RateLimitExceeded as exc:
        return JSONResponse({"success": False, "error": str(exc)}, status_code=429)
    auth: AuthService = app_state(request, "auth_service")
    try:
        user = auth.login(body.registrationNumber, body.password)
    except InvalidCredentialsError as exc:
        return JSONResponse({"success": False, "error": exc.message}, status_code=exc.status_code)
    token = app_state(request, "sessions").issue(user.get("id"))
    response = JSONResponse({"success": True, "user": user})
    set_session_cookie(
        response,
        token,
        secure=settings.app_env == "prod",
        max_age=settings.session_ttl_seconds,
    )
    return response


@router.post("/logout")
def logout(request: Request):
    app_state(request, "sessions").revoke(session_token(request))
    response = JSONResponse({"success": True})
    clear_session_cookie(response)
    return response
