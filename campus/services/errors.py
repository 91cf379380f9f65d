"""Exceptions raised by services and mapped to HTTP responses by routers."""
from __future__ import annotations


class CampusError(Exception):
    code = "error"
    status_code = 400

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(CampusError):
    code = "not_found"
    status_code = 404


class StoreWriteError(CampusError):
    code = "store_fault"
    status_code = 500


class InvalidCredentialsError(CampusError):
    code = "invalid_credentials"
    status_code = 401


class NotAuthenticatedError(CampusError):
    code = "not_authenticated"
    status_code = 401


class ForbiddenError(CampusError):
    code = "forbidden"
    status_code = 403


class BookingConflictError(CampusError):
    code = "conflict"
    status_code = 409
