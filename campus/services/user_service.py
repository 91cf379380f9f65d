"""User records: registration and generic CRUD."""
from __future__ import annotations

from typing import Any

from campus.core.security import hash_password
from campus.services.crud import CollectionService


def public_user(user: dict) -> dict:
    """User record as returned to clients (never includes the password)."""
    return {key: value for key, value in user.items() if key != "password"}


def _hash_password_field(fields: dict) -> dict:
    """Hash whatever password a client sends, even one that looks pre-hashed."""
    password = fields.get("password")
    if isinstance(password, str):
        fields["password"] = hash_password(password)
    return fields


class UserService(CollectionService):
    """Registration does not check registration-number uniqueness or field formats."""

    collection = "users"
    label = "User"

    def _prepare_new(self, fields: dict) -> dict:
        return _hash_password_field(dict(fields))

    def _prepare_patch(self, fields: dict) -> dict:
        return _hash_password_field(super()._prepare_patch(fields))

    def register(
        self,
        registration_number: str,
        full_name: str,
        date_of_birth: str,
        password: str,
        role: str,
        *,
        email: str = "",
        phone_number: str = "",
        department: str = "",
        **extra: Any,
    ) -> dict:
        return self.create(
            {
                "registrationNumber": registration_number,
                "fullName": full_name,
                "dateOfBirth": date_of_birth,
                "password": password,
                "email": email,
                "phoneNumber": phone_number,
                "department": department,
                "role": role,
                **extra,
            }
        )
