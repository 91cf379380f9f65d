"""
Authentication use cases.
"""

from __future__ import annotations

import logging

from campus.core.security import hash_password, is_hashed, verify_password
from campus.repositories.base import DocumentStore
from campus.services.errors import InvalidCredentialsError
from campus.services.user_service import public_user

logger = logging.getLogger(__name__)


class AuthService:
    """Checks registration number + password against the stored users."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    def login(self, registration_number: str, password: str) -> dict:
        """Return the matching user without its password.

        A wrong password, an unknown registration number and an empty one all
        raise the same InvalidCredentialsError. Legacy clear-text passwords are
        re-hashed on a successful login.
        """
        reg = str(registration_number or "").strip()
        if not reg:
            raise InvalidCredentialsError("Invalid credentials")
        with self.store.locked():
            db = self.store.load()
            for user in db["users"]:
                if str(user.get("registrationNumber") or "").strip() != reg:
                    continue
                stored = user.get("password")
                if not verify_password(password, stored):
                    continue
                if not is_hashed(stored):
                    user["password"] = hash_password(password)
                    if not self.store.save(db):
                        logger.warning("Could not upgrade legacy password for user %s", user.get("id"))
                return public_user(user)
        raise InvalidCredentialsError("Invalid credentials")
