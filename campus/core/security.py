"""Password hashing and verification."""

from __future__ import annotations

import secrets

from argon2 import PasswordHasher, exceptions as argon_exc

_ph = PasswordHasher()
_PREFIX = "argon2$"


def hash_password(password: str) -> str:
    """Create an Argon2 hash with a prefix for detection."""
    hashed = _ph.hash(password)
    return f"{_PREFIX}{hashed}"


def is_hashed(stored: str | None) -> bool:
    return str(stored or "").startswith(_PREFIX)


def verify_password(password: str, stored: str | None) -> bool:
    """Check a password against a stored hash, or a legacy clear-text value."""
    stored_value = str(stored or "")
    if is_hashed(stored_value):
        hashed = stored_value[len(_PREFIX) :]
        try:
            return _ph.verify(hashed, password or "")
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    if not stored_value:
        return False
    # Records written before hashing was introduced keep the password in clear text.
    return secrets.compare_digest(stored_value.encode(), str(password or "").encode())
