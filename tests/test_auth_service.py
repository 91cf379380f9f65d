from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the campus package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from campus.core.security import is_hashed  # noqa: E402
from campus.repositories.json_storage import JsonDocumentStore  # noqa: E402
from campus.services.auth_service import AuthService  # noqa: E402
from campus.services.errors import InvalidCredentialsError  # noqa: E402
from campus.services.user_service import UserService  # noqa: E402


@pytest.fixture()
def store(tmp_path):
    return JsonDocumentStore(tmp_path / "data.json")


def test_registration_hashes_password_and_keeps_fields(store):
    user = UserService(store).register(
        "R100", "Ada Lovelace", "2001-05-04", "p", "Student", email="ada@campus.edu", department="CS"
    )
    stored = store.load()["users"][0]
    assert stored["id"] == user["id"]
    assert stored["registrationNumber"] == "R100"
    assert stored["department"] == "CS"
    assert is_hashed(stored["password"])


def test_registration_does_not_check_duplicates(store):
    users = UserService(store)
    first = users.register("R100", "Ada", "", "p", "Student")
    second = users.register("R100", "Ada Again", "", "p", "Student")
    assert first["id"] != second["id"]
    assert len(users.list_all()) == 2


def test_login_returns_user_without_password(store):
    user = UserService(store).register("R100", "Ada Lovelace", "2001-05-04", "p", "Student")
    result = AuthService(store).login("R100", "p")
    assert result["id"] == user["id"]
    assert result["fullName"] == "Ada Lovelace"
    assert "password" not in result


@pytest.mark.parametrize("reg, password", [("R100", "wrong"), ("R999", "p"), ("", "p"), ("R100", "")])
def test_login_failures_are_indistinguishable(store, reg, password):
    UserService(store).register("R100", "Ada Lovelace", "2001-05-04", "p", "Student")
    with pytest.raises(InvalidCredentialsError) as excinfo:
        AuthService(store).login(reg, password)
    assert excinfo.value.message == "Invalid credentials"
    assert excinfo.value.status_code == 401


def test_legacy_plain_text_password_is_upgraded_on_login(store):
    store.save({"users": [{"id": "1700000000000", "registrationNumber": "R1", "password": "secret"}], "resources": [], "bookings": []})
    assert AuthService(store).login("R1", "secret")["id"] == "1700000000000"
    assert is_hashed(store.load()["users"][0]["password"])
    assert AuthService(store).login("R1", "secret")["id"] == "1700000000000"


def test_password_update_is_hashed(store):
    users = UserService(store)
    user = users.register("R100", "Ada", "", "p", "Student")
    users.update(user["id"], {"password": "new-pass", "id": "hijack"})
    assert users.get(user["id"])["id"] == user["id"]
    assert AuthService(store).login("R100", "new-pass")["id"] == user["id"]
    with pytest.raises(InvalidCredentialsError):
        AuthService(store).login("R100", "p")


def test_password_that_looks_hashed_is_still_hashed(store):
    users = UserService(store)
    users.register("R100", "Ada", "", "argon2$abc", "Student")
    stored = store.load()["users"][0]["password"]
    assert stored != "argon2$abc"
    assert AuthService(store).login("R100", "argon2$abc")["fullName"] == "Ada"
    with pytest.raises(InvalidCredentialsError):
        AuthService(store).login("R100", stored)
