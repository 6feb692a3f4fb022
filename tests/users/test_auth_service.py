from __future__ import annotations

from dataclasses import replace

import pytest

from easygestion.core.enums import Role
from easygestion.core.exceptions import AuthenticationError, ValidationError
from easygestion.security.passwords import PasswordHasher
from easygestion.users.model import User
from easygestion.users.service import AuthService

HASHER = PasswordHasher(method="scrypt:1024:8:1")


class FakeUsersRepo:
    def __init__(self, users):
        self._users = {u.user_id: u for u in users}

    def get_by_id(self, user_id):
        return self._users.get(int(user_id))

    def get_by_email(self, email):
        return next((u for u in self._users.values() if u.email == email), None)

    def get_by_username(self, username):
        return next((u for u in self._users.values() if u.username == username), None)


class FakeTokens:
    def issue(self, user, employee_id=None):
        return f"token-for-{user.user_id}"


ALICE = User(
    user_id=1,
    username="alice",
    email="alice@example.com",
    password_hash=HASHER.hash("Str0ng!Passw0rd#1"),
    role=Role.ADMIN,
)


def test_login_by_email_or_username():
    service = AuthService(FakeUsersRepo([ALICE]), HASHER, FakeTokens())

    assert service.login(identifier="Alice@Example.com", password="Str0ng!Passw0rd#1").access_token == "token-for-1"
    assert service.login(identifier="alice", password="Str0ng!Passw0rd#1").user.user_id == 1


def test_wrong_password_or_unknown_user():
    service = AuthService(FakeUsersRepo([ALICE]), HASHER, FakeTokens())
    with pytest.raises(AuthenticationError):
        service.login(identifier="alice", password="nope")
    with pytest.raises(AuthenticationError):
        service.login(identifier="bob", password="Str0ng!Passw0rd#1")


def test_inactive_account_cannot_login():
    service = AuthService(FakeUsersRepo([replace(ALICE, is_active=False)]), HASHER, FakeTokens())
    with pytest.raises(AuthenticationError):
        service.login(identifier="alice", password="Str0ng!Passw0rd#1")


def test_missing_credentials():
    service = AuthService(FakeUsersRepo([ALICE]), HASHER, FakeTokens())
    with pytest.raises(ValidationError):
        service.login(identifier="", password="")
