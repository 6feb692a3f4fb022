from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from easygestion import create_app
from easygestion.core.enums import Role
from easygestion.database.extensions import db

PASSWORD = "Str0ng!Passw0rd#1"


@pytest.fixture
def app(tmp_path):
    app = create_app(
        "easygestion.settings.testing",
        overrides={
            "UPLOAD_FOLDER": str(tmp_path / "uploads"),
            "FRONTEND_DIST": str(tmp_path / "dist"),
        },
    )
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["easygestion.container"]


@pytest.fixture
def make_account(app, container):
    """Create a user (with an employee profile unless it is an admin account)."""
    counter = {"n": 0}

    def _make(role: Role = Role.USER, *, deduction: str = "0", with_employee: bool = True) -> dict:
        counter["n"] += 1
        n = counter["n"]
        username = f"{role.value.lower()}{n}"
        email = f"{username}@example.com"
        with app.app_context():
            password_hash = container.password_hasher.hash(PASSWORD)
            if with_employee:
                user = container.users_repo.create_with_employee(
                    username=username,
                    email=email,
                    password_hash=password_hash,
                    role=role,
                    avatar=None,
                    name=f"Employee {n}",
                    position="Barber",
                    hire_date=date(2024, 1, 1),
                    deduction_percentage=Decimal(deduction),
                    documents={},
                )
            else:
                user = container.users_repo.create_user(
                    username=username, email=email, password_hash=password_hash, role=role
                )
        return {
            "user_id": user.user_id,
            "employee_id": user.employee.employee_id if user.employee else None,
            "email": email,
            "username": username,
        }

    return _make


@pytest.fixture
def login(client):
    def _login(email: str, password: str = PASSWORD) -> dict:
        res = client.post("/api/v1/auth/login", json={"email": email, "password": password})
        assert res.status_code == 200, res.get_json()
        return {"Authorization": f"Bearer {res.get_json()['accessToken']}"}

    return _login


@pytest.fixture
def admin(make_account, login):
    account = make_account(Role.ADMIN, with_employee=False)
    account["headers"] = login(account["email"])
    return account


@pytest.fixture
def super_admin(make_account, login):
    account = make_account(Role.SUPER_ADMIN, with_employee=False)
    account["headers"] = login(account["email"])
    return account


@pytest.fixture
def employee(make_account, login):
    account = make_account(Role.USER, deduction="10")
    account["headers"] = login(account["email"])
    return account
