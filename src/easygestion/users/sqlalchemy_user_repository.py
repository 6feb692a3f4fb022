from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy.orm import selectinload

from ..core.enums import Role
from ..database.extensions import db, transaction
from ..database.tables import EmployeeRow, UserRow
from .model import Employee, User
from .repository import EmployeeRepository, UserRepository

_USER_FIELDS = {"username", "email", "password_hash", "role", "avatar", "is_active"}
_EMPLOYEE_FIELDS = {
    "name",
    "position",
    "hire_date",
    "deduction_percentage",
    "contract",
    "employment_declaration",
    "certification",
}


def employee_from_row(row: EmployeeRow) -> Employee:
    return Employee(
        employee_id=int(row.id),
        user_id=int(row.user_id),
        name=row.name,
        position=row.position,
        hire_date=row.hire_date,
        deduction_percentage=Decimal(row.deduction_percentage or 0),
        contract=row.contract,
        employment_declaration=row.employment_declaration,
        certification=row.certification,
    )


def user_from_row(row: UserRow) -> User:
    return User(
        user_id=int(row.id),
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        role=Role(row.role),
        avatar=row.avatar,
        is_active=bool(row.is_active),
        created_at=row.created_at,
        employee=employee_from_row(row.employee) if row.employee else None,
    )


class SQLAlchemyUserRepository(UserRepository):
    def _query(self):
        return db.select(UserRow).options(selectinload(UserRow.employee))

    def get_by_id(self, user_id: int) -> Optional[User]:
        row = db.session.execute(self._query().where(UserRow.id == user_id)).scalar_one_or_none()
        return user_from_row(row) if row else None

    def get_by_email(self, email: str) -> Optional[User]:
        row = db.session.execute(self._query().where(UserRow.email == email)).scalar_one_or_none()
        return user_from_row(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        row = db.session.execute(self._query().where(UserRow.username == username)).scalar_one_or_none()
        return user_from_row(row) if row else None

    def list_all(self) -> Sequence[User]:
        rows = db.session.execute(self._query().order_by(UserRow.id)).scalars().all()
        return [user_from_row(r) for r in rows]

    def create_with_employee(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        role: Role,
        avatar: Optional[str],
        name: str,
        position: str,
        hire_date: date,
        deduction_percentage: Decimal,
        documents: dict[str, Optional[str]],
    ) -> User:
        with transaction() as session:
            user = UserRow(
                username=username,
                email=email,
                password_hash=password_hash,
                role=role.value,
                avatar=avatar,
                is_active=True,
            )
            user.employee = EmployeeRow(
                name=name,
                position=position,
                hire_date=hire_date,
                deduction_percentage=deduction_percentage,
                contract=documents.get("contract"),
                employment_declaration=documents.get("employment_declaration"),
                certification=documents.get("certification"),
            )
            session.add(user)
        return user_from_row(user)

    def create_user(self, *, username: str, email: str, password_hash: str, role: Role) -> User:
        """Account without an employee profile (seeded administrators)."""
        with transaction() as session:
            user = UserRow(username=username, email=email, password_hash=password_hash, role=role.value, is_active=True)
            session.add(user)
        return user_from_row(user)

    def update_user(self, user_id: int, **fields) -> Optional[User]:
        unknown = set(fields) - _USER_FIELDS
        if unknown:
            raise ValueError(f"Unsupported user fields: {sorted(unknown)}")

        row = db.session.get(UserRow, user_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value.value if isinstance(value, Role) else value)
        return user_from_row(row)

    def delete_by_id(self, user_id: int) -> bool:
        row = db.session.get(UserRow, user_id)
        if not row:
            return False
        with transaction() as session:
            session.delete(row)
        return True


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        row = db.session.get(EmployeeRow, employee_id)
        return employee_from_row(row) if row else None

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        row = db.session.execute(db.select(EmployeeRow).where(EmployeeRow.user_id == user_id)).scalar_one_or_none()
        return employee_from_row(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        rows = db.session.execute(db.select(EmployeeRow).order_by(EmployeeRow.id)).scalars().all()
        return [employee_from_row(r) for r in rows]

    def update_employee(self, employee_id: int, **fields) -> Optional[Employee]:
        unknown = set(fields) - _EMPLOYEE_FIELDS
        if unknown:
            raise ValueError(f"Unsupported employee fields: {sorted(unknown)}")

        row = db.session.get(EmployeeRow, employee_id)
        if not row:
            return None
        with transaction():
            for key, value in fields.items():
                setattr(row, key, value)
        return employee_from_row(row)
