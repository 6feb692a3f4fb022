from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import Employee, User


class UserRepository(Protocol):
    """Repository interface for users and their employee profile.

    Note (DIP): services depend on this interface, never on the ORM directly.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def list_all(self) -> Sequence[User]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update_user(self, user_id: int, **fields) -> Optional[User]:
        raise NotImplementedError

    def delete_by_id(self, user_id: int) -> bool:
        raise NotImplementedError


class EmployeeRepository(Protocol):
    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def update_employee(self, employee_id: int, **fields) -> Optional[Employee]:
        raise NotImplementedError
