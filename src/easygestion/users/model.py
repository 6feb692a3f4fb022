from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.money import as_float
from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: the employee profile attached to a user account."""

    employee_id: int
    user_id: int
    name: str
    position: str
    hire_date: date
    deduction_percentage: Decimal
    contract: Optional[str] = None
    employment_declaration: Optional[str] = None
    certification: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "userId": self.user_id,
            "name": self.name,
            "position": self.position,
            "hireDate": self.hire_date.isoformat(),
            "deductionPercentage": as_float(self.deduction_percentage),
            "contract": self.contract,
            "employmentDeclaration": self.employment_declaration,
            "certification": self.certification,
        }


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: plain data object; the password hash never leaves the service layer.
    """

    user_id: int
    username: str
    email: str
    password_hash: str
    role: Role
    avatar: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    employee: Optional[Employee] = None

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
            "avatar": self.avatar,
            "isActive": self.is_active,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "employee": self.employee.to_dict() if self.employee else None,
        }
