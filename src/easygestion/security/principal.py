from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.model import User


@dataclass(frozen=True)
class Principal:
    """The authenticated caller.

    Built from the user the verified token points at, so a role change or a
    deactivation takes effect on the next request.
    """

    user_id: int
    role: Role
    employee_id: Optional[int] = None

    @property
    def is_admin(self) -> bool:
        return self.role.is_admin

    @property
    def is_super_admin(self) -> bool:
        return self.role == Role.SUPER_ADMIN

    @classmethod
    def from_user(cls, user: User) -> "Principal":
        return cls(
            user_id=user.user_id,
            role=user.role,
            employee_id=user.employee.employee_id if user.employee else None,
        )

    def ensure_can_access_employee(self, employee_id: int) -> None:
        """Non-admins may only act on their own employee record."""
        if self.is_admin:
            return
        if self.employee_id is None or int(self.employee_id) != int(employee_id):
            raise AuthorizationError("Access denied")
