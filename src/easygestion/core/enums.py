from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account roles used for access control."""

    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"

    @property
    def is_admin(self) -> bool:
        return self in ADMIN_ROLES


ADMIN_ROLES = frozenset({Role.ADMIN, Role.SUPER_ADMIN})


class AlertType(str, Enum):
    DAILY = "daily"
    MONTHLY = "monthly"
    WARNING = "warning"


class DocumentKind(str, Enum):
    """Employee documents accepted on upload; the value is the stored filename prefix."""

    AVATAR = "avatar"
    CONTRACT = "contract"
    EMPLOYMENT_DECLARATION = "employment_declaration"
    CERTIFICATION = "certification"
