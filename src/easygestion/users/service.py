from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import (
    parse_bool,
    parse_iso_date,
    parse_percentage,
    require_email,
    require_min_length,
    require_non_empty,
    require_strong_password,
    require_text,
)
from ..core.constants import MIN_USERNAME_LENGTH
from ..core.enums import DocumentKind, Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from ..security.passwords import PasswordHasher
from .model import Employee, User
from .repository import EmployeeRepository, UserRepository
from .storage import DocumentStorage, UploadedFile

logger = logging.getLogger(__name__)

_EMPLOYEE_DOCUMENTS = (
    DocumentKind.CONTRACT,
    DocumentKind.EMPLOYMENT_DECLARATION,
    DocumentKind.CERTIFICATION,
)


@dataclass(frozen=True)
class LoginResult:
    user: User
    access_token: str


class AuthService:
    """Use case: authenticate a user and issue an access token."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    def login(self, *, identifier: str, password: str) -> LoginResult:
        identifier = (identifier or "").strip()
        if not identifier or not password:
            raise ValidationError(
                "Email or username and password are required",
                errors=[{"field": "email", "message": "Email or username and password are required"}],
            )

        if "@" in identifier:
            user = self._users.get_by_email(identifier.lower())
        else:
            user = self._users.get_by_username(identifier)

        if not user or not self._hasher.verify(password, user.password_hash):
            logger.warning("Rejected login for %r", identifier)
            raise AuthenticationError("Invalid credentials")
        if not user.is_active:
            logger.warning("Login attempt on disabled account id=%s", user.user_id)
            raise AuthenticationError("Account is disabled")

        employee_id = user.employee.employee_id if user.employee else None
        return LoginResult(user=user, access_token=self._tokens.issue(user, employee_id))

    def current_user(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User not found")
        return user


class UserService:
    """Use case: manage user accounts and their employee profile (admin)."""

    def __init__(
        self,
        users: UserRepository,
        employees: EmployeeRepository,
        hasher: PasswordHasher,
        storage: DocumentStorage,
        *,
        password_min_length: int = 14,
    ):
        self._users = users
        self._employees = employees
        self._hasher = hasher
        self._storage = storage
        self._password_min_length = password_min_length

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def get_user(self, user_id: int) -> User:
        user = self._users.get_by_id(int(user_id))
        if not user:
            raise NotFoundError("User not found")
        return user

    def create_user(self, data: Mapping[str, Any], files: Optional[Mapping[str, UploadedFile]] = None) -> User:
        username = require_min_length(require_non_empty(data.get("username"), "username"), "username", MIN_USERNAME_LENGTH)
        email = require_email(data.get("email"))
        password = require_strong_password(data.get("password"), self._password_min_length)
        name = require_text(data.get("name"), "name")
        position = require_text(data.get("position"), "position")
        hire_date = parse_iso_date(data.get("hireDate"), "hireDate")
        raw_pct = data.get("deductionPercentage")
        deduction = parse_percentage(raw_pct if raw_pct not in (None, "") else 0, "deductionPercentage")

        if self._users.get_by_email(email):
            raise ConflictError("Email already in use")
        if self._users.get_by_username(username):
            raise ConflictError("Username already in use")

        saved = self._save_documents(files or {}, (DocumentKind.AVATAR,) + _EMPLOYEE_DOCUMENTS)
        try:
            user = self._users.create_with_employee(
                username=username,
                email=email,
                password_hash=self._hasher.hash(password),
                role=Role.USER,
                avatar=saved.get(DocumentKind.AVATAR.value),
                name=name,
                position=position,
                hire_date=hire_date,
                deduction_percentage=deduction,
                documents={k.value: saved.get(k.value) for k in _EMPLOYEE_DOCUMENTS},
            )
        except Exception:
            for stored in saved.values():
                self._storage.delete(stored)
            raise

        logger.info("Created user %s (id=%s)", user.username, user.user_id)
        return user

    def update_user(self, *, current_role: Role, current_user_id: int, user_id: int, data: Mapping[str, Any]) -> User:
        user = self.get_user(user_id)
        if user.role == Role.SUPER_ADMIN and current_role != Role.SUPER_ADMIN:
            raise AuthorizationError("Only a super admin can modify a super admin account")
        fields: dict[str, Any] = {}

        if data.get("username") is not None:
            username = require_min_length(require_non_empty(data["username"], "username"), "username", MIN_USERNAME_LENGTH)
            if username != user.username:
                other = self._users.get_by_username(username)
                if other and other.user_id != user.user_id:
                    raise ConflictError("Username already in use")
                fields["username"] = username

        if data.get("email") is not None:
            email = require_email(data["email"])
            if email != user.email:
                other = self._users.get_by_email(email)
                if other and other.user_id != user.user_id:
                    raise ConflictError("Email already in use")
                fields["email"] = email

        if data.get("role") is not None:
            try:
                role = Role(str(data["role"]))
            except ValueError:
                raise ValidationError("Invalid role", errors=[{"field": "role", "message": "Invalid role"}])
            touches_super_admin = Role.SUPER_ADMIN in (role, user.role) and role != user.role
            if touches_super_admin and current_role != Role.SUPER_ADMIN:
                raise AuthorizationError("Only a super admin can grant or revoke super admin")
            fields["role"] = role

        if data.get("isActive") is not None:
            is_active = parse_bool(data["isActive"], "isActive")
            if not is_active and int(user_id) == int(current_user_id):
                raise ValidationError("You cannot deactivate your own account")
            fields["is_active"] = is_active

        if not fields:
            return user
        updated = self._users.update_user(user.user_id, **fields)
        if not updated:
            raise NotFoundError("User not found")
        return updated

    def update_deduction_percentage(self, *, user_id: int, value: Any) -> Employee:
        pct = parse_percentage(value, "deductionPercentage")
        employee = self._employees.get_by_user_id(int(user_id))
        if not employee:
            raise NotFoundError("Employee not found")
        updated = self._employees.update_employee(employee.employee_id, deduction_percentage=pct)
        if not updated:
            raise NotFoundError("Employee not found")
        return updated

    def update_documents(self, *, user_id: int, files: Mapping[str, UploadedFile]) -> User:
        user = self.get_user(user_id)
        if not user.employee:
            raise NotFoundError("Employee not found")

        saved = self._save_documents(files, (DocumentKind.AVATAR,) + _EMPLOYEE_DOCUMENTS)
        if not saved:
            raise ValidationError("No document uploaded")

        replaced: list[Optional[str]] = []
        if DocumentKind.AVATAR.value in saved:
            replaced.append(user.avatar)
            self._users.update_user(user.user_id, avatar=saved[DocumentKind.AVATAR.value])

        employee_fields = {k: v for k, v in saved.items() if k != DocumentKind.AVATAR.value}
        if employee_fields:
            for key in employee_fields:
                replaced.append(getattr(user.employee, key))
            self._employees.update_employee(user.employee.employee_id, **employee_fields)

        for old in replaced:
            if old not in saved.values():
                self._storage.delete(old)
        return self.get_user(user.user_id)

    def delete_user(self, *, current_role: Role, current_user_id: int, user_id: int) -> None:
        if current_role != Role.SUPER_ADMIN:
            raise AuthorizationError("Insufficient permissions")
        if int(user_id) == int(current_user_id):
            raise ValidationError("You cannot delete your own account")

        user = self.get_user(user_id)
        if not self._users.delete_by_id(user.user_id):
            raise NotFoundError("User not found")

        documents = [user.avatar]
        if user.employee:
            documents += [getattr(user.employee, k.value) for k in _EMPLOYEE_DOCUMENTS]
        for name in documents:
            self._storage.delete(name)
        logger.info("Deleted user id=%s", user.user_id)

    def _save_documents(self, files: Mapping[str, UploadedFile], kinds: Sequence[DocumentKind]) -> dict[str, str]:
        """Form field names are camelCase (employmentDeclaration); kinds are snake_case."""
        saved: dict[str, str] = {}
        try:
            for kind in kinds:
                upload = files.get(_form_field(kind))
                if upload is None or not getattr(upload, "filename", None):
                    continue
                saved[kind.value] = self._storage.save(kind, upload)
        except Exception:
            for stored in saved.values():
                self._storage.delete(stored)
            raise
        return saved


def _form_field(kind: DocumentKind) -> str:
    head, *rest = kind.value.split("_")
    return head + "".join(part.capitalize() for part in rest)
