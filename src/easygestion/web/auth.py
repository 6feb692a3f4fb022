from __future__ import annotations

from functools import wraps

from flask_jwt_extended import get_current_user, verify_jwt_in_request

from ..core.enums import ADMIN_ROLES, Role
from ..core.exceptions import AuthorizationError
from ..security.principal import Principal


def current_principal() -> Principal:
    return Principal.from_user(get_current_user())


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        return view(*args, **kwargs)

    return wrapper


def roles_required(*roles: Role):
    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            verify_jwt_in_request()
            if current_principal().role not in allowed:
                raise AuthorizationError("Insufficient permissions")
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = roles_required(*ADMIN_ROLES)
super_admin_required = roles_required(Role.SUPER_ADMIN)
