from __future__ import annotations

from typing import Optional

from flask_jwt_extended import create_access_token

from ..users.model import User


class TokenIssuer:
    """Access tokens; audience, issuer, algorithm and lifetime come from the JWT_* config keys."""

    def issue(self, user: User, employee_id: Optional[int] = None) -> str:
        return create_access_token(
            identity=str(user.user_id),
            additional_claims={
                "role": user.role.value,
                "username": user.username,
                "email": user.email,
                "employeeId": employee_id,
            },
        )
