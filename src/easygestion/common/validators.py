from __future__ import annotations

import html
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from ..core.constants import MONEY_QUANTUM
from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_STRONG_PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])")


def _invalid(field_name: str, message: str) -> ValidationError:
    return ValidationError(message, errors=[{"field": field_name, "message": message}])


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise _invalid(field_name, f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise _invalid(field_name, f"{field_name} must be at least {min_len} characters")
    return value


def clean_text(value: Any) -> Optional[str]:
    """Trim and HTML-escape free text; blank becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return html.escape(text, quote=True) if text else None


def require_text(value: Any, field_name: str) -> str:
    return html.escape(require_non_empty(value, field_name), quote=True)


def require_email(value: Any, field_name: str = "email") -> str:
    email = require_non_empty(value, field_name).lower()
    if not _EMAIL_RE.match(email):
        raise _invalid(field_name, "Invalid email address")
    return email


def require_strong_password(value: Any, min_len: int, field_name: str = "password") -> str:
    password = "" if value is None else str(value)
    require_min_length(password, field_name, min_len)
    if not _STRONG_PASSWORD_RE.match(password):
        raise _invalid(
            field_name,
            "Password must contain a lowercase letter, an uppercase letter, a digit and one of @$!%*?&",
        )
    return password


def parse_money(value: Any, field_name: str) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()) or isinstance(value, bool):
        raise _invalid(field_name, f"{field_name} is required")
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise _invalid(field_name, f"{field_name} must be a number")
    if not amount.is_finite() or amount < 0:
        raise _invalid(field_name, f"{field_name} must be a number >= 0")
    return amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def parse_percentage(value: Any, field_name: str) -> Decimal:
    pct = parse_money(value, field_name)
    if pct > 100:
        raise _invalid(field_name, f"{field_name} must be between 0 and 100")
    return pct


def parse_int_in_range(
    value: Any,
    field_name: str,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    if isinstance(value, bool):
        raise _invalid(field_name, f"{field_name} must be an integer")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise _invalid(field_name, f"{field_name} must be an integer")
    if min_value is not None and number < min_value:
        raise _invalid(field_name, f"{field_name} must be >= {min_value}")
    if max_value is not None and number > max_value:
        raise _invalid(field_name, f"{field_name} must be <= {max_value}")
    return number


def _fromisoformat(text: str, field_name: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise _invalid(field_name, f"{field_name} must be an ISO-8601 date")


def parse_iso_date(value: Any, field_name: str) -> date:
    """Accept YYYY-MM-DD or a full ISO-8601 timestamp; keep the calendar date as written."""
    text = require_non_empty(value, field_name)
    if len(text) == 10:
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise _invalid(field_name, f"{field_name} must be an ISO-8601 date")
    return _fromisoformat(text, field_name).date()


def parse_iso_datetime(value: Any, field_name: str) -> datetime:
    parsed = _fromisoformat(require_non_empty(value, field_name), field_name)
    # Stored datetimes are naive local time
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    raise _invalid(field_name, f"{field_name} must be a boolean")
