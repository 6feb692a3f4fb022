from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from ..core.constants import MONEY_QUANTUM


def to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def quantize(value: Any) -> Decimal:
    return to_decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def total(values: Iterable[Any]) -> Decimal:
    return quantize(sum((to_decimal(v) for v in values), Decimal("0")))


def as_float(value: Any) -> float:
    """JSON representation of an amount."""
    return float(quantize(value))
