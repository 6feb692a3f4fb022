from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class SalaryBreakdown:
    gross: Decimal
    deduction: Decimal
    total: Decimal


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, *, receipts_total: Decimal, sales_total: Decimal, deduction_percentage: Decimal) -> SalaryBreakdown:
        raise NotImplementedError
