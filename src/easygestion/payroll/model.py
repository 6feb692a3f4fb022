from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.money import as_float


@dataclass(frozen=True)
class Salary:
    """A generated salary; ``base_salary`` is the gross revenue of the period."""

    salary_id: int
    employee_id: int
    base_salary: Decimal
    commission_percentage: Decimal
    total_salary: Decimal
    period_start: date
    period_end: date
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.salary_id,
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "baseSalary": as_float(self.base_salary),
            "commissionPercentage": as_float(self.commission_percentage),
            "totalSalary": as_float(self.total_salary),
            "periodStart": self.period_start.isoformat(),
            "periodEnd": self.period_end.isoformat(),
        }


@dataclass(frozen=True)
class SalaryDraft:
    """A computed salary waiting to be stored for a period."""

    employee_id: int
    base_salary: Decimal
    commission_percentage: Decimal
    total_salary: Decimal
