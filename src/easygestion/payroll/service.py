from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import period_bounds
from ..common.validators import parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..receipts.repository import ReceiptRepository
from ..sales.repository import SaleRepository
from ..security.principal import Principal
from ..users.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import Salary, SalaryDraft
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


def parse_period(data: Mapping[str, Any]) -> tuple[date, date]:
    start = parse_iso_date(data.get("periodStart"), "periodStart")
    end = parse_iso_date(data.get("periodEnd"), "periodEnd")
    if end < start:
        raise ValidationError(
            "periodEnd must not be before periodStart",
            errors=[{"field": "periodEnd", "message": "periodEnd must not be before periodStart"}],
        )
    return start, end


class SalaryService:
    def __init__(
        self,
        salaries: SalaryRepository,
        employees: EmployeeRepository,
        sales: SaleRepository,
        receipts: ReceiptRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._salaries = salaries
        self._employees = employees
        self._sales = sales
        self._receipts = receipts
        self._calculator = calculator or StandardSalaryCalculator()

    def list_for_employee(self, principal: Principal, employee_id: int) -> Sequence[Salary]:
        principal.ensure_can_access_employee(employee_id)
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
        return self._salaries.list_for_employee(int(employee_id))

    def generate(self, data: Mapping[str, Any]) -> list[Salary]:
        """One salary per employee for the inclusive period, both end days included."""
        period_start, period_end = parse_period(data)
        start, end = period_bounds(period_start, period_end)

        drafts: list[SalaryDraft] = []
        for employee in self._employees.list_all():
            breakdown = self._calculator.compute(
                receipts_total=self._receipts.sum_for_employee(employee.employee_id, start, end),
                sales_total=self._sales.sum_for_employee(employee.employee_id, start, end),
                deduction_percentage=employee.deduction_percentage,
            )
            drafts.append(
                SalaryDraft(
                    employee_id=employee.employee_id,
                    base_salary=breakdown.gross,
                    commission_percentage=employee.deduction_percentage,
                    total_salary=breakdown.total,
                )
            )

        out = self._salaries.replace_period(period_start, period_end, drafts)
        logger.info("Generated %d salaries for %s..%s", len(out), period_start, period_end)
        return out

    def list_for_period(self, data: Mapping[str, Any]) -> tuple[date, date, Sequence[Salary]]:
        period_start, period_end = parse_period(data)
        return period_start, period_end, self._salaries.list_for_period(period_start, period_end)
