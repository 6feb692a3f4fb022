from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import Salary, SalaryDraft


class SalaryRepository(Protocol):
    def list_for_employee(self, employee_id: int) -> Sequence[Salary]:
        raise NotImplementedError

    def list_for_period(self, period_start: date, period_end: date) -> Sequence[Salary]:
        """Salaries generated for exactly this period."""
        raise NotImplementedError

    def replace_period(self, period_start: date, period_end: date, drafts: Sequence[SalaryDraft]) -> list[Salary]:
        """Store every draft at once, dropping earlier salaries of those employees for the same period.

        Either all drafts are stored or none are.
        """
        raise NotImplementedError
