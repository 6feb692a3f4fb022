from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Protocol, Sequence

from .model import EmployeeRevenue, PackageRevenue


class AnalyticsRepository(Protocol):
    """Aggregates over half-open datetime ranges [start, end)."""

    def sum_sales(self, start: datetime, end: datetime) -> Decimal:
        raise NotImplementedError

    def sum_receipts(self, start: datetime, end: datetime) -> Decimal:
        raise NotImplementedError

    def sum_expenses(self, start: datetime, end: datetime) -> Decimal:
        raise NotImplementedError

    def sum_salaries_starting_between(self, start: date, end: date) -> Decimal:
        """Σ total_salary of salaries whose period_start is in [start, end)."""
        raise NotImplementedError

    def admin_charges_total(self, month: int, year: int) -> Decimal:
        raise NotImplementedError

    def employee_revenue(self, start: datetime, end: datetime) -> Sequence[EmployeeRevenue]:
        """Every employee, zero revenue included."""
        raise NotImplementedError

    def package_revenue(self, start: datetime, end: datetime) -> Sequence[PackageRevenue]:
        """Every package, zero sales included."""
        raise NotImplementedError
