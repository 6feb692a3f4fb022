from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import month_bounds, now_local, shift_month
from ..common.validators import parse_int_in_range
from ..core.constants import DEFAULT_REVENUE_MONTHS, MAX_REVENUE_MONTHS, TOP_RANKING_SIZE
from .model import Dashboard, MonthTotals, RevenuePoint
from .repository import AnalyticsRepository


def parse_month_query(args: Mapping[str, Any]) -> tuple[Optional[int], Optional[int]]:
    month = args.get("month")
    year = args.get("year")
    return (
        parse_int_in_range(month, "month", min_value=1, max_value=12) if month not in (None, "") else None,
        parse_int_in_range(year, "year", min_value=1970, max_value=9999) if year not in (None, "") else None,
    )


def parse_months(value: Any) -> int:
    """Look-back length; anything unusable falls back to the default."""
    try:
        months = int(str(value).strip())
    except (TypeError, ValueError):
        return DEFAULT_REVENUE_MONTHS
    if months < 1:
        return DEFAULT_REVENUE_MONTHS
    return min(months, MAX_REVENUE_MONTHS)


class AnalyticsService:
    def __init__(self, analytics: AnalyticsRepository, *, top_size: int = TOP_RANKING_SIZE):
        self._analytics = analytics
        self._top_size = top_size

    def dashboard(self, *, month: Optional[int] = None, year: Optional[int] = None) -> Dashboard:
        today = now_local()
        month = month or today.month
        year = year or today.year
        start, end = month_bounds(year, month)

        totals = MonthTotals(
            total_sales=self._analytics.sum_sales(start, end),
            total_receipts=self._analytics.sum_receipts(start, end),
            total_expenses=self._analytics.sum_expenses(start, end),
            total_salaries=self._analytics.sum_salaries_starting_between(start.date(), end.date()),
            total_admin_charges=self._analytics.admin_charges_total(month, year),
        )

        employees = sorted(
            self._analytics.employee_revenue(start, end),
            key=lambda e: (-e.total, e.employee_id),
        )
        packages = sorted(
            self._analytics.package_revenue(start, end),
            key=lambda p: (-p.total_revenue, -p.sales_count, p.package_id),
        )
        return Dashboard(
            month=month,
            year=year,
            totals=totals,
            employee_performance=employees[: self._top_size],
            popular_packages=packages[: self._top_size],
        )

    def revenue(self, months: Any = None) -> list[RevenuePoint]:
        """One point per month, oldest first, ending with the current month."""
        count = parse_months(months)
        today = now_local()

        out: list[RevenuePoint] = []
        for back in range(count - 1, -1, -1):
            year, month = shift_month(today.year, today.month, -back)
            start, end = month_bounds(year, month)
            out.append(
                RevenuePoint(
                    year=year,
                    month=month,
                    sales=self._analytics.sum_sales(start, end),
                    receipts=self._analytics.sum_receipts(start, end),
                    expenses=self._analytics.sum_expenses(start, end),
                )
            )
        return out
