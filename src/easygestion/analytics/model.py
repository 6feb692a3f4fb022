from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import as_float


@dataclass(frozen=True)
class EmployeeRevenue:
    employee_id: int
    name: str
    total_sales: Decimal
    total_receipts: Decimal

    @property
    def total(self) -> Decimal:
        return self.total_sales + self.total_receipts

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "totalSales": as_float(self.total_sales),
            "totalReceipts": as_float(self.total_receipts),
            "total": as_float(self.total),
        }


@dataclass(frozen=True)
class PackageRevenue:
    package_id: int
    name: str
    price: Decimal
    sales_count: int
    total_revenue: Decimal

    def to_dict(self) -> dict:
        return {
            "id": self.package_id,
            "name": self.name,
            "price": as_float(self.price),
            "salesCount": self.sales_count,
            "totalRevenue": as_float(self.total_revenue),
        }


@dataclass(frozen=True)
class MonthTotals:
    total_sales: Decimal
    total_receipts: Decimal
    total_expenses: Decimal
    total_salaries: Decimal
    total_admin_charges: Decimal

    @property
    def net_profit(self) -> Decimal:
        return (
            self.total_sales
            + self.total_receipts
            - self.total_expenses
            - self.total_salaries
            - self.total_admin_charges
        )

    def to_dict(self) -> dict:
        return {
            "totalSales": as_float(self.total_sales),
            "totalReceipts": as_float(self.total_receipts),
            "totalExpenses": as_float(self.total_expenses),
            "totalSalaries": as_float(self.total_salaries),
            "totalAdminCharges": as_float(self.total_admin_charges),
            "netProfit": as_float(self.net_profit),
        }


@dataclass(frozen=True)
class Dashboard:
    month: int
    year: int
    totals: MonthTotals
    employee_performance: list[EmployeeRevenue]
    popular_packages: list[PackageRevenue]

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "year": self.year,
            "currentMonth": self.totals.to_dict(),
            "employeePerformance": [e.to_dict() for e in self.employee_performance],
            "popularPackages": [p.to_dict() for p in self.popular_packages],
        }


@dataclass(frozen=True)
class RevenuePoint:
    year: int
    month: int
    sales: Decimal
    receipts: Decimal
    expenses: Decimal

    def to_dict(self) -> dict:
        return {
            "month": f"{self.year}-{self.month:02d}",
            "sales": as_float(self.sales),
            "receipts": as_float(self.receipts),
            "expenses": as_float(self.expenses),
            "totalRevenue": as_float(self.sales + self.receipts),
        }
