from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from sqlalchemy import and_, func

from ..common.money import quantize
from ..database.extensions import db
from ..database.tables import (
    AdminChargeRow,
    EmployeeRow,
    ExpenseRow,
    PackageRow,
    ReceiptRow,
    SalaryRow,
    SaleRow,
)
from .model import EmployeeRevenue, PackageRevenue
from .repository import AnalyticsRepository


def _sum(column, *where) -> Decimal:
    stmt = db.select(func.coalesce(func.sum(column), 0)).where(*where)
    return quantize(db.session.execute(stmt).scalar_one())


class SQLAlchemyAnalyticsRepository(AnalyticsRepository):
    def sum_sales(self, start: datetime, end: datetime) -> Decimal:
        return _sum(SaleRow.amount, SaleRow.date >= start, SaleRow.date < end)

    def sum_receipts(self, start: datetime, end: datetime) -> Decimal:
        return _sum(ReceiptRow.amount, ReceiptRow.date >= start, ReceiptRow.date < end)

    def sum_expenses(self, start: datetime, end: datetime) -> Decimal:
        return _sum(ExpenseRow.amount, ExpenseRow.date >= start, ExpenseRow.date < end)

    def sum_salaries_starting_between(self, start: date, end: date) -> Decimal:
        return _sum(SalaryRow.total_salary, SalaryRow.period_start >= start, SalaryRow.period_start < end)

    def admin_charges_total(self, month: int, year: int) -> Decimal:
        return _sum(AdminChargeRow.total_charges, AdminChargeRow.month == month, AdminChargeRow.year == year)

    def employee_revenue(self, start: datetime, end: datetime) -> Sequence[EmployeeRevenue]:
        sales = (
            db.select(SaleRow.employee_id, func.sum(SaleRow.amount).label("total"))
            .where(SaleRow.date >= start, SaleRow.date < end)
            .group_by(SaleRow.employee_id)
            .subquery()
        )
        receipts = (
            db.select(ReceiptRow.employee_id, func.sum(ReceiptRow.amount).label("total"))
            .where(ReceiptRow.date >= start, ReceiptRow.date < end)
            .group_by(ReceiptRow.employee_id)
            .subquery()
        )
        stmt = (
            db.select(
                EmployeeRow.id,
                EmployeeRow.name,
                func.coalesce(sales.c.total, 0),
                func.coalesce(receipts.c.total, 0),
            )
            .outerjoin(sales, sales.c.employee_id == EmployeeRow.id)
            .outerjoin(receipts, receipts.c.employee_id == EmployeeRow.id)
            .order_by(EmployeeRow.id)
        )
        return [
            EmployeeRevenue(
                employee_id=int(emp_id),
                name=name,
                total_sales=quantize(sales_total),
                total_receipts=quantize(receipts_total),
            )
            for emp_id, name, sales_total, receipts_total in db.session.execute(stmt).all()
        ]

    def package_revenue(self, start: datetime, end: datetime) -> Sequence[PackageRevenue]:
        stmt = (
            db.select(
                PackageRow.id,
                PackageRow.name,
                PackageRow.price,
                func.count(SaleRow.id),
                func.coalesce(func.sum(SaleRow.amount), 0),
            )
            .outerjoin(
                SaleRow,
                and_(SaleRow.package_id == PackageRow.id, SaleRow.date >= start, SaleRow.date < end),
            )
            .group_by(PackageRow.id, PackageRow.name, PackageRow.price)
            .order_by(PackageRow.id)
        )
        return [
            PackageRevenue(
                package_id=int(pkg_id),
                name=name,
                price=quantize(price),
                sales_count=int(count),
                total_revenue=quantize(revenue),
            )
            for pkg_id, name, price, count, revenue in db.session.execute(stmt).all()
        ]
