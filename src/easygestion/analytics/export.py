from __future__ import annotations

import io

import pandas as pd

from ..common.money import as_float
from .model import Dashboard


def dashboard_workbook(dashboard: Dashboard) -> io.BytesIO:
    """Three sheets: month totals, employee ranking, package ranking."""
    totals = dashboard.totals
    summary = pd.DataFrame(
        [
            ("Sales", as_float(totals.total_sales)),
            ("Receipts", as_float(totals.total_receipts)),
            ("Expenses", as_float(totals.total_expenses)),
            ("Salaries", as_float(totals.total_salaries)),
            ("Admin charges", as_float(totals.total_admin_charges)),
            ("Net profit", as_float(totals.net_profit)),
        ],
        columns=["Metric", f"{dashboard.year}-{dashboard.month:02d}"],
    )
    employees = pd.DataFrame(
        [e.to_dict() for e in dashboard.employee_performance],
        columns=["id", "name", "totalSales", "totalReceipts", "total"],
    )
    packages = pd.DataFrame(
        [p.to_dict() for p in dashboard.popular_packages],
        columns=["id", "name", "price", "salesCount", "totalRevenue"],
    )

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        summary.to_excel(writer, index=False, sheet_name="Summary")
        employees.to_excel(writer, index=False, sheet_name="Employees")
        packages.to_excel(writer, index=False, sheet_name="Packages")
    output.seek(0)
    return output
