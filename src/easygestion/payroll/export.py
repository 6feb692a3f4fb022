from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..common.money import as_float
from .model import Salary

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def salaries_workbook(salaries: Sequence[Salary]) -> io.BytesIO:
    rows = [
        {
            "Employee ID": s.employee_id,
            "Employee": s.employee_name or "",
            "Period start": s.period_start.isoformat(),
            "Period end": s.period_end.isoformat(),
            "Gross": as_float(s.base_salary),
            "Deduction %": as_float(s.commission_percentage),
            "Total salary": as_float(s.total_salary),
        }
        for s in salaries
    ]
    df = pd.DataFrame(
        rows,
        columns=["Employee ID", "Employee", "Period start", "Period end", "Gross", "Deduction %", "Total salary"],
    )

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Salaries")
    output.seek(0)
    return output
