from __future__ import annotations

from decimal import Decimal

from ...common.money import quantize, to_decimal
from .base import SalaryBreakdown, SalaryCalculator


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: (receipts + sales) minus the deduction percentage, not below 0."""

    def compute(self, *, receipts_total: Decimal, sales_total: Decimal, deduction_percentage: Decimal) -> SalaryBreakdown:
        gross = quantize(to_decimal(receipts_total) + to_decimal(sales_total))
        deduction = quantize(gross * to_decimal(deduction_percentage) / Decimal(100))
        total = max(quantize(gross - deduction), Decimal("0.00"))
        return SalaryBreakdown(gross=gross, deduction=deduction, total=total)
