from decimal import Decimal

from easygestion.payroll.calculator.standard_calculator import StandardSalaryCalculator


def test_standard_calculator_applies_deduction():
    calc = StandardSalaryCalculator()
    result = calc.compute(receipts_total=Decimal("300"), sales_total=Decimal("700"), deduction_percentage=Decimal("10"))

    assert result.gross == Decimal("1000.00")
    assert result.deduction == Decimal("100.00")
    assert result.total == Decimal("900.00")


def test_standard_calculator_rounds_to_cents():
    calc = StandardSalaryCalculator()
    result = calc.compute(receipts_total=Decimal("0"), sales_total=Decimal("19"), deduction_percentage=Decimal("12.5"))

    assert result.deduction == Decimal("2.38")
    assert result.total == Decimal("16.62")


def test_full_deduction_floors_at_zero():
    calc = StandardSalaryCalculator()
    result = calc.compute(receipts_total=Decimal("50"), sales_total=Decimal("0"), deduction_percentage=Decimal("100"))
    assert result.total == Decimal("0.00")


def test_no_activity_gives_zero_salary():
    calc = StandardSalaryCalculator()
    result = calc.compute(receipts_total=Decimal("0"), sales_total=Decimal("0"), deduction_percentage=Decimal("25"))
    assert result.gross == result.total == Decimal("0.00")
