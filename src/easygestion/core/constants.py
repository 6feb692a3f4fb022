"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""
from decimal import Decimal

MONEY_QUANTUM = Decimal("0.01")

DEFAULT_REVENUE_MONTHS = 12
MAX_REVENUE_MONTHS = 60
TOP_RANKING_SIZE = 5

MIN_CHARGE_YEAR = 2020
MIN_USERNAME_LENGTH = 3

DEFAULT_PACKAGES = (
    ("Barbe", Decimal("7.00")),
    ("Coupe de cheveux", Decimal("12.00")),
    ("Coupe de cheveux sans contour", Decimal("16.00")),
    ("Coupe de cheveux avec contour", Decimal("19.00")),
    ("Coupe de cheveux enfant", Decimal("10.00")),
    ("Service personnalisé", Decimal("0.00")),
)
