"""
Money helpers shared by the aggregate services.
"""

from decimal import Decimal

CENTS = Decimal('0.01')


def to_cents(value) -> Decimal:
    """
    Normalise an aggregate result to a 2-place Decimal.

    Database backends differ in what SUM() hands back (Decimal with or
    without scale, int, float); totals are always rendered with cents.
    """
    if value is None:
        value = 0
    return Decimal(str(value)).quantize(CENTS)
