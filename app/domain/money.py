# app/domain/money.py
from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")


def to_money(value) -> Decimal:
    """Kwota z dwoma miejscami po przecinku, zaokraglenie kasowe (0.005 -> 0.01)."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)
