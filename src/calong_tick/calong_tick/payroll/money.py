from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def round2(value: Decimal) -> Decimal:
    """Round half-up to two fractional digits."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def hours_decimal(total_minutes: int) -> Decimal:
    return round2(Decimal(int(total_minutes)) / Decimal(60))


def estimated_pay(total_minutes: int, hourly_rate: Decimal) -> Decimal:
    return round2(Decimal(int(total_minutes)) / Decimal(60) * Decimal(hourly_rate))
