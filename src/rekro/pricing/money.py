"""Number hygiene shared by every pricing function.

Pricing renders while forms are half filled, so nothing here raises: anything
that is not a finite real number is treated as absent.
"""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any


def finite_or_none(value: Any) -> float | None:
    """Return ``value`` as a float if it is a finite real number, else None."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    try:
        number = float(value)
    except OverflowError:
        # ints beyond float range
        return None
    return number if math.isfinite(number) else None


def non_negative(value: Any) -> float:
    """Finite, non-negative float; everything else becomes 0."""
    number = finite_or_none(value)
    if number is None or number < 0:
        return 0.0
    return number


def to_cents(value: Any) -> int:
    """Whole cents, rounding half away from zero as a till would."""
    amount = non_negative(value)
    return int(Decimal(repr(amount)).scaleb(2).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> float:
    return cents / 100


def money(value: Any) -> float:
    """Round a dollar amount to cents, collapsing invalid input to 0."""
    return from_cents(to_cents(value))
