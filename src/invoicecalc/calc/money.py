"""Money and quantity primitives.

All money is integer cents. Quantities are hours (or units), entered either
as ``HH:MM`` or as a bare decimal. Amounts are computed on exact fractions
and rounded once, so ``00:11`` at 1530 cents/hour is 280.5 -> 281.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction

from invoicecalc.core.exceptions import InvalidAmount, InvalidQuantity

_TIME_RE = re.compile(r"^(\d+):(\d{1,2})$")
_HALF = Fraction(1, 2)
_MINUTES_PER_HOUR = 60

# Amounts are stored as signed 64-bit integers.
MAX_CENTS = 2**63 - 1


def exact_quantity(value: str | int | Decimal, field: str | None = None) -> Fraction:
    """Parse ``HH:MM`` or decimal notation into exact hours.

    ``"00:11"`` gives ``Fraction(11, 60)``; ``"2.5"`` gives ``Fraction(5, 2)``.
    """
    if isinstance(value, bool):
        raise InvalidQuantity(value, field, "must be a number")
    if isinstance(value, (int, Decimal)):
        quantity = Decimal(value)
    else:
        text = str(value).strip()
        match = _TIME_RE.match(text)
        if match:
            hours, minutes = int(match.group(1)), int(match.group(2))
            if minutes >= _MINUTES_PER_HOUR:
                raise InvalidQuantity(value, field, "minutes must be between 00 and 59")
            return Fraction(hours * _MINUTES_PER_HOUR + minutes, _MINUTES_PER_HOUR)
        try:
            quantity = Decimal(text)
        except InvalidOperation:
            raise InvalidQuantity(value, field, "must be a number or HH:MM") from None

    if not quantity.is_finite():
        raise InvalidQuantity(value, field, "must be a finite number")
    if quantity < 0:
        raise InvalidQuantity(value, field)
    return Fraction(quantity)


def to_decimal(value: Fraction) -> Decimal:
    """Decimal rendering of an exact quantity, for storage and display."""
    return Decimal(value.numerator) / Decimal(value.denominator)


def parse_quantity(value: str | int | Decimal, field: str | None = None) -> Decimal:
    """Parse ``HH:MM`` or decimal notation into decimal hours.

    ``"02:30"`` and ``"2.5"`` both give ``Decimal("2.5")``. Use
    ``exact_quantity`` when the result feeds a money calculation.
    """
    return to_decimal(exact_quantity(value, field))


def _round_half_up(exact: Fraction) -> int:
    rounded = math.floor(abs(exact) + _HALF)
    return -rounded if exact < 0 else rounded


def to_cents(amount_in_subunits: Decimal | Fraction | int) -> int:
    """Round a fractional cent amount to whole cents, half up (away from zero)."""
    return _round_half_up(Fraction(amount_in_subunits))


def dollars_to_cents(amount: str | int | Decimal, field: str | None = None) -> int:
    """Convert a dollar amount ("45.99") to cents (4599)."""
    if isinstance(amount, float):
        amount = str(amount)
    try:
        dollars = Decimal(amount)
    except InvalidOperation:
        raise InvalidAmount(amount, field, "must be a number") from None
    if not dollars.is_finite():
        raise InvalidAmount(amount, field, "must be a finite number")
    cents = to_cents(Fraction(dollars) * 100)
    if abs(cents) > MAX_CENTS:
        raise InvalidAmount(amount, field, "is too large")
    return cents


def format_quantity(quantity: Decimal) -> str:
    """Render decimal hours as ``HH:MM`` (10 -> "10:00", 2.5 -> "02:30")."""
    total_minutes = _round_half_up(Fraction(Decimal(quantity)) * _MINUTES_PER_HOUR)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def format_usd(cents: int) -> str:
    """Render cents as dollars; whole-dollar amounts omit the cents ("$6,000", "$45.99")."""
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    if remainder:
        return f"{sign}${dollars:,}.{remainder:02d}"
    return f"{sign}${dollars:,}"
