"""Line item aggregation: quantity x rate, rounded per line, summed as integers."""

from __future__ import annotations

from typing import Optional, Sequence

from invoicecalc.calc.money import MAX_CENTS, exact_quantity, format_usd, to_cents, to_decimal
from invoicecalc.core.exceptions import InvalidAmount, InvalidQuantity, MissingRate
from invoicecalc.models.invoice import LineItem, LineItemsTotal, ResolvedLineItem


def aggregate_line_items(items: Sequence[LineItem], default_rate: Optional[int]) -> LineItemsTotal:
    """Resolve each item's rate and amount and total them.

    Quantities are parsed here so errors carry the line's index. Each amount
    is the exact hours x rate rounded once; the total is the sum of those
    rounded amounts, so every line on the invoice adds up to the printed total.
    """
    resolved: list[ResolvedLineItem] = []
    total = 0
    for index, item in enumerate(items):
        field = f"line_items.{index}"
        hours = exact_quantity(item.quantity, f"{field}.quantity")

        rate = item.pay_rate_in_subunits if item.pay_rate_in_subunits is not None else default_rate
        if rate is None:
            raise MissingRate(f"{field}.pay_rate_in_subunits")
        if rate < 0:
            raise InvalidAmount(rate, f"{field}.pay_rate_in_subunits")

        amount = to_cents(hours * rate)
        if total + amount > MAX_CENTS:
            raise InvalidQuantity(item.quantity, f"{field}.quantity", "is too large")
        resolved.append(
            ResolvedLineItem(
                description=item.description,
                quantity=to_decimal(hours),
                pay_rate_in_subunits=rate,
                amount_in_cents=amount,
            )
        )
        total += amount

    return LineItemsTotal(services_total_cents=total, resolved_items=resolved)


def rate_above_default_warning(items: Sequence[LineItem], default_rate: Optional[int]) -> str | None:
    """Warn when any line bills above the contractor's default rate."""
    if default_rate is None:
        return None
    if any(
        item.pay_rate_in_subunits is not None and item.pay_rate_in_subunits > default_rate
        for item in items
    ):
        return (
            f"This invoice includes rates above your default of {format_usd(default_rate)}/hour. "
            "Please check before submitting."
        )
    return None
