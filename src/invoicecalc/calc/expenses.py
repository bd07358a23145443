"""Expense aggregation. Expenses are never split with equity."""

from __future__ import annotations

from typing import Sequence

from invoicecalc.core.exceptions import InvalidAmount
from invoicecalc.models.invoice import Expense, ExpensesTotal

UNCATEGORIZED = "Uncategorized"


def aggregate_expenses(expenses: Sequence[Expense]) -> ExpensesTotal:
    """Sum expense amounts, also totalled per category."""
    total = 0
    by_category: dict[str, int] = {}
    for index, expense in enumerate(expenses):
        if expense.total_amount_in_cents < 0:
            raise InvalidAmount(
                expense.total_amount_in_cents, f"expenses.{index}.total_amount_in_cents"
            )
        total += expense.total_amount_in_cents
        category = expense.category or UNCATEGORIZED
        by_category[category] = by_category.get(category, 0) + expense.total_amount_in_cents

    return ExpensesTotal(expenses_total_cents=total, count=len(expenses), by_category=by_category)
