"""Per-viewer expense balances for a trip."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from core.models.balances import Balances
from core.models.expense import Expense

_CENTS = Decimal("0.01")
_HUNDRED = Decimal(100)


def _round(value: Decimal) -> Decimal:
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def calculate_balances(expenses: Iterable[Expense], viewer_id: str) -> Balances:
    """Compute what the viewer owes, has paid, and what the trip cost overall.

    Shares come from each expense's percentage map. A missing or empty map
    attributes nothing to anyone, so such an expense only moves the trip and
    spent totals. When the viewer paid, only the other participants' shares
    are credited back; the payer's own share is never netted.
    """
    total_owed = Decimal(0)
    total_spent = Decimal(0)
    total_trip = Decimal(0)

    for expense in expenses:
        total_trip += expense.amount
        shares = expense.percentages or {}

        if expense.paid_by == viewer_id:
            total_spent += expense.amount
            others_owe = sum(
                (expense.amount * percent / _HUNDRED for uid, percent in shares.items() if uid != viewer_id),
                Decimal(0),
            )
            total_owed -= others_owe
        else:
            total_owed += expense.amount * shares.get(viewer_id, Decimal(0)) / _HUNDRED

    return Balances(total_owed=_round(total_owed), total_spent=_round(total_spent), total_trip=_round(total_trip))


def calculate_equal_split_balances(expenses: Iterable[Expense], viewer_id: str) -> Balances:
    """Balances for expenses divided evenly between their participants."""
    total_owed = Decimal(0)
    total_spent = Decimal(0)
    total_trip = Decimal(0)

    for expense in expenses:
        split_amount = expense.amount / len(expense.split_between)
        total_trip += expense.amount

        if expense.paid_by == viewer_id:
            total_spent += expense.amount

        if viewer_id in expense.split_between:
            if expense.paid_by == viewer_id:
                total_owed -= split_amount * (len(expense.split_between) - 1)
            else:
                total_owed += split_amount

    return Balances(total_owed=_round(total_owed), total_spent=_round(total_spent), total_trip=_round(total_trip))
