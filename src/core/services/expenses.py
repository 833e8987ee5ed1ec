"""Expense persistence service."""

import logging

from core.db.interface import DataStore, eq
from core.db.records import parse_record, parse_records
from core.errors import ErrorCode, PersistenceError
from core.models.expense import Expense, ExpenseCreate

logger = logging.getLogger(__name__)

EXPENSES_TABLE = "expenses"


def add_expense(store: DataStore, expense: ExpenseCreate) -> Expense:
    row = expense.model_dump()
    row["expense_type"] = expense.expense_type.value
    try:
        rows = store.insert(EXPENSES_TABLE, [row])
    except PersistenceError as e:
        raise PersistenceError(e.message, code=ErrorCode.EXPENSE_SAVE_FAILED) from e

    saved = parse_record(Expense, rows[0])
    logger.info("Added expense %s to trip %s", saved.id, saved.trip_id)
    return saved


def fetch_expenses_for_trip(store: DataStore, trip_id: str) -> dict[str, list[Expense]]:
    """Expenses for one trip, oldest first, keyed by the trip id."""
    if not trip_id:
        return {}

    rows = store.select(EXPENSES_TABLE, [eq("trip_id", trip_id)], order_by="id")
    trips = store.select("trips", [eq("id", trip_id)])
    trip_name = trips[0].get("tripname") if trips else None

    return {trip_id: parse_records(Expense, [{**row, "trip_name": trip_name} for row in rows])}
