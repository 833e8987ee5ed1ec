from core.db.interface import DataStore
from core.models.balances import Balances
from core.models.expense import Expense, ExpenseCreate
from core.services.balances import calculate_balances
from core.services.expenses import add_expense, fetch_expenses_for_trip
from core.state.base import Provider
from core.state.cache import RefreshCache
from core.state.notices import NoticeSink


class ExpenseProvider(Provider):
    """Expenses of the selected trip, keyed by trip id."""

    def __init__(self, store: DataStore, notices: NoticeSink | None = None) -> None:
        super().__init__(notices)
        self._store = store
        self.trip_id: str | None = None
        self.expenses: dict[str, list[Expense]] = {}
        self._cache: RefreshCache[str, list[Expense]] = RefreshCache(self._fetch)

    def _fetch(self, trip_id: str) -> list[Expense]:
        return fetch_expenses_for_trip(self._store, trip_id).get(trip_id, [])

    def sync(self, trip_id: str | None) -> None:
        """Follow a change of selected trip."""
        self.trip_id = trip_id
        if not trip_id:
            self.expenses = {}
            return
        self.fetch_expenses(trip_id)

    def fetch_expenses(self, trip_id: str) -> None:
        result = self._read(lambda: self._cache.get(trip_id))
        if result is not None:
            self.expenses = {**self.expenses, trip_id: result}

    def handle_refresh(self) -> None:
        if self.trip_id:
            self._cache.invalidate(self.trip_id)
            self.fetch_expenses(self.trip_id)

    def add_expense(self, expense: ExpenseCreate) -> Expense | None:
        saved = self._write(lambda: add_expense(self._store, expense), "Expense added successfully")
        if saved is not None:
            self._cache.invalidate(saved.trip_id)
            if saved.trip_id == self.trip_id:
                self.handle_refresh()
        return saved

    @property
    def selected_expenses(self) -> list[Expense]:
        return self.expenses.get(self.trip_id, []) if self.trip_id else []

    def balances(self, viewer_id: str) -> Balances:
        return calculate_balances(self.selected_expenses, viewer_id)
