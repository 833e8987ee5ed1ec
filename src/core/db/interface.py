from abc import ABC, abstractmethod
from typing import Any, Literal, NamedTuple, Sequence

Row = dict[str, Any]
FilterOp = Literal["eq", "contains", "in"]


class Filter(NamedTuple):
    column: str
    op: FilterOp
    value: Any


def eq(column: str, value: Any) -> Filter:
    return Filter(column, "eq", value)


def contains(column: str, value: Any) -> Filter:
    """Array/JSON containment: every element of ``value`` is present in the column."""
    return Filter(column, "contains", value)


def in_(column: str, values: Sequence[Any]) -> Filter:
    return Filter(column, "in", list(values))


class DataStore(ABC):
    """Row-level CRUD over the trips, expenses and notifications tables.

    Every call is independent and committed on return. There is no
    transaction spanning two calls.
    """

    @abstractmethod
    def insert(self, table: str, rows: Sequence[Row]) -> list[Row]: ...

    @abstractmethod
    def select(
        self,
        table: str,
        filters: Sequence[Filter] = (),
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]: ...

    @abstractmethod
    def update(self, table: str, values: Row, filters: Sequence[Filter]) -> list[Row]: ...

    @abstractmethod
    def delete(self, table: str, filters: Sequence[Filter]) -> int: ...
