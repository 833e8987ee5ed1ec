"""Validate raw rows into tagged records at the database boundary."""

from typing import Iterable, TypeVar

import pydantic

from core.db.interface import Row
from core.errors import MalformedRecordError

M = TypeVar("M", bound=pydantic.BaseModel)


def parse_record(model: type[M], row: Row) -> M:
    try:
        return model.model_validate(row)
    except pydantic.ValidationError as e:
        raise MalformedRecordError(f"Malformed {model.__name__} row {row.get('id')!r}: {e}") from e


def parse_records(model: type[M], rows: Iterable[Row]) -> list[M]:
    return [parse_record(model, row) for row in rows]
