from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, Field, field_validator, model_validator

Percentage = Annotated[Decimal, Field(ge=0, le=100)]


class ExpenseCategory(str, Enum):
    FOOD = "FOOD"
    TRAVEL = "TRAVEL"
    ACCOMMODATION = "ACCOMMODATION"
    SHOPPING = "SHOPPING"
    MISC = "MISC"

    @property
    def label(self) -> str:
        return EXPENSE_LABELS[self]


EXPENSE_LABELS: dict[ExpenseCategory, str] = {
    ExpenseCategory.FOOD: "Food",
    ExpenseCategory.TRAVEL: "Travel",
    ExpenseCategory.ACCOMMODATION: "Accommodation",
    ExpenseCategory.SHOPPING: "Shopping",
    ExpenseCategory.MISC: "Miscellaneous",
}


def _normalize_category(value: Any) -> Any:
    if isinstance(value, str):
        upper = value.strip().upper()
        return "MISC" if upper == "MISCELLANEOUS" else upper
    return value


class ExpenseCreate(BaseModel):
    trip_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    expense_type: ExpenseCategory = ExpenseCategory.FOOD
    paid_by: str = Field(..., min_length=1)
    split_between: list[str] = Field(..., min_length=1)
    percentages: dict[str, Percentage] = {}

    @field_validator("expense_type", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> Any:
        return _normalize_category(value)

    @model_validator(mode="after")
    def shares_belong_to_participants(self) -> "ExpenseCreate":
        unknown = set(self.percentages) - set(self.split_between)
        if unknown:
            raise ValueError(f"percentages given for non-participants: {sorted(unknown)}")
        return self


class Expense(BaseModel):
    id: int
    trip_id: str
    name: str
    amount: Decimal = Field(..., gt=0)
    expense_type: ExpenseCategory
    paid_by: str
    split_between: list[str] = Field(..., min_length=1)
    # Rows written before per-participant shares existed have no map at all.
    percentages: dict[str, Percentage] | None = None
    trip_name: str | None = None
    created_at: datetime | None = None

    @field_validator("trip_id", mode="before")
    @classmethod
    def stringify_trip_id(cls, value: Any) -> Any:
        return value if value is None or isinstance(value, str) else str(value)

    @field_validator("expense_type", mode="before")
    @classmethod
    def normalize_category(cls, value: Any) -> Any:
        return _normalize_category(value)
