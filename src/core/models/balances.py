"""Derived per-viewer totals for one trip's expenses."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict


class BalanceStatus(str, Enum):
    OWES = "owes"
    OWED = "owed"
    SETTLED = "settled"


class Balances(BaseModel):
    """Sign convention: total_owed > 0 means the viewer owes money,
    < 0 means others owe the viewer, 0 means settled."""

    model_config = ConfigDict(frozen=True)

    total_owed: Decimal
    total_spent: Decimal
    total_trip: Decimal

    @property
    def status(self) -> BalanceStatus:
        if self.total_owed > 0:
            return BalanceStatus.OWES
        if self.total_owed < 0:
            return BalanceStatus.OWED
        return BalanceStatus.SETTLED

    @property
    def summary(self) -> str:
        if self.status is BalanceStatus.OWES:
            return f"You owe: {self.total_owed}"
        if self.status is BalanceStatus.OWED:
            return f"People owe you: {abs(self.total_owed)}"
        return "All settled"
