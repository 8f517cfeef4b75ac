"""Domain models produced by the balance projection."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from .transactions import ProjectedOccurrence


@dataclass(frozen=True)
class DailyBalancePoint:
    """End-of-day balance with the occurrences dated that day."""

    date: date
    balance: Decimal
    transactions: tuple[ProjectedOccurrence, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "date": self.date.isoformat(),
            "balance": str(self.balance),
            "transactions": [item.to_dict() for item in self.transactions],
        }


@dataclass(frozen=True)
class CalendarDay(DailyBalancePoint):
    """Month grid cell; padding cells belong to the adjacent months."""

    is_current_month: bool = True

    def to_dict(self) -> dict[str, object]:
        payload = super().to_dict()
        payload["isCurrentMonth"] = self.is_current_month
        return payload


__all__ = ["DailyBalancePoint", "CalendarDay"]
