"""Domain model for the account configuration."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AccountConfig:
    """Starting point of the balance projection.

    Attributes:
        starting_balance: Balance before any counted transaction.
        starting_date: First day whose transactions affect the balance.
        timezone: IANA timezone used to resolve "today".
    """

    starting_balance: Decimal
    starting_date: date
    timezone: str

    def to_dict(self) -> dict[str, object]:
        return {
            "startingBalance": str(self.starting_balance),
            "startingDate": self.starting_date.isoformat(),
            "timezone": self.timezone,
        }


__all__ = ["AccountConfig"]
