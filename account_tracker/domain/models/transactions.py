"""Domain models for transaction templates and their occurrences."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class RecurringPattern:
    """Repetition rule of a recurring transaction.

    Attributes:
        frequency: One of ``daily``, ``weekly``, ``monthly``, ``yearly``.
        interval: Number of frequency units between occurrences.
        end_date: Optional last date an occurrence may fall on.
    """

    frequency: str
    interval: int = 1
    end_date: date | None = None


@dataclass(frozen=True)
class Transaction:
    """Base transaction as recorded by the user.

    Attributes:
        id: Stable identifier, unique among base transactions.
        date: Anchor date, or the only date of a one-off transaction.
        name: Display label.
        amount: Signed amount; positive is income, negative is spending.
        note: Optional free text.
        is_recurring: Whether ``recurring_pattern`` applies.
        recurring_pattern: Repetition rule for recurring transactions.
    """

    id: str
    date: date
    name: str
    amount: Decimal
    note: str | None = None
    is_recurring: bool = False
    recurring_pattern: RecurringPattern | None = None


@dataclass(frozen=True)
class ProjectedOccurrence:
    """Concrete dated instance of a transaction template."""

    id: str
    source_transaction_id: str
    date: date
    name: str
    amount: Decimal
    note: str | None = None
    is_recurring: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return a flat, JSON-friendly representation."""
        return {
            "id": self.id,
            "sourceTransactionId": self.source_transaction_id,
            "date": self.date.isoformat(),
            "name": self.name,
            "amount": str(self.amount),
            "note": self.note,
            "isRecurring": self.is_recurring,
        }


__all__ = ["RecurringPattern", "Transaction", "ProjectedOccurrence"]
