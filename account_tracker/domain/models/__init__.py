"""Domain models package."""

from .account import AccountConfig
from .projection import CalendarDay, DailyBalancePoint
from .transactions import ProjectedOccurrence, RecurringPattern, Transaction

__all__ = [
    "AccountConfig",
    "CalendarDay",
    "DailyBalancePoint",
    "ProjectedOccurrence",
    "RecurringPattern",
    "Transaction",
]
