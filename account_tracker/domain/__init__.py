"""Domain package for projection rules and core models."""

from .constants import DEFAULT_TIMEZONE, FREQUENCIES
from .errors import (
    InvalidConfig,
    InvalidRecurrencePattern,
    InvalidTransaction,
    InvalidWindow,
    ProjectionError,
)
from .models import (
    AccountConfig,
    CalendarDay,
    DailyBalancePoint,
    ProjectedOccurrence,
    RecurringPattern,
    Transaction,
)
from .services import (
    compute_balance_series,
    compute_month_grid,
    expand_recurring,
)

__all__ = [
    "AccountConfig",
    "CalendarDay",
    "DailyBalancePoint",
    "ProjectedOccurrence",
    "RecurringPattern",
    "Transaction",
    "DEFAULT_TIMEZONE",
    "FREQUENCIES",
    "ProjectionError",
    "InvalidConfig",
    "InvalidRecurrencePattern",
    "InvalidTransaction",
    "InvalidWindow",
    "expand_recurring",
    "compute_balance_series",
    "compute_month_grid",
]
