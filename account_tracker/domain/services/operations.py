"""Caller-facing projection operations over explicit snapshots."""

from collections.abc import Iterable
from datetime import date

from account_tracker.domain.models import (
    AccountConfig,
    CalendarDay,
    DailyBalancePoint,
    ProjectedOccurrence,
    Transaction,
)
from account_tracker.domain.services.aggregation import (
    daily_series,
    month_grid,
)
from account_tracker.domain.services.projection import project
from account_tracker.domain.services.recurrence import expand_all


def expand_recurring(
    transactions: Iterable[Transaction],
    start_date: date | str,
    end_date: date | str,
) -> list[ProjectedOccurrence]:
    """Return the flattened occurrences of every transaction in a window."""
    return expand_all(transactions, start_date, end_date)


def compute_balance_series(
    transactions: Iterable[Transaction],
    config: AccountConfig,
    start_date: date | str,
    end_date: date | str,
) -> list[DailyBalancePoint]:
    """Return the daily balance series for a window."""
    return daily_series(project(transactions, config, start_date, end_date))


def compute_month_grid(
    transactions: Iterable[Transaction],
    config: AccountConfig,
    year: int,
    month: int,
) -> list[CalendarDay]:
    """Return the padded calendar grid of a month."""
    return month_grid(transactions, config, year, month)


__all__ = [
    "expand_recurring",
    "compute_balance_series",
    "compute_month_grid",
]
