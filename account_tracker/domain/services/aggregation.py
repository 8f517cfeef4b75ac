"""Presentation-ready views over the running-balance projection."""

import math
from collections.abc import Iterable, Sequence
from datetime import timedelta

from account_tracker.domain.constants import DAYS_PER_WEEK, DEFAULT_WEEK_START
from account_tracker.domain.errors import InvalidWindow
from account_tracker.domain.models import (
    AccountConfig,
    CalendarDay,
    DailyBalancePoint,
    Transaction,
)
from account_tracker.domain.services.date_calendar import month_bounds
from account_tracker.domain.services.projection import project


def daily_series(
    points: Iterable[DailyBalancePoint],
) -> list[DailyBalancePoint]:
    """Return the chart series, one point per day of the projection."""
    return list(points)


def chart_rows(
    points: Iterable[DailyBalancePoint],
) -> list[dict[str, object]]:
    """Flatten points into plain rows for charting libraries."""
    return [
        {
            "date": point.date.isoformat(),
            "balance": float(point.balance),
            "transaction_count": len(point.transactions),
        }
        for point in points
    ]


def month_grid(
    transactions: Iterable[Transaction],
    config: AccountConfig,
    year: int,
    month: int,
    week_start: int = DEFAULT_WEEK_START,
) -> list[CalendarDay]:
    """Return the calendar cells of a month padded to whole weeks.

    Leading cells come from the previous month so the first day lands in its
    weekday column; trailing cells from the next month complete the last
    week. Padding cells carry real projected balances.

    Args:
        transactions: Base transaction templates.
        config: Account starting point.
        year: Calendar year.
        month: Month number, 1 to 12.
        week_start: Weekday of the first column (0 is Monday, 6 is Sunday).

    Returns:
        list[CalendarDay]: A multiple of seven cells.

    Raises:
        InvalidWindow: If the month or week start is out of range.
        ProjectionError: On invalid transactions or config.
    """
    if isinstance(week_start, bool) or week_start not in range(7):
        raise InvalidWindow(f"Week start must be 0-6, got {week_start!r}")
    first, last = month_bounds(year, month)
    leading = (first.weekday() - week_start) % DAYS_PER_WEEK
    cell_count = (
        math.ceil((last.day + leading) / DAYS_PER_WEEK) * DAYS_PER_WEEK
    )
    grid_start = first - timedelta(days=leading)
    grid_end = grid_start + timedelta(days=cell_count - 1)
    points = project(transactions, config, grid_start, grid_end)
    return [
        CalendarDay(
            date=point.date,
            balance=point.balance,
            transactions=point.transactions,
            is_current_month=first <= point.date <= last,
        )
        for point in points
    ]


def weeks(cells: Sequence[CalendarDay]) -> list[list[CalendarDay]]:
    """Split grid cells into rows of seven."""
    return [
        list(cells[index:index + DAYS_PER_WEEK])
        for index in range(0, len(cells), DAYS_PER_WEEK)
    ]


__all__ = ["daily_series", "chart_rows", "month_grid", "weeks"]
