"""Running-balance projection over a window of calendar days."""

from collections.abc import Iterable
from datetime import date, timedelta

from account_tracker.domain.constants import MAX_WINDOW_DAYS
from account_tracker.domain.models import (
    AccountConfig,
    DailyBalancePoint,
    Transaction,
)
from account_tracker.domain.services.date_calendar import iter_days
from account_tracker.domain.services.recurrence import (
    expand,
    expand_all,
    group_by_date,
)
from account_tracker.domain.services.validation import (
    validate_config,
    validate_transactions,
    validate_window,
)


def project(
    transactions: Iterable[Transaction],
    config: AccountConfig,
    window_start: date | str,
    window_end: date | str,
    max_days: int = MAX_WINDOW_DAYS,
) -> list[DailyBalancePoint]:
    """Return one end-of-day balance point per day of the window.

    Days before ``config.starting_date`` report the starting balance and
    ignore their occurrences for balance purposes, although the occurrences
    are still listed on their day. From the starting date on, the balance is
    accumulated day by day in ascending date order, then input order.

    Args:
        transactions: Base transaction templates.
        config: Account starting point.
        window_start: First day of the inclusive window.
        window_end: Last day of the inclusive window.
        max_days: Largest accepted window length.

    Returns:
        list[DailyBalancePoint]: Points for every day, empty when the window
        ends before it starts.

    Raises:
        ProjectionError: On invalid transactions, config or window.
    """
    validate_config(config)
    start, end = validate_window(window_start, window_end, max_days)
    templates = validate_transactions(transactions)
    if end < start:
        return []

    opening_day = config.starting_date
    running = config.starting_balance
    if opening_day < start:
        # Pre-window occurrences are summed as they stream, never kept.
        fold_end = start - timedelta(days=1)
        for template in templates:
            for item in expand(template, opening_day, fold_end):
                running += item.amount

    by_date = group_by_date(expand_all(templates, start, end))
    points: list[DailyBalancePoint] = []
    for day in iter_days(start, end):
        todays = by_date.get(day, [])
        if day >= opening_day:
            for item in todays:
                running += item.amount
            balance = running
        else:
            balance = config.starting_balance
        points.append(
            DailyBalancePoint(
                date=day,
                balance=balance,
                transactions=tuple(todays),
            )
        )
    return points


def balance_on(
    transactions: Iterable[Transaction],
    config: AccountConfig,
    day: date | str,
) -> DailyBalancePoint:
    """Return the projected end-of-day point for a single date."""
    return project(transactions, config, day, day)[0]


__all__ = ["project", "balance_on"]
