"""Expansion of transaction templates into dated occurrences.

Occurrence ``k`` of a recurring template is the anchor date shifted by
``k * interval`` frequency units, computed from the anchor each time so that
month-end clamping never drifts (a Jan 31 monthly template falls on Feb 29,
Mar 31, Apr 30). The anchor itself is occurrence zero.
"""

from collections.abc import Iterable, Iterator
from datetime import date

from account_tracker.domain.constants import FREQUENCY_YEARLY
from account_tracker.domain.models import (
    ProjectedOccurrence,
    RecurringPattern,
    Transaction,
)
from account_tracker.domain.services.date_calendar import (
    format_date,
    parse_date,
    shift_date,
    step_days,
)
from account_tracker.domain.services.validation import (
    validate_transaction,
    validate_transactions,
)


def occurrence_id(transaction_id: str, occurrence_date: date) -> str:
    """Return the synthetic id of a recurring occurrence."""
    return f"{transaction_id}_{format_date(occurrence_date)}"


def _first_step(
    anchor: date,
    pattern: RecurringPattern,
    window_start: date,
) -> int:
    """Return a step index whose date is not after ``window_start``.

    Skips the steps that certainly fall before the window so long series
    queried over a late window are not walked from the anchor.
    """
    if window_start <= anchor:
        return 0
    days = step_days(pattern.frequency)
    if days is not None:
        span = days * pattern.interval
        return (window_start - anchor).days // span
    months_per_unit = 12 if pattern.frequency == FREQUENCY_YEARLY else 1
    span = months_per_unit * pattern.interval
    months = (
        (window_start.year - anchor.year) * 12
        + window_start.month
        - anchor.month
    )
    return max(0, months // span)


def _occurrence(
    transaction: Transaction,
    occurrence_date: date,
) -> ProjectedOccurrence:
    return ProjectedOccurrence(
        id=(
            occurrence_id(transaction.id, occurrence_date)
            if transaction.is_recurring
            else transaction.id
        ),
        source_transaction_id=transaction.id,
        date=occurrence_date,
        name=transaction.name,
        amount=transaction.amount,
        note=transaction.note,
        is_recurring=transaction.is_recurring,
    )


def _iter_recurring(
    transaction: Transaction,
    window_start: date,
    window_end: date,
) -> Iterator[ProjectedOccurrence]:
    pattern = transaction.recurring_pattern
    limit = window_end
    if pattern.end_date is not None and pattern.end_date < limit:
        limit = pattern.end_date
    anchor = transaction.date
    if limit < anchor:
        return
    step = _first_step(anchor, pattern, window_start)
    while True:
        try:
            current = shift_date(
                anchor,
                pattern.frequency,
                step * pattern.interval,
            )
        except (OverflowError, ValueError):
            # Past date.max, hence past any representable limit.
            return
        if current > limit:
            return
        if current >= window_start:
            yield _occurrence(transaction, current)
        step += 1


def expand(
    transaction: Transaction,
    window_start: date | str,
    window_end: date | str,
) -> Iterator[ProjectedOccurrence]:
    """Expand one template into its occurrences inside a window.

    The template is validated before the iterator is returned, so a bad
    pattern fails at call time rather than on first iteration.

    Args:
        transaction: Template to expand.
        window_start: First day of the inclusive window.
        window_end: Last day of the inclusive window.

    Returns:
        Iterator[ProjectedOccurrence]: Occurrences in ascending date order.

    Raises:
        InvalidRecurrencePattern: On unknown frequency or bad interval.
        InvalidTransaction: On malformed template fields.
        InvalidWindow: On unparseable window dates.
    """
    validate_transaction(transaction)
    start = parse_date(window_start, "start_date")
    end = parse_date(window_end, "end_date")
    if end < start:
        return iter(())
    if not transaction.is_recurring:
        if start <= transaction.date <= end:
            return iter((_occurrence(transaction, transaction.date),))
        return iter(())
    return _iter_recurring(transaction, start, end)


def expand_all(
    transactions: Iterable[Transaction],
    window_start: date | str,
    window_end: date | str,
) -> list[ProjectedOccurrence]:
    """Expand every template and merge the occurrences.

    Ordering is by date, then template input order, then occurrence index.

    Raises:
        ProjectionError: If any template or the window is invalid.
    """
    templates = validate_transactions(transactions)
    start = parse_date(window_start, "start_date")
    end = parse_date(window_end, "end_date")
    if end < start:
        return []
    merged: list[tuple[date, int, ProjectedOccurrence]] = []
    for position, template in enumerate(templates):
        for item in expand(template, start, end):
            merged.append((item.date, position, item))
    merged.sort(key=lambda entry: (entry[0], entry[1]))
    return [item for _, _, item in merged]


def group_by_date(
    occurrences: Iterable[ProjectedOccurrence],
) -> dict[date, list[ProjectedOccurrence]]:
    """Group occurrences by date, keeping their relative order."""
    grouped: dict[date, list[ProjectedOccurrence]] = {}
    for item in occurrences:
        grouped.setdefault(item.date, []).append(item)
    return grouped


__all__ = [
    "occurrence_id",
    "expand",
    "expand_all",
    "group_by_date",
]
