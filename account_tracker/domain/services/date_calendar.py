"""Calendar date arithmetic for the projection core.

Dates are ``datetime.date`` values inside the core and ``YYYY-MM-DD``
strings at the boundaries. Month and year steps clamp the day of month to
the last valid day of the target month (Jan 31 + 1 month is Feb 29 in a leap
year, Feb 28 otherwise), which is the behavior of
``dateutil.relativedelta``. Timezones only decide which calendar day "now"
falls on; they never change the size of a step.
"""

import calendar
from collections.abc import Iterator
from datetime import date, datetime, timedelta, timezone as dt_timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta

from account_tracker.domain.constants import (
    DATE_FORMAT,
    FREQUENCIES,
    FREQUENCY_DAILY,
    FREQUENCY_MONTHLY,
    FREQUENCY_WEEKLY,
    FREQUENCY_YEARLY,
)
from account_tracker.domain.errors import (
    InvalidConfig,
    InvalidRecurrencePattern,
    InvalidWindow,
)


def parse_date(value: date | str, field_name: str = "date") -> date:
    """Parse a strict ``YYYY-MM-DD`` string into a date.

    Args:
        value: Date string, or an existing ``date`` returned unchanged.
        field_name: Name used in the error message.

    Returns:
        date: Parsed calendar date.

    Raises:
        InvalidWindow: If the value is not a zero-padded ISO date.
    """
    if isinstance(value, datetime):
        raise InvalidWindow(
            f"{field_name} must be a calendar date, got a datetime: {value!r}"
        )
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidWindow(f"{field_name} must be YYYY-MM-DD, got {value!r}")
    candidate = value.strip()
    try:
        parsed = datetime.strptime(candidate, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidWindow(
            f"{field_name} must be YYYY-MM-DD, got {value!r}"
        ) from exc
    if parsed.strftime(DATE_FORMAT) != candidate:
        raise InvalidWindow(f"{field_name} must be YYYY-MM-DD, got {value!r}")
    return parsed


def format_date(value: date) -> str:
    """Return the ``YYYY-MM-DD`` form of a date."""
    return value.strftime(DATE_FORMAT)


def compare_dates(left: date | str, right: date | str) -> int:
    """Return -1, 0 or 1 as ``left`` is before, equal to or after ``right``."""
    left_key = format_date(parse_date(left))
    right_key = format_date(parse_date(right))
    if left_key < right_key:
        return -1
    if left_key > right_key:
        return 1
    return 0


def validate_frequency(frequency: str) -> str:
    """Return the frequency when supported.

    Raises:
        InvalidRecurrencePattern: If the frequency is unknown.
    """
    if frequency not in FREQUENCIES:
        raise InvalidRecurrencePattern(
            f"Unknown frequency {frequency!r}; expected one of "
            f"{', '.join(FREQUENCIES)}"
        )
    return frequency


def validate_interval(interval: int) -> int:
    """Return the interval when it is a positive integer.

    Raises:
        InvalidRecurrencePattern: If the interval is not a positive int.
    """
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise InvalidRecurrencePattern(
            f"Interval must be a positive integer, got {interval!r}"
        )
    if interval <= 0:
        raise InvalidRecurrencePattern(
            f"Interval must be a positive integer, got {interval}"
        )
    return interval


def shift_date(value: date, frequency: str, units: int) -> date:
    """Move a date by a whole number of frequency units.

    Args:
        value: Starting date.
        frequency: Unit of the step.
        units: Number of units; zero returns ``value``.

    Returns:
        date: Shifted date, clamped to the month end for month/year steps.
    """
    validate_frequency(frequency)
    if frequency == FREQUENCY_DAILY:
        return value + timedelta(days=units)
    if frequency == FREQUENCY_WEEKLY:
        return value + timedelta(weeks=units)
    if frequency == FREQUENCY_MONTHLY:
        return value + relativedelta(months=units)
    return value + relativedelta(years=units)


def add_interval(value: date, frequency: str, interval: int) -> date:
    """Return the next date ``interval`` units of ``frequency`` later.

    Raises:
        InvalidRecurrencePattern: On unknown frequency or bad interval.
    """
    validate_frequency(frequency)
    validate_interval(interval)
    return shift_date(value, frequency, interval)


def step_days(frequency: str) -> int | None:
    """Return the fixed length of one unit in days, if it has one."""
    if frequency == FREQUENCY_DAILY:
        return 1
    if frequency == FREQUENCY_WEEKLY:
        return 7
    if frequency in (FREQUENCY_MONTHLY, FREQUENCY_YEARLY):
        return None
    validate_frequency(frequency)
    return None


def resolve_timezone(name: str) -> ZoneInfo:
    """Return the ``ZoneInfo`` for an IANA identifier.

    Raises:
        InvalidConfig: If the identifier is empty or unknown.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidConfig(f"Timezone must be an IANA name, got {name!r}")
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidConfig(f"Unknown timezone {name!r}") from exc


def date_in_timezone(instant: datetime, timezone: str) -> date:
    """Return the calendar date of ``instant`` in ``timezone``.

    Naive instants are read as UTC.
    """
    zone = resolve_timezone(timezone)
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=dt_timezone.utc)
    return instant.astimezone(zone).date()


def format_in_timezone(instant: datetime, timezone: str) -> str:
    """Return ``YYYY-MM-DD`` for ``instant`` as seen in ``timezone``."""
    return format_date(date_in_timezone(instant, timezone))


def today_in_timezone(timezone: str, now: datetime | None = None) -> date:
    """Return today's date in ``timezone``.

    Args:
        timezone: IANA timezone identifier.
        now: Optional reference instant, defaults to the current time.
    """
    reference = now or datetime.now(dt_timezone.utc)
    return date_in_timezone(reference, timezone)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every date from ``start`` to ``end`` inclusive."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a month.

    Raises:
        InvalidWindow: If year or month is out of range.
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidWindow(f"Year must be an integer, got {year!r}")
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidWindow(f"Month must be an integer, got {month!r}")
    if not 1 <= month <= 12:
        raise InvalidWindow(f"Month must be between 1 and 12, got {month}")
    if not date.min.year < year < date.max.year:
        raise InvalidWindow(f"Year out of range: {year}")
    return date(year, month, 1), date(year, month, days_in_month(year, month))


__all__ = [
    "parse_date",
    "format_date",
    "compare_dates",
    "validate_frequency",
    "validate_interval",
    "shift_date",
    "add_interval",
    "step_days",
    "resolve_timezone",
    "date_in_timezone",
    "format_in_timezone",
    "today_in_timezone",
    "iter_days",
    "days_in_month",
    "month_bounds",
]
