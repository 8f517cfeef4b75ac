"""Tests for calendar date arithmetic."""

from datetime import date, datetime, timezone

import pytest

from account_tracker.domain.errors import (
    InvalidConfig,
    InvalidRecurrencePattern,
    InvalidWindow,
)
from account_tracker.domain.services.date_calendar import (
    add_interval,
    compare_dates,
    format_date,
    format_in_timezone,
    iter_days,
    month_bounds,
    parse_date,
    today_in_timezone,
)


def test_parse_date_accepts_zero_padded_iso() -> None:
    """Strict YYYY-MM-DD strings and date objects should parse."""
    assert parse_date("2024-03-05") == date(2024, 3, 5)
    assert parse_date(date(2024, 3, 5)) == date(2024, 3, 5)


def test_parse_date_rejects_malformed_values() -> None:
    """Unpadded, garbage and datetime values are invalid windows."""
    with pytest.raises(InvalidWindow):
        parse_date("2024-3-5")
    with pytest.raises(InvalidWindow):
        parse_date("next tuesday")
    with pytest.raises(InvalidWindow):
        parse_date(datetime(2024, 3, 5, 12, 0))
    with pytest.raises(InvalidWindow):
        parse_date(None)


def test_format_date_is_zero_padded() -> None:
    assert format_date(date(2024, 1, 2)) == "2024-01-02"


def test_add_interval_month_end_clamps_to_last_valid_day() -> None:
    """Jan 31 plus one month lands on the last day of February."""
    assert add_interval(date(2024, 1, 31), "monthly", 1) == date(2024, 2, 29)
    assert add_interval(date(2023, 1, 31), "monthly", 1) == date(2023, 2, 28)
    assert add_interval(date(2024, 8, 31), "monthly", 1) == date(2024, 9, 30)


def test_add_interval_year_from_leap_day_clamps() -> None:
    assert add_interval(date(2024, 2, 29), "yearly", 1) == date(2025, 2, 28)
    assert add_interval(date(2024, 2, 29), "yearly", 4) == date(2028, 2, 29)


def test_add_interval_days_and_weeks_are_exact() -> None:
    assert add_interval(date(2024, 12, 30), "daily", 3) == date(2025, 1, 2)
    assert add_interval(date(2024, 1, 1), "weekly", 2) == date(2024, 1, 15)


def test_add_interval_rejects_bad_patterns() -> None:
    """Non-positive intervals and unknown frequencies are invalid."""
    with pytest.raises(InvalidRecurrencePattern):
        add_interval(date(2024, 1, 1), "daily", 0)
    with pytest.raises(InvalidRecurrencePattern):
        add_interval(date(2024, 1, 1), "weekly", -1)
    with pytest.raises(InvalidRecurrencePattern):
        add_interval(date(2024, 1, 1), "hourly", 1)
    with pytest.raises(InvalidRecurrencePattern):
        add_interval(date(2024, 1, 1), "daily", True)


def test_compare_dates_orders_strings_and_dates() -> None:
    assert compare_dates("2024-01-09", "2024-01-10") == -1
    assert compare_dates(date(2024, 1, 10), "2024-01-10") == 0
    assert compare_dates("2025-01-01", "2024-12-31") == 1


def test_format_in_timezone_resolves_day_boundary() -> None:
    """The same instant falls on different days in different zones."""
    instant = datetime(2024, 1, 1, 5, 0, tzinfo=timezone.utc)

    assert format_in_timezone(instant, "America/Los_Angeles") == "2023-12-31"
    assert format_in_timezone(instant, "Asia/Tokyo") == "2024-01-01"


def test_format_in_timezone_reads_naive_instants_as_utc() -> None:
    before_midnight = datetime(2024, 1, 1, 4, 59)
    midnight = datetime(2024, 1, 1, 5, 0)

    assert format_in_timezone(before_midnight, "America/New_York") == (
        "2023-12-31"
    )
    assert format_in_timezone(midnight, "America/New_York") == "2024-01-01"


def test_today_in_timezone_uses_reference_instant() -> None:
    now = datetime(2024, 6, 30, 23, 30, tzinfo=timezone.utc)

    assert today_in_timezone("Europe/Paris", now=now) == date(2024, 7, 1)
    assert today_in_timezone("UTC", now=now) == date(2024, 6, 30)


def test_unknown_timezone_is_invalid_config() -> None:
    with pytest.raises(InvalidConfig):
        today_in_timezone("Mars/Olympus_Mons")
    with pytest.raises(InvalidConfig):
        today_in_timezone("")


def test_iter_days_is_inclusive() -> None:
    days = list(iter_days(date(2024, 2, 27), date(2024, 3, 1)))

    assert days == [
        date(2024, 2, 27),
        date(2024, 2, 28),
        date(2024, 2, 29),
        date(2024, 3, 1),
    ]
    assert list(iter_days(date(2024, 3, 2), date(2024, 3, 1))) == []


def test_month_bounds_validates_month() -> None:
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    with pytest.raises(InvalidWindow):
        month_bounds(2024, 13)
    with pytest.raises(InvalidWindow):
        month_bounds(2024, 0)
