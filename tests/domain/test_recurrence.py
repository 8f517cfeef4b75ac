"""Tests for the recurrence expander."""

from datetime import date
from decimal import Decimal

import pytest

from account_tracker.domain.errors import (
    InvalidRecurrencePattern,
    InvalidTransaction,
    InvalidWindow,
)
from account_tracker.domain.models import RecurringPattern, Transaction
from account_tracker.domain.services.recurrence import expand, expand_all


def _recurring(
    tx_id: str,
    anchor: date,
    frequency: str,
    interval: int = 1,
    end_date: date | None = None,
    amount: str = "-10",
) -> Transaction:
    return Transaction(
        id=tx_id,
        date=anchor,
        name=f"Template {tx_id}",
        amount=Decimal(amount),
        note="note",
        is_recurring=True,
        recurring_pattern=RecurringPattern(
            frequency=frequency,
            interval=interval,
            end_date=end_date,
        ),
    )


def _one_off(tx_id: str, day: date, amount: str = "25") -> Transaction:
    return Transaction(
        id=tx_id,
        date=day,
        name=f"One-off {tx_id}",
        amount=Decimal(amount),
    )


def _dates(occurrences) -> list[str]:
    return [item.date.isoformat() for item in occurrences]


def test_daily_series_yields_one_occurrence_per_day() -> None:
    """Anchor day counts as the first occurrence."""
    template = _recurring("d", date(2024, 1, 1), "daily")

    result = list(expand(template, "2024-01-01", "2024-01-10"))

    assert len(result) == 10
    assert result[0].date == date(2024, 1, 1)
    assert result[-1].date == date(2024, 1, 10)


def test_expand_is_repeatable() -> None:
    """Expanding twice with the same window gives the same result."""
    template = _recurring("w", date(2024, 1, 3), "weekly", interval=2)

    first = list(expand(template, "2024-01-01", "2024-03-31"))
    second = list(expand(template, "2024-01-01", "2024-03-31"))

    assert first == second
    assert _dates(first) == [
        "2024-01-03",
        "2024-01-17",
        "2024-01-31",
        "2024-02-14",
        "2024-02-28",
        "2024-03-13",
        "2024-03-27",
    ]


def test_non_recurring_transaction_passes_through_once() -> None:
    inside = _one_off("a", date(2024, 1, 5))

    assert _dates(expand(inside, "2024-01-01", "2024-01-31")) == [
        "2024-01-05"
    ]
    assert list(expand(inside, "2024-02-01", "2024-02-28")) == []
    occurrence = next(expand(inside, "2024-01-05", "2024-01-05"))
    assert occurrence.id == "a"
    assert occurrence.source_transaction_id == "a"


def test_monthly_from_month_end_clamps_without_drift() -> None:
    """Jan 31 monthly falls on each month's last valid day."""
    template = _recurring("m", date(2024, 1, 31), "monthly")

    result = list(expand(template, "2024-01-01", "2024-04-30"))

    assert _dates(result) == [
        "2024-01-31",
        "2024-02-29",
        "2024-03-31",
        "2024-04-30",
    ]


def test_yearly_leap_day_series() -> None:
    template = _recurring("y", date(2024, 2, 29), "yearly")

    result = list(expand(template, "2024-01-01", "2028-12-31"))

    assert _dates(result) == [
        "2024-02-29",
        "2025-02-28",
        "2026-02-28",
        "2027-02-28",
        "2028-02-29",
    ]


def test_end_date_caps_the_series() -> None:
    template = _recurring(
        "w",
        date(2024, 1, 1),
        "weekly",
        end_date=date(2024, 1, 20),
    )

    result = list(expand(template, "2024-01-01", "2024-02-28"))

    assert _dates(result) == ["2024-01-01", "2024-01-08", "2024-01-15"]


def test_window_starting_mid_series_keeps_the_phase() -> None:
    template = _recurring("d3", date(2024, 1, 1), "daily", interval=3)

    result = list(expand(template, "2024-01-05", "2024-01-12"))

    assert _dates(result) == ["2024-01-07", "2024-01-10"]


def test_late_window_on_long_monthly_series() -> None:
    template = _recurring("m", date(2020, 1, 31), "monthly")

    result = list(expand(template, "2024-02-01", "2024-03-31"))

    assert _dates(result) == ["2024-02-29", "2024-03-31"]


def test_occurrences_never_precede_the_anchor() -> None:
    template = _recurring("m", date(2024, 3, 10), "monthly")

    result = list(expand(template, "2024-01-01", "2024-04-30"))

    assert _dates(result) == ["2024-03-10", "2024-04-10"]
    assert list(expand(template, "2023-01-01", "2024-03-09")) == []


def test_occurrences_carry_template_fields_and_synthetic_ids() -> None:
    template = _recurring("rent", date(2024, 1, 31), "monthly", amount="-1200")

    occurrence = list(expand(template, "2024-02-01", "2024-02-29"))[0]

    assert occurrence.id == "rent_2024-02-29"
    assert occurrence.source_transaction_id == "rent"
    assert occurrence.amount == Decimal("-1200")
    assert occurrence.name == "Template rent"
    assert occurrence.note == "note"
    assert occurrence.is_recurring is True


def test_reversed_window_is_empty() -> None:
    template = _recurring("d", date(2024, 1, 1), "daily")

    assert list(expand(template, "2024-01-10", "2024-01-01")) == []
    assert expand_all([template], "2024-01-10", "2024-01-01") == []


def test_non_positive_interval_fails_before_iteration() -> None:
    """Bad patterns raise at call time instead of looping."""
    with pytest.raises(InvalidRecurrencePattern):
        expand(
            _recurring("z", date(2024, 1, 1), "daily", interval=0),
            "2024-01-01",
            "2024-01-31",
        )
    with pytest.raises(InvalidRecurrencePattern):
        expand(
            _recurring("n", date(2024, 1, 1), "monthly", interval=-2),
            "2024-01-01",
            "2024-01-31",
        )


def test_unknown_frequency_is_rejected() -> None:
    with pytest.raises(InvalidRecurrencePattern):
        expand(
            _recurring("q", date(2024, 1, 1), "quarterly"),
            "2024-01-01",
            "2024-12-31",
        )


def test_recurring_without_pattern_is_rejected() -> None:
    template = Transaction(
        id="x",
        date=date(2024, 1, 1),
        name="Broken",
        amount=Decimal("1"),
        is_recurring=True,
    )

    with pytest.raises(InvalidRecurrencePattern):
        expand(template, "2024-01-01", "2024-01-31")


def test_non_recurring_pattern_is_ignored() -> None:
    template = Transaction(
        id="x",
        date=date(2024, 1, 1),
        name="Flagged off",
        amount=Decimal("1"),
        is_recurring=False,
        recurring_pattern=RecurringPattern(frequency="daily", interval=0),
    )

    assert _dates(expand(template, "2024-01-01", "2024-01-31")) == [
        "2024-01-01"
    ]


def test_invalid_window_dates_are_rejected() -> None:
    template = _one_off("a", date(2024, 1, 5))

    with pytest.raises(InvalidWindow):
        expand(template, "2024/01/01", "2024-01-31")


def test_expand_all_orders_by_date_then_input_order() -> None:
    salary = _recurring("salary", date(2024, 1, 1), "monthly", amount="3000")
    bonus = _one_off("bonus", date(2024, 2, 1))
    rent = _recurring("rent", date(2024, 1, 1), "monthly", amount="-1200")

    result = expand_all([salary, bonus, rent], "2024-01-01", "2024-02-29")

    assert [item.id for item in result] == [
        "salary_2024-01-01",
        "rent_2024-01-01",
        "salary_2024-02-01",
        "bonus",
        "rent_2024-02-01",
    ]


def test_expand_all_fails_whole_request_on_malformed_template() -> None:
    good = _one_off("a", date(2024, 1, 5))
    nameless = Transaction(
        id="b",
        date=date(2024, 1, 6),
        name=" ",
        amount=Decimal("1"),
    )

    with pytest.raises(InvalidTransaction):
        expand_all([good, nameless], "2024-01-01", "2024-01-31")
