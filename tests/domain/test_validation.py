"""Tests for domain validation helpers."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from account_tracker.domain.errors import (
    InvalidConfig,
    InvalidTransaction,
    InvalidWindow,
    ProjectionError,
)
from account_tracker.domain.models import AccountConfig, Transaction
from account_tracker.domain.services.validation import (
    validate_config,
    validate_transaction,
    validate_window,
)


def test_validate_window_parses_and_bounds_the_range() -> None:
    assert validate_window("2024-01-01", "2024-01-31") == (
        date(2024, 1, 1),
        date(2024, 1, 31),
    )
    assert validate_window("2024-01-31", "2024-01-01") == (
        date(2024, 1, 31),
        date(2024, 1, 1),
    )
    assert validate_window("2024-01-01", "2024-01-10", max_days=10)
    with pytest.raises(InvalidWindow):
        validate_window("2024-01-01", "2024-01-11", max_days=10)


def test_validate_config_requires_a_config() -> None:
    with pytest.raises(InvalidConfig):
        validate_config(None)
    with pytest.raises(InvalidConfig):
        validate_config(
            AccountConfig(
                starting_balance=Decimal("NaN"),
                starting_date=date(2024, 1, 1),
                timezone="UTC",
            )
        )


def test_validate_transaction_rejects_datetime_and_float_amounts() -> None:
    with pytest.raises(InvalidTransaction):
        validate_transaction(
            Transaction(
                id="a",
                date=datetime(2024, 1, 1, 9, 30),
                name="Timestamped",
                amount=Decimal("1"),
            )
        )
    with pytest.raises(InvalidTransaction):
        validate_transaction(
            Transaction(
                id="b",
                date=date(2024, 1, 1),
                name="Float",
                amount=1.5,
            )
        )


def test_projection_errors_are_value_errors() -> None:
    assert issubclass(ProjectionError, ValueError)
    assert issubclass(InvalidWindow, ProjectionError)
