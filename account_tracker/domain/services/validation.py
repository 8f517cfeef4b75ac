"""Domain validation helpers.

A malformed transaction fails the whole request: projecting the remaining
transactions would present an incomplete balance as if it were complete.
"""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from account_tracker.domain.constants import MAX_WINDOW_DAYS
from account_tracker.domain.errors import (
    InvalidConfig,
    InvalidRecurrencePattern,
    InvalidTransaction,
    InvalidWindow,
)
from account_tracker.domain.models import AccountConfig, Transaction
from account_tracker.domain.services.date_calendar import (
    parse_date,
    resolve_timezone,
    validate_frequency,
    validate_interval,
)


def _is_plain_date(value) -> bool:
    return isinstance(value, date) and not isinstance(value, datetime)


def validate_transaction(transaction: Transaction) -> Transaction:
    """Check a transaction template before expansion.

    Args:
        transaction: Template to check.

    Returns:
        Transaction: The same template.

    Raises:
        InvalidTransaction: On missing id, name, date or amount.
        InvalidRecurrencePattern: On a bad or missing recurring pattern.
    """
    if not isinstance(transaction.id, str) or not transaction.id.strip():
        raise InvalidTransaction(
            f"Transaction id must be a non-empty string: {transaction.id!r}"
        )
    if not _is_plain_date(transaction.date):
        raise InvalidTransaction(
            f"Transaction {transaction.id} has an invalid date: "
            f"{transaction.date!r}"
        )
    if not isinstance(transaction.name, str) or not transaction.name.strip():
        raise InvalidTransaction(
            f"Transaction {transaction.id} must have a name"
        )
    if (
        not isinstance(transaction.amount, Decimal)
        or not transaction.amount.is_finite()
    ):
        raise InvalidTransaction(
            f"Transaction {transaction.id} has an invalid amount: "
            f"{transaction.amount!r}"
        )
    if not transaction.is_recurring:
        return transaction
    pattern = transaction.recurring_pattern
    if pattern is None:
        raise InvalidRecurrencePattern(
            f"Recurring transaction {transaction.id} has no pattern"
        )
    validate_frequency(pattern.frequency)
    validate_interval(pattern.interval)
    if pattern.end_date is not None and not _is_plain_date(pattern.end_date):
        raise InvalidRecurrencePattern(
            f"Transaction {transaction.id} has an invalid end date: "
            f"{pattern.end_date!r}"
        )
    return transaction


def validate_transactions(
    transactions: Iterable[Transaction],
) -> list[Transaction]:
    """Validate every template and return them as a list."""
    return [validate_transaction(item) for item in transactions]


def validate_config(config: AccountConfig | None) -> AccountConfig:
    """Check the account configuration.

    Raises:
        InvalidConfig: If a field is missing or malformed.
    """
    if config is None:
        raise InvalidConfig("Account configuration is missing")
    if (
        not isinstance(config.starting_balance, Decimal)
        or not config.starting_balance.is_finite()
    ):
        raise InvalidConfig(
            f"Starting balance must be a number: {config.starting_balance!r}"
        )
    if not _is_plain_date(config.starting_date):
        raise InvalidConfig(
            f"Starting date must be a calendar date: {config.starting_date!r}"
        )
    resolve_timezone(config.timezone)
    return config


def validate_window(
    start: date | str,
    end: date | str,
    max_days: int = MAX_WINDOW_DAYS,
) -> tuple[date, date]:
    """Parse a query window and reject oversized ranges.

    A window whose end precedes its start is returned as-is; callers turn it
    into an empty result.

    Raises:
        InvalidWindow: On unparseable dates or a window above ``max_days``.
    """
    start_date = parse_date(start, "start_date")
    end_date = parse_date(end, "end_date")
    if end_date >= start_date:
        span = (end_date - start_date).days + 1
        if span > max_days:
            raise InvalidWindow(
                f"Window of {span} days exceeds the limit of {max_days} days"
            )
    return start_date, end_date


__all__ = [
    "validate_transaction",
    "validate_transactions",
    "validate_config",
    "validate_window",
]
