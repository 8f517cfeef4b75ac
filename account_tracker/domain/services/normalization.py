"""Build domain models from loosely typed mappings.

Stores, forms and JSON payloads use the camelCase field names of the
transaction API (``isRecurring``, ``recurringPattern``, ``endDate``);
snake_case keys are accepted as well.
"""

from collections.abc import Mapping
from decimal import Decimal

from account_tracker.domain.errors import (
    InvalidConfig,
    InvalidRecurrencePattern,
    InvalidTransaction,
    InvalidWindow,
)
from account_tracker.domain.models import (
    AccountConfig,
    RecurringPattern,
    Transaction,
)
from account_tracker.domain.services.date_calendar import parse_date
from account_tracker.utils.decimal_utils import coerce_decimal


_CAMEL_CASE_KEYS = {
    "is_recurring": "isRecurring",
    "recurring_pattern": "recurringPattern",
    "end_date": "endDate",
    "starting_balance": "startingBalance",
    "starting_date": "startingDate",
}


def _pick(payload: Mapping, *keys, default=None):
    for key in keys:
        if key in payload:
            return payload[key]
    return default


def camel_case_keys(payload: Mapping) -> dict[str, object]:
    """Return a copy of ``payload`` with snake_case field names in camelCase.

    Nested mappings (the recurring pattern) are converted too, so partial
    updates can be merged over the camelCase form of a stored model.
    """
    converted: dict[str, object] = {}
    for key, value in payload.items():
        if isinstance(value, Mapping):
            value = camel_case_keys(value)
        converted[_CAMEL_CASE_KEYS.get(key, key)] = value
    return converted


def normalize_note(note) -> str | None:
    """Return a stripped note, or None when blank."""
    if note is None:
        return None
    cleaned = str(note).strip()
    return cleaned or None


def pattern_from_mapping(payload: Mapping) -> RecurringPattern:
    """Build a RecurringPattern from a mapping.

    Raises:
        InvalidRecurrencePattern: If a field cannot be read.
    """
    frequency = _pick(payload, "frequency")
    if not isinstance(frequency, str):
        raise InvalidRecurrencePattern(
            f"Recurring pattern needs a frequency: {payload!r}"
        )
    raw_interval = _pick(payload, "interval", default=1)
    try:
        interval = int(raw_interval)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidRecurrencePattern(
            f"Interval must be a positive integer, got {raw_interval!r}"
        ) from exc
    if not isinstance(raw_interval, str) and raw_interval != interval:
        raise InvalidRecurrencePattern(
            f"Interval must be a positive integer, got {raw_interval!r}"
        )
    raw_end = _pick(payload, "endDate", "end_date")
    end_date = None
    if raw_end:
        try:
            end_date = parse_date(raw_end, "endDate")
        except InvalidWindow as exc:
            raise InvalidRecurrencePattern(str(exc)) from exc
    return RecurringPattern(
        frequency=frequency.strip().lower(),
        interval=interval,
        end_date=end_date,
    )


def transaction_from_mapping(payload: Mapping) -> Transaction:
    """Build a Transaction from a mapping.

    Raises:
        InvalidTransaction: If id, date, name or amount cannot be read.
        InvalidRecurrencePattern: If the recurring pattern is malformed.
    """
    raw_id = _pick(payload, "id")
    if raw_id is None or not str(raw_id).strip():
        raise InvalidTransaction(f"Transaction needs an id: {payload!r}")
    transaction_id = str(raw_id).strip()
    try:
        tx_date = parse_date(_pick(payload, "date"), "date")
    except InvalidWindow as exc:
        raise InvalidTransaction(
            f"Transaction {transaction_id}: {exc}"
        ) from exc
    name = _pick(payload, "name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidTransaction(f"Transaction {transaction_id} needs a name")
    raw_amount = _pick(payload, "amount")
    if raw_amount is None:
        raise InvalidTransaction(
            f"Transaction {transaction_id} needs an amount"
        )
    try:
        amount = coerce_decimal(raw_amount)
    except ValueError as exc:
        raise InvalidTransaction(
            f"Transaction {transaction_id}: {exc}"
        ) from exc
    is_recurring = bool(_pick(payload, "isRecurring", "is_recurring"))
    raw_pattern = _pick(payload, "recurringPattern", "recurring_pattern")
    pattern = None
    if is_recurring:
        if isinstance(raw_pattern, RecurringPattern):
            pattern = raw_pattern
        elif isinstance(raw_pattern, Mapping):
            pattern = pattern_from_mapping(raw_pattern)
        else:
            raise InvalidRecurrencePattern(
                f"Recurring transaction {transaction_id} has no pattern"
            )
    return Transaction(
        id=transaction_id,
        date=tx_date,
        name=name.strip(),
        amount=amount,
        note=normalize_note(_pick(payload, "note")),
        is_recurring=is_recurring,
        recurring_pattern=pattern,
    )


def transaction_to_mapping(transaction: Transaction) -> dict[str, object]:
    """Return the camelCase mapping of a Transaction."""
    pattern = transaction.recurring_pattern
    return {
        "id": transaction.id,
        "date": transaction.date.isoformat(),
        "name": transaction.name,
        "amount": str(transaction.amount),
        "note": transaction.note,
        "isRecurring": transaction.is_recurring,
        "recurringPattern": (
            {
                "frequency": pattern.frequency,
                "interval": pattern.interval,
                "endDate": (
                    pattern.end_date.isoformat() if pattern.end_date else None
                ),
            }
            if transaction.is_recurring and pattern is not None
            else None
        ),
    }


def config_from_mapping(payload: Mapping) -> AccountConfig:
    """Build an AccountConfig from a mapping.

    Raises:
        InvalidConfig: If a field is missing or malformed.
    """
    raw_balance = _pick(payload, "startingBalance", "starting_balance")
    raw_date = _pick(payload, "startingDate", "starting_date")
    timezone = _pick(payload, "timezone")
    if raw_balance is None or raw_date is None or timezone is None:
        raise InvalidConfig(
            f"Account configuration is missing fields: {payload!r}"
        )
    try:
        balance = coerce_decimal(raw_balance)
    except ValueError as exc:
        raise InvalidConfig(str(exc)) from exc
    try:
        starting_date = parse_date(raw_date, "startingDate")
    except InvalidWindow as exc:
        raise InvalidConfig(str(exc)) from exc
    if not isinstance(timezone, str):
        raise InvalidConfig(f"Timezone must be a string: {timezone!r}")
    return AccountConfig(
        starting_balance=balance,
        starting_date=starting_date,
        timezone=timezone.strip(),
    )


def coerce_amount(value) -> Decimal:
    """Read a user-entered amount.

    Raises:
        InvalidTransaction: If the value is not a finite number.
    """
    try:
        return coerce_decimal(value)
    except ValueError as exc:
        raise InvalidTransaction(str(exc)) from exc


__all__ = [
    "camel_case_keys",
    "normalize_note",
    "pattern_from_mapping",
    "transaction_from_mapping",
    "transaction_to_mapping",
    "config_from_mapping",
    "coerce_amount",
]
