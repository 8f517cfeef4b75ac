"""Tests for the ManageTransactionsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from account_tracker.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from account_tracker.domain.errors import (
    InvalidRecurrencePattern,
    InvalidTransaction,
)
from account_tracker.domain.models import RecurringPattern, Transaction


def _existing() -> Transaction:
    return Transaction(
        id="rent",
        date=date(2024, 1, 15),
        name="Rent Payment",
        amount=Decimal("-1200"),
        note="Monthly rent",
        is_recurring=True,
        recurring_pattern=RecurringPattern(frequency="monthly"),
    )


def _store_with(*transactions: Transaction) -> MagicMock:
    store = MagicMock()
    store.list_transactions.return_value = list(transactions)
    store.add_transaction.side_effect = lambda item: item
    store.update_transaction.side_effect = lambda item: item
    return store


def test_add_assigns_id_and_persists() -> None:
    """New transactions get an id from the factory before storage."""
    store = _store_with()
    use_case = ManageTransactionsUseCase(
        store,
        logger=MagicMock(),
        id_factory=lambda: "new-id",
    )

    stored = use_case.add(
        {
            "date": "2024-03-01",
            "name": "Gym",
            "amount": "-45",
            "isRecurring": True,
            "recurringPattern": {"frequency": "monthly", "interval": 1},
        }
    )

    assert stored.id == "new-id"
    assert stored.amount == Decimal("-45")
    assert stored.recurring_pattern == RecurringPattern(frequency="monthly")
    store.add_transaction.assert_called_once_with(stored)


def test_add_rejects_invalid_payload_without_storing() -> None:
    store = _store_with()
    use_case = ManageTransactionsUseCase(store, logger=MagicMock())

    with pytest.raises(InvalidTransaction):
        use_case.add({"date": "2024-03-01", "name": "", "amount": "1"})
    with pytest.raises(InvalidRecurrencePattern):
        use_case.add(
            {
                "date": "2024-03-01",
                "name": "Bad",
                "amount": "1",
                "isRecurring": True,
                "recurringPattern": {"frequency": "daily", "interval": 0},
            }
        )

    store.add_transaction.assert_not_called()


def test_update_merges_fields_over_existing() -> None:
    store = _store_with(_existing())
    use_case = ManageTransactionsUseCase(store, logger=MagicMock())

    updated = use_case.update("rent", {"amount": "-1250", "id": "other"})

    assert updated.id == "rent"
    assert updated.amount == Decimal("-1250")
    assert updated.name == "Rent Payment"
    assert updated.recurring_pattern.frequency == "monthly"
    store.update_transaction.assert_called_once_with(updated)


def test_update_can_turn_off_recurrence() -> None:
    store = _store_with(_existing())
    use_case = ManageTransactionsUseCase(store, logger=MagicMock())

    updated = use_case.update("rent", {"isRecurring": False})

    assert updated.is_recurring is False
    assert updated.recurring_pattern is None


def test_update_accepts_snake_case_keys() -> None:
    """snake_case fields should override the stored camelCase values."""
    store = _store_with(_existing())
    use_case = ManageTransactionsUseCase(store, logger=MagicMock())

    updated = use_case.update("rent", {"is_recurring": False})

    assert updated.is_recurring is False
    assert updated.recurring_pattern is None


def test_update_merges_partial_recurring_pattern() -> None:
    store = _store_with(_existing())
    use_case = ManageTransactionsUseCase(store, logger=MagicMock())

    updated = use_case.update(
        "rent",
        {"recurring_pattern": {"interval": 3, "end_date": "2024-12-31"}},
    )

    assert updated.recurring_pattern == RecurringPattern(
        frequency="monthly",
        interval=3,
        end_date=date(2024, 12, 31),
    )


def test_update_unknown_id_returns_none() -> None:
    store = _store_with(_existing())
    logger = MagicMock()
    use_case = ManageTransactionsUseCase(store, logger=logger)

    assert use_case.update("missing", {"name": "X"}) is None
    store.update_transaction.assert_not_called()
    logger.warning.assert_called_once()


def test_delete_reports_whether_a_row_was_removed() -> None:
    store = _store_with()
    store.delete_transaction.side_effect = [True, False]
    logger = MagicMock()
    use_case = ManageTransactionsUseCase(store, logger=logger)

    assert use_case.delete("rent") is True
    assert use_case.delete("rent") is False
    logger.info.assert_called_once_with("Deleted transaction rent")
    logger.warning.assert_called_once()


def test_list_transactions_orders_newest_first() -> None:
    older = _existing()
    newer = Transaction(
        id="gift",
        date=date(2024, 2, 1),
        name="Gift",
        amount=Decimal("20"),
    )
    use_case = ManageTransactionsUseCase(
        _store_with(older, newer),
        logger=MagicMock(),
    )

    assert [item.id for item in use_case.list_transactions()] == [
        "gift",
        "rent",
    ]
