"""Use case to create, update and delete base transactions."""

from collections.abc import Callable, Mapping
from uuid import uuid4

from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.domain.models import Transaction
from account_tracker.domain.services.normalization import (
    camel_case_keys,
    transaction_from_mapping,
    transaction_to_mapping,
)
from account_tracker.domain.services.validation import validate_transaction
from account_tracker.infrastructure.logging.logger import get_app_logger


def _new_id() -> str:
    return uuid4().hex


class ManageTransactionsUseCase:
    """Validate and persist changes to base transactions."""

    def __init__(
        self,
        store: TransactionStorePort,
        logger=None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            id_factory: Optional generator of new transaction ids.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._id_factory = id_factory or _new_id

    def list_transactions(self) -> list[Transaction]:
        """Return stored transactions ordered by date, newest first."""
        transactions = self._store.list_transactions()
        return sorted(
            transactions,
            key=lambda item: (item.date, item.id),
            reverse=True,
        )

    def add(self, payload: Mapping[str, object]) -> Transaction:
        """Create a transaction from a mapping and persist it.

        Args:
            payload: Transaction fields without an id (camelCase or
                snake_case keys).

        Returns:
            Transaction: Stored transaction with its new id.

        Raises:
            ProjectionError: If a field is missing or malformed.
        """
        data = dict(payload)
        data["id"] = self._id_factory()
        transaction = validate_transaction(transaction_from_mapping(data))
        stored = self._store.add_transaction(transaction)
        self._logger.info(
            f"Added transaction {stored.id} ({stored.name}, {stored.amount})"
        )
        return stored

    def update(
        self,
        transaction_id: str,
        updates: Mapping[str, object],
    ) -> Transaction | None:
        """Merge updates into a stored transaction.

        Args:
            transaction_id: Id of the transaction to change.
            updates: Fields to replace, camelCase or snake_case keys; the
                id cannot be changed.

        Returns:
            Transaction | None: Updated transaction, None when unknown.

        Raises:
            ProjectionError: If the merged transaction is malformed.
        """
        existing = next(
            (
                item
                for item in self._store.list_transactions()
                if item.id == transaction_id
            ),
            None,
        )
        if existing is None:
            self._logger.warning(
                f"Transaction {transaction_id} not found for update"
            )
            return None
        merged = transaction_to_mapping(existing)
        changes = camel_case_keys(updates)
        stored_pattern = merged.get("recurringPattern")
        pattern_changes = changes.get("recurringPattern")
        if isinstance(stored_pattern, Mapping) and isinstance(
            pattern_changes,
            Mapping,
        ):
            changes["recurringPattern"] = {**stored_pattern, **pattern_changes}
        merged.update(changes)
        merged["id"] = transaction_id
        transaction = validate_transaction(transaction_from_mapping(merged))
        stored = self._store.update_transaction(transaction)
        if stored is not None:
            self._logger.info(f"Updated transaction {transaction_id}")
        return stored

    def delete(self, transaction_id: str) -> bool:
        """Delete a transaction; return whether it existed."""
        removed = self._store.delete_transaction(transaction_id)
        if removed:
            self._logger.info(f"Deleted transaction {transaction_id}")
        else:
            self._logger.warning(
                f"Transaction {transaction_id} not found for delete"
            )
        return removed


__all__ = ["ManageTransactionsUseCase"]
