"""Application port for transaction and configuration storage."""

from typing import Protocol

from account_tracker.domain.models import AccountConfig, Transaction


class TransactionStorePort(Protocol):
    """Port exposing the stored transactions and account configuration.

    Projection use cases only read snapshots; the write methods back the
    transaction management use cases.
    """

    def initialize(self) -> None:
        """Create the storage schema and seed defaults when empty."""

    def list_transactions(self) -> list[Transaction]:
        """Return every base transaction."""

    def get_account_config(self) -> AccountConfig:
        """Return the account configuration."""

    def add_transaction(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction and return it."""

    def update_transaction(
        self,
        transaction: Transaction,
    ) -> Transaction | None:
        """Replace a stored transaction; return None when it is unknown."""

    def delete_transaction(self, transaction_id: str) -> bool:
        """Delete a transaction; return whether a row was removed."""

    def save_account_config(self, config: AccountConfig) -> AccountConfig:
        """Replace the account configuration and return it."""


__all__ = ["TransactionStorePort"]
