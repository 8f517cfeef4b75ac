"""Use case to read and update the account configuration."""

from collections.abc import Mapping

from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.domain.models import AccountConfig
from account_tracker.domain.services.normalization import (
    camel_case_keys,
    config_from_mapping,
)
from account_tracker.domain.services.validation import validate_config
from account_tracker.infrastructure.logging.logger import get_app_logger


class UpdateAccountConfigUseCase:
    """Merge partial updates into the stored account configuration."""

    def __init__(self, store: TransactionStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port persisting the account configuration.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def current(self) -> AccountConfig:
        """Return the stored configuration."""
        return self._store.get_account_config()

    def execute(self, updates: Mapping[str, object]) -> AccountConfig:
        """Replace the configuration with ``updates`` merged over it.

        Args:
            updates: Fields to change, camelCase or snake_case keys.

        Raises:
            InvalidConfig: If the merged configuration is malformed.
        """
        merged = self._store.get_account_config().to_dict()
        merged.update(camel_case_keys(updates))
        config = validate_config(config_from_mapping(merged))
        saved = self._store.save_account_config(config)
        self._logger.info(
            f"Account configuration updated: balance={saved.starting_balance}"
            f", date={saved.starting_date}, timezone={saved.timezone}"
        )
        return saved


__all__ = ["UpdateAccountConfigUseCase"]
