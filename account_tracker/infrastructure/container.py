"""Composition root for wiring infrastructure adapters."""

from account_tracker.application.ports.database import DatabaseEnginePort
from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.application.use_cases.compute_balance_series import (
    ComputeBalanceSeriesUseCase,
)
from account_tracker.application.use_cases.compute_month_grid import (
    ComputeMonthGridUseCase,
)
from account_tracker.application.use_cases.expand_recurring import (
    ExpandRecurringUseCase,
)
from account_tracker.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from account_tracker.application.use_cases.update_account_config import (
    UpdateAccountConfigUseCase,
)
from account_tracker.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from account_tracker.infrastructure.logging.logger import get_app_logger
from account_tracker.infrastructure.settings import TrackerSettings
from account_tracker.infrastructure.sqlalchemy_store import (
    SqlAlchemyTransactionStore,
)


def build_database_adapter(
    settings: TrackerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    if settings is None:
        return SqlAlchemyDatabaseEngineAdapter()
    return SqlAlchemyDatabaseEngineAdapter(settings.db_url)


def build_transaction_store(
    db_port: DatabaseEnginePort | None = None,
    settings: TrackerSettings | None = None,
) -> TransactionStorePort:
    """Return the SQL transaction store."""
    resolved_settings = settings or TrackerSettings.from_env()
    resolved_db = db_port or build_database_adapter(resolved_settings)
    return SqlAlchemyTransactionStore(
        resolved_db,
        default_timezone=resolved_settings.default_timezone,
        logger=get_app_logger(),
    )


def build_balance_series_use_case(
    store: TransactionStorePort | None = None,
    settings: TrackerSettings | None = None,
    logger=None,
) -> ComputeBalanceSeriesUseCase:
    """Return the balance series use case bound to the configured store."""
    resolved_settings = settings or TrackerSettings.from_env()
    return ComputeBalanceSeriesUseCase(
        store or build_transaction_store(settings=resolved_settings),
        logger=logger or get_app_logger(),
        max_window_days=resolved_settings.max_window_days,
    )


def build_expand_recurring_use_case(
    store: TransactionStorePort | None = None,
    settings: TrackerSettings | None = None,
    logger=None,
) -> ExpandRecurringUseCase:
    """Return the occurrence listing use case."""
    resolved_settings = settings or TrackerSettings.from_env()
    return ExpandRecurringUseCase(
        store or build_transaction_store(settings=resolved_settings),
        logger=logger or get_app_logger(),
        max_window_days=resolved_settings.max_window_days,
    )


def build_month_grid_use_case(
    store: TransactionStorePort | None = None,
    logger=None,
) -> ComputeMonthGridUseCase:
    """Return the calendar use case."""
    return ComputeMonthGridUseCase(
        store or build_transaction_store(),
        logger=logger or get_app_logger(),
    )


def build_manage_transactions_use_case(
    store: TransactionStorePort | None = None,
) -> ManageTransactionsUseCase:
    """Return the transaction editing use case."""
    return ManageTransactionsUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
    )


def build_update_account_config_use_case(
    store: TransactionStorePort | None = None,
) -> UpdateAccountConfigUseCase:
    """Return the account configuration use case."""
    return UpdateAccountConfigUseCase(
        store or build_transaction_store(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_transaction_store",
    "build_balance_series_use_case",
    "build_expand_recurring_use_case",
    "build_month_grid_use_case",
    "build_manage_transactions_use_case",
    "build_update_account_config_use_case",
]
