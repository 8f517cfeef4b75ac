"""Use case to compute the daily balance series of a date range."""

from datetime import date

from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.domain.constants import MAX_WINDOW_DAYS
from account_tracker.domain.errors import ProjectionError
from account_tracker.domain.models import DailyBalancePoint
from account_tracker.domain.services.aggregation import daily_series
from account_tracker.domain.services.projection import project
from account_tracker.infrastructure.logging.logger import get_app_logger


class ComputeBalanceSeriesUseCase:
    """Project end-of-day balances from the stored snapshot."""

    def __init__(
        self,
        store: TransactionStorePort,
        logger=None,
        max_window_days: int = MAX_WINDOW_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing transactions and the account config.
            logger: Optional logger compatible with logging.Logger-like API.
            max_window_days: Largest accepted window length.
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._max_window_days = max_window_days

    def execute(
        self,
        start_date: date | str,
        end_date: date | str,
    ) -> list[DailyBalancePoint]:
        """Return one balance point per day of the window.

        Args:
            start_date: First day of the window, ``YYYY-MM-DD``.
            end_date: Last day of the window, ``YYYY-MM-DD``.

        Returns:
            list[DailyBalancePoint]: Daily series for charts and tables.

        Raises:
            ProjectionError: On an invalid window, config or transaction.
        """
        transactions = self._store.list_transactions()
        config = self._store.get_account_config()
        try:
            points = project(
                transactions,
                config,
                start_date,
                end_date,
                max_days=self._max_window_days,
            )
        except ProjectionError as exc:
            self._logger.error(
                f"Failed to compute balance series for "
                f"{start_date}..{end_date}: {exc}"
            )
            raise
        series = daily_series(points)
        if series:
            self._logger.info(
                f"Computed {len(series)} balance points from "
                f"{len(transactions)} transactions, closing balance "
                f"{series[-1].balance}"
            )
        else:
            self._logger.info(
                f"Empty balance series for {start_date}..{end_date}"
            )
        return series


__all__ = ["ComputeBalanceSeriesUseCase", "DailyBalancePoint"]
