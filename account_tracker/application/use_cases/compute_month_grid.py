"""Use case to compute the calendar grid of a month."""

from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.domain.constants import DEFAULT_WEEK_START
from account_tracker.domain.errors import ProjectionError
from account_tracker.domain.models import CalendarDay
from account_tracker.domain.services.aggregation import month_grid
from account_tracker.infrastructure.logging.logger import get_app_logger


class ComputeMonthGridUseCase:
    """Build the month calendar from the stored snapshot."""

    def __init__(
        self,
        store: TransactionStorePort,
        logger=None,
        week_start: int = DEFAULT_WEEK_START,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing transactions and the account config.
            logger: Optional logger compatible with logging.Logger-like API.
            week_start: Weekday of the first grid column (6 is Sunday).
        """
        self._store = store
        self._logger = logger or get_app_logger()
        self._week_start = week_start

    def execute(self, year: int, month: int) -> list[CalendarDay]:
        """Return the padded grid cells of a month.

        Raises:
            ProjectionError: On an invalid month, config or transaction.
        """
        transactions = self._store.list_transactions()
        config = self._store.get_account_config()
        try:
            cells = month_grid(
                transactions,
                config,
                year,
                month,
                week_start=self._week_start,
            )
        except ProjectionError as exc:
            self._logger.error(
                f"Failed to compute calendar for {year}-{month}: {exc}"
            )
            raise
        in_month = sum(1 for cell in cells if cell.is_current_month)
        self._logger.info(
            f"Computed calendar {year}-{month:02d}: {len(cells)} cells, "
            f"{in_month} in month"
        )
        return cells


__all__ = ["ComputeMonthGridUseCase", "CalendarDay"]
