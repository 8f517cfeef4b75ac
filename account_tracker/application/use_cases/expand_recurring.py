"""Use case to list the projected occurrences of a date range."""

from datetime import date

from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.domain.constants import MAX_WINDOW_DAYS
from account_tracker.domain.errors import ProjectionError
from account_tracker.domain.models import ProjectedOccurrence
from account_tracker.domain.services.operations import expand_recurring
from account_tracker.domain.services.validation import validate_window
from account_tracker.infrastructure.logging.logger import get_app_logger


class ExpandRecurringUseCase:
    """Expand stored transactions into dated occurrences."""

    def __init__(
        self,
        store: TransactionStorePort,
        logger=None,
        max_window_days: int = MAX_WINDOW_DAYS,
    ) -> None:
        """Initialize the use case.

        Args:
            store: Port providing the transaction snapshot.
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
    ) -> list[ProjectedOccurrence]:
        """Return the occurrences dated inside the window.

        Args:
            start_date: First day of the window, ``YYYY-MM-DD``.
            end_date: Last day of the window, ``YYYY-MM-DD``.

        Returns:
            list[ProjectedOccurrence]: Occurrences ordered by date.

        Raises:
            ProjectionError: On an invalid window or transaction.
        """
        try:
            start, end = validate_window(
                start_date,
                end_date,
                self._max_window_days,
            )
            transactions = self._store.list_transactions()
            occurrences = expand_recurring(transactions, start, end)
        except ProjectionError as exc:
            self._logger.error(
                f"Failed to expand transactions for "
                f"{start_date}..{end_date}: {exc}"
            )
            raise
        self._logger.info(
            f"Expanded {len(transactions)} transactions into "
            f"{len(occurrences)} occurrences for {start}..{end}"
        )
        return occurrences


__all__ = ["ExpandRecurringUseCase", "ProjectedOccurrence"]
