"""CLI adapter printing projected balances, occurrences or a calendar.

Configuration comes from environment variables:

* ``PROJECTION_VIEW``: ``series`` (default), ``occurrences`` or ``calendar``.
* ``PROJECTION_START_DATE`` / ``PROJECTION_END_DATE``: ``YYYY-MM-DD`` window;
  defaults to today in the account timezone and the following 30 days.
* ``PROJECTION_MONTH``: ``YYYY-MM`` for the calendar view; defaults to the
  current month.
"""

from datetime import date, timedelta
import os
import sys

from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.domain.errors import InvalidWindow, ProjectionError
from account_tracker.domain.services.aggregation import weeks
from account_tracker.domain.services.date_calendar import (
    parse_date,
    today_in_timezone,
)
from account_tracker.infrastructure.container import (
    build_balance_series_use_case,
    build_expand_recurring_use_case,
    build_month_grid_use_case,
    build_transaction_store,
)
from account_tracker.infrastructure.logging.logger import get_app_logger

DEFAULT_WINDOW_DAYS = 30
_WEEKDAY_HEADER = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def _parse_month(value: str) -> tuple[int, int]:
    """Parse a ``YYYY-MM`` string.

    Raises:
        InvalidWindow: If the value is malformed.
    """
    try:
        year_text, month_text = value.strip().split("-")
        return int(year_text), int(month_text)
    except ValueError as exc:
        raise InvalidWindow(
            f"Month must be YYYY-MM, got {value!r}"
        ) from exc


def _resolve_window(
    store: TransactionStorePort,
) -> tuple[date, date]:
    """Return the window from the environment or the default window."""
    raw_start = os.getenv("PROJECTION_START_DATE")
    raw_end = os.getenv("PROJECTION_END_DATE")
    if raw_start:
        start = parse_date(raw_start, "PROJECTION_START_DATE")
    else:
        start = today_in_timezone(store.get_account_config().timezone)
    if raw_end:
        end = parse_date(raw_end, "PROJECTION_END_DATE")
    else:
        end = start + timedelta(days=DEFAULT_WINDOW_DAYS)
    return start, end


def _print_series(store: TransactionStorePort, logger) -> None:
    start, end = _resolve_window(store)
    use_case = build_balance_series_use_case(store, logger=logger)
    points = use_case.execute(start, end)
    print(f"Balance projection {start} .. {end}")
    for point in points:
        names = ", ".join(
            f"{item.name} ({item.amount:+,.2f})" for item in point.transactions
        )
        suffix = f"  {names}" if names else ""
        print(f"{point.date.isoformat()}  {point.balance:>14,.2f}{suffix}")


def _print_occurrences(store: TransactionStorePort, logger) -> None:
    start, end = _resolve_window(store)
    use_case = build_expand_recurring_use_case(store, logger=logger)
    occurrences = use_case.execute(start, end)
    print(f"{len(occurrences)} occurrences {start} .. {end}")
    for item in occurrences:
        print(
            f"{item.date.isoformat()}  {item.amount:>12,.2f}  {item.name}"
            f"  [{item.id}]"
        )


def _print_calendar(store: TransactionStorePort, logger) -> None:
    raw_month = os.getenv("PROJECTION_MONTH")
    if raw_month:
        year, month = _parse_month(raw_month)
    else:
        today = today_in_timezone(store.get_account_config().timezone)
        year, month = today.year, today.month
    use_case = build_month_grid_use_case(store, logger=logger)
    cells = use_case.execute(year, month)
    print(f"Calendar {year}-{month:02d}")
    print("  ".join(f"{name:>14}" for name in _WEEKDAY_HEADER))
    for week in weeks(cells):
        print("  ".join(f"{cell.date.day:>14}" for cell in week))
        print(
            "  ".join(
                f"{cell.balance:>14,.2f}"
                if cell.is_current_month
                else f"{'(' + format(cell.balance, ',.2f') + ')':>14}"
                for cell in week
            )
        )


_VIEWS = {
    "series": _print_series,
    "occurrences": _print_occurrences,
    "calendar": _print_calendar,
}


def main() -> None:
    """Print the requested projection view."""
    logger = get_app_logger()
    view = os.getenv("PROJECTION_VIEW", "series").strip().lower()
    printer = _VIEWS.get(view)
    if printer is None:
        logger.error(
            f"Unknown PROJECTION_VIEW '{view}'. "
            f"Expected one of: {', '.join(_VIEWS)}."
        )
        sys.exit(2)
    store = build_transaction_store()
    store.initialize()
    try:
        printer(store, logger)
    except ProjectionError as exc:
        logger.error(f"Projection failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
