"""Look-back windows offered by the balance chart."""

from datetime import date

from dateutil.relativedelta import relativedelta

from account_tracker.domain.errors import InvalidWindow

CHART_RANGES = {
    "1month": 1,
    "3months": 3,
    "6months": 6,
    "1year": 12,
}
DEFAULT_CHART_RANGE = "3months"

CHART_RANGE_LABELS = {
    "1month": "1 Month",
    "3months": "3 Months",
    "6months": "6 Months",
    "1year": "1 Year",
}


def get_chart_window(range_key: str, today: date) -> tuple[date, date]:
    """Return the window ending today for a chart range key.

    Args:
        range_key: One of the ``CHART_RANGES`` keys.
        today: Last day of the window.

    Returns:
        tuple[date, date]: Inclusive start and end dates.

    Raises:
        InvalidWindow: If the range key is unknown.
    """
    months = CHART_RANGES.get(range_key)
    if months is None:
        raise InvalidWindow(f"Unknown chart range {range_key!r}")
    return today - relativedelta(months=months), today


__all__ = [
    "CHART_RANGES",
    "CHART_RANGE_LABELS",
    "DEFAULT_CHART_RANGE",
    "get_chart_window",
]
