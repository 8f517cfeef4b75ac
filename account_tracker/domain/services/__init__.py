"""Domain services package."""

from .aggregation import chart_rows, daily_series, month_grid, weeks
from .date_calendar import (
    add_interval,
    compare_dates,
    format_date,
    format_in_timezone,
    parse_date,
    today_in_timezone,
)
from .operations import (
    compute_balance_series,
    compute_month_grid,
    expand_recurring,
)
from .normalization import (
    config_from_mapping,
    transaction_from_mapping,
    transaction_to_mapping,
)
from .projection import balance_on, project
from .recurrence import expand, expand_all
from .validation import validate_config, validate_window

__all__ = [
    "add_interval",
    "balance_on",
    "chart_rows",
    "compare_dates",
    "compute_balance_series",
    "compute_month_grid",
    "config_from_mapping",
    "daily_series",
    "expand",
    "expand_all",
    "expand_recurring",
    "format_date",
    "format_in_timezone",
    "month_grid",
    "parse_date",
    "project",
    "today_in_timezone",
    "transaction_from_mapping",
    "transaction_to_mapping",
    "validate_config",
    "validate_window",
    "weeks",
]
