"""Domain constants for transaction projection."""

from decimal import Decimal

DATE_FORMAT = "%Y-%m-%d"

FREQUENCY_DAILY = "daily"
FREQUENCY_WEEKLY = "weekly"
FREQUENCY_MONTHLY = "monthly"
FREQUENCY_YEARLY = "yearly"

FREQUENCIES = (
    FREQUENCY_DAILY,
    FREQUENCY_WEEKLY,
    FREQUENCY_MONTHLY,
    FREQUENCY_YEARLY,
)

DEFAULT_TIMEZONE = "America/Los_Angeles"
DEFAULT_STARTING_BALANCE = Decimal("5000")

# Python weekday numbers (Monday == 0).
MONDAY = 0
SUNDAY = 6
DEFAULT_WEEK_START = SUNDAY

DAYS_PER_WEEK = 7
MAX_WINDOW_DAYS = 36600


__all__ = [
    "DATE_FORMAT",
    "FREQUENCY_DAILY",
    "FREQUENCY_WEEKLY",
    "FREQUENCY_MONTHLY",
    "FREQUENCY_YEARLY",
    "FREQUENCIES",
    "DEFAULT_TIMEZONE",
    "DEFAULT_STARTING_BALANCE",
    "MONDAY",
    "SUNDAY",
    "DEFAULT_WEEK_START",
    "DAYS_PER_WEEK",
    "MAX_WINDOW_DAYS",
]
