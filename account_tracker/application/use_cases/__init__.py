"""Application use cases package."""

from .chart_window import get_chart_window
from .compute_balance_series import (
    ComputeBalanceSeriesUseCase,
    DailyBalancePoint,
)
from .compute_month_grid import CalendarDay, ComputeMonthGridUseCase
from .expand_recurring import ExpandRecurringUseCase, ProjectedOccurrence
from .manage_transactions import ManageTransactionsUseCase
from .update_account_config import UpdateAccountConfigUseCase

__all__ = [
    "ComputeBalanceSeriesUseCase",
    "DailyBalancePoint",
    "ComputeMonthGridUseCase",
    "CalendarDay",
    "ExpandRecurringUseCase",
    "ProjectedOccurrence",
    "ManageTransactionsUseCase",
    "UpdateAccountConfigUseCase",
    "get_chart_window",
]
