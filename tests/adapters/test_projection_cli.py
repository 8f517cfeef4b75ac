"""Tests for the projection_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from account_tracker.adapters import projection_cli
from account_tracker.domain.models import (
    AccountConfig,
    RecurringPattern,
    Transaction,
)
from account_tracker.infrastructure import settings as settings_module


def _fake_store() -> MagicMock:
    store = MagicMock()
    store.list_transactions.return_value = [
        Transaction(
            id="rent",
            date=date(2024, 1, 15),
            name="Rent Payment",
            amount=Decimal("-1200"),
            is_recurring=True,
            recurring_pattern=RecurringPattern(frequency="monthly"),
        )
    ]
    store.get_account_config.return_value = AccountConfig(
        starting_balance=Decimal("5000"),
        starting_date=date(2024, 1, 1),
        timezone="UTC",
    )
    return store


@pytest.fixture
def cli_env(monkeypatch):
    fake_logger = MagicMock()
    fake_store = _fake_store()
    monkeypatch.setattr(projection_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        projection_cli,
        "build_transaction_store",
        lambda: fake_store,
    )
    for name in (
        "PROJECTION_VIEW",
        "PROJECTION_START_DATE",
        "PROJECTION_END_DATE",
        "PROJECTION_MONTH",
    ):
        monkeypatch.delenv(name, raising=False)
    return fake_logger, fake_store


def test_series_view_prints_daily_balances(cli_env, monkeypatch, capsys):
    """The default view prints one line per day of the window."""
    monkeypatch.setenv("PROJECTION_START_DATE", "2024-01-14")
    monkeypatch.setenv("PROJECTION_END_DATE", "2024-01-16")

    projection_cli.main()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Balance projection 2024-01-14 .. 2024-01-16"
    assert len(lines) == 4
    assert "5,000.00" in lines[1]
    assert "3,800.00" in lines[2]
    assert "Rent Payment (-1,200.00)" in lines[2]
    cli_env[1].initialize.assert_called_once()


def test_occurrences_view_lists_synthetic_ids(cli_env, monkeypatch, capsys):
    monkeypatch.setenv("PROJECTION_VIEW", "occurrences")
    monkeypatch.setenv("PROJECTION_START_DATE", "2024-01-01")
    monkeypatch.setenv("PROJECTION_END_DATE", "2024-03-31")

    projection_cli.main()

    out = capsys.readouterr().out
    assert out.startswith("3 occurrences")
    assert "[rent_2024-02-15]" in out


def test_calendar_view_prints_week_rows(cli_env, monkeypatch, capsys):
    monkeypatch.setenv("PROJECTION_VIEW", "calendar")
    monkeypatch.setenv("PROJECTION_MONTH", "2024-02")

    projection_cli.main()

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Calendar 2024-02"
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert len(lines) == 2 + 5 * 2


def test_unknown_view_exits_with_usage_error(cli_env, monkeypatch):
    monkeypatch.setenv("PROJECTION_VIEW", "pie")

    with pytest.raises(SystemExit) as excinfo:
        projection_cli.main()

    assert excinfo.value.code == 2
    cli_env[0].error.assert_called_once()


def test_invalid_window_exits_with_error(cli_env, monkeypatch):
    monkeypatch.setenv("PROJECTION_START_DATE", "2024-13-01")

    with pytest.raises(SystemExit) as excinfo:
        projection_cli.main()

    assert excinfo.value.code == 1
    assert "Projection failed" in cli_env[0].error.call_args[0][0]


def test_parse_month_rejects_malformed_value():
    assert projection_cli._parse_month("2024-02") == (2024, 2)
    with pytest.raises(projection_cli.InvalidWindow):
        projection_cli._parse_month("February")


def test_series_view_honours_configured_window_limit(cli_env, monkeypatch):
    """TRACKER_MAX_WINDOW_DAYS should bound the windows the CLI accepts."""
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setenv("TRACKER_MAX_WINDOW_DAYS", "10")
    monkeypatch.setenv("PROJECTION_START_DATE", "2024-01-01")
    monkeypatch.setenv("PROJECTION_END_DATE", "2024-01-30")

    with pytest.raises(SystemExit) as excinfo:
        projection_cli.main()

    assert excinfo.value.code == 1
    message = cli_env[0].error.call_args[0][0]
    assert "exceeds the limit of 10 days" in message
