"""Tests for the init_store_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from account_tracker.adapters import init_store_cli
from account_tracker.domain.models import AccountConfig


def test_main_initializes_store_and_prints_summary(monkeypatch, capsys):
    """The CLI should seed the store and print what it holds."""
    fake_logger = MagicMock()
    fake_store = MagicMock()
    fake_store.list_transactions.return_value = [object(), object(), object()]
    fake_store.get_account_config.return_value = AccountConfig(
        starting_balance=Decimal("5000"),
        starting_date=date(2024, 1, 1),
        timezone="America/Los_Angeles",
    )
    monkeypatch.setattr(init_store_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        init_store_cli,
        "build_transaction_store",
        lambda: fake_store,
    )

    init_store_cli.main()

    fake_store.initialize.assert_called_once()
    fake_logger.info.assert_called_once()
    captured = capsys.readouterr()
    assert "3 transactions" in captured.out
    assert "5000" in captured.out
    assert "America/Los_Angeles" in captured.out
