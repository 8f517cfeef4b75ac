"""SQLAlchemy-backed store for transactions and the account config.

Amounts are stored as text so Decimal values round-trip exactly. The account
configuration lives as a JSON document under the ``account`` key of a small
key/value table.
"""

from collections.abc import Callable
from datetime import date
import json

from sqlalchemy import text

from account_tracker.application.ports.database import DatabaseEnginePort
from account_tracker.application.ports.transaction_store import (
    TransactionStorePort,
)
from account_tracker.domain.constants import (
    DEFAULT_STARTING_BALANCE,
    DEFAULT_TIMEZONE,
)
from account_tracker.domain.errors import InvalidConfig
from account_tracker.domain.models import (
    AccountConfig,
    RecurringPattern,
    Transaction,
)
from account_tracker.domain.services.date_calendar import today_in_timezone
from account_tracker.domain.services.normalization import (
    config_from_mapping,
    transaction_from_mapping,
)
from account_tracker.infrastructure.logging.logger import get_app_logger
from account_tracker.utils.decimal_utils import coerce_decimal

CONFIG_KEY = "account"

_CREATE_TRANSACTIONS = text(
    """
    CREATE TABLE IF NOT EXISTS transactions (
        id TEXT PRIMARY KEY,
        date TEXT NOT NULL,
        name TEXT NOT NULL,
        amount TEXT NOT NULL,
        note TEXT,
        is_recurring INTEGER NOT NULL DEFAULT 0,
        recurring_pattern TEXT
    )
    """
)

_CREATE_CONFIG = text(
    """
    CREATE TABLE IF NOT EXISTS config (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL
    )
    """
)


def sample_transactions() -> list[Transaction]:
    """Return the transactions seeded into an empty store."""
    monthly = RecurringPattern(frequency="monthly", interval=1)
    return [
        Transaction(
            id="1",
            date=date(2024, 1, 15),
            name="Rent Payment",
            amount=coerce_decimal("-1200"),
            note="Monthly rent",
            is_recurring=True,
            recurring_pattern=monthly,
        ),
        Transaction(
            id="2",
            date=date(2024, 1, 20),
            name="Salary",
            amount=coerce_decimal("3000"),
            note="Monthly salary",
            is_recurring=True,
            recurring_pattern=monthly,
        ),
        Transaction(
            id="3",
            date=date(2024, 1, 25),
            name="Netflix Subscription",
            amount=coerce_decimal("-15.99"),
            note="Monthly streaming service",
            is_recurring=True,
            recurring_pattern=monthly,
        ),
    ]


def _pattern_json(transaction: Transaction) -> str | None:
    pattern = transaction.recurring_pattern
    if not transaction.is_recurring or pattern is None:
        return None
    return json.dumps(
        {
            "frequency": pattern.frequency,
            "interval": pattern.interval,
            "endDate": pattern.end_date.isoformat()
            if pattern.end_date
            else None,
        }
    )


def _transaction_params(transaction: Transaction) -> dict[str, object]:
    return {
        "id": transaction.id,
        "date": transaction.date.isoformat(),
        "name": transaction.name,
        "amount": str(transaction.amount),
        "note": transaction.note,
        "is_recurring": 1 if transaction.is_recurring else 0,
        "recurring_pattern": _pattern_json(transaction),
    }


class SqlAlchemyTransactionStore(TransactionStorePort):
    """Transaction store backed by SQLAlchemy Core queries."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        default_timezone: str = DEFAULT_TIMEZONE,
        logger=None,
        today_factory: Callable[[str], date] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the tracker engine.
            default_timezone: Timezone of the seeded default config.
            logger: Optional logger compatible with logging.Logger-like API.
            today_factory: Returns today's date for a timezone; used for the
                starting date of the seeded config.
        """
        self._db_port = db_port
        self._default_timezone = default_timezone
        self._logger = logger or get_app_logger()
        self._today_factory = today_factory or today_in_timezone

    def initialize(self) -> None:
        """Create tables and seed the default config and samples."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(_CREATE_TRANSACTIONS)
            conn.execute(_CREATE_CONFIG)
            existing = conn.execute(
                text("SELECT COUNT(*) FROM config WHERE key = :key"),
                {"key": CONFIG_KEY},
            ).scalar_one()
            if existing:
                self._logger.info("Configuration already exists")
                return
            config = AccountConfig(
                starting_balance=DEFAULT_STARTING_BALANCE,
                starting_date=self._today_factory(self._default_timezone),
                timezone=self._default_timezone,
            )
            conn.execute(
                text("INSERT INTO config (key, value) VALUES (:key, :value)"),
                {"key": CONFIG_KEY, "value": json.dumps(config.to_dict())},
            )
            samples = sample_transactions()
            conn.execute(
                text(
                    """
                    INSERT INTO transactions (
                        id, date, name, amount, note,
                        is_recurring, recurring_pattern
                    )
                    VALUES (
                        :id, :date, :name, :amount, :note,
                        :is_recurring, :recurring_pattern
                    )
                    """
                ),
                [_transaction_params(item) for item in samples],
            )
        self._logger.info(
            f"Seeded default configuration and {len(samples)} sample "
            f"transactions"
        )

    def list_transactions(self) -> list[Transaction]:
        """Return every stored transaction ordered by date then id."""
        query = text(
            """
            SELECT id, date, name, amount, note,
                   is_recurring, recurring_pattern
            FROM transactions
            ORDER BY date, id
            """
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            transaction_from_mapping(
                {
                    "id": row.id,
                    "date": row.date,
                    "name": row.name,
                    "amount": row.amount,
                    "note": row.note,
                    "isRecurring": bool(row.is_recurring),
                    "recurringPattern": (
                        json.loads(row.recurring_pattern)
                        if row.recurring_pattern
                        else None
                    ),
                }
            )
            for row in rows
        ]

    def get_account_config(self) -> AccountConfig:
        """Return the stored account configuration.

        Raises:
            InvalidConfig: If no configuration has been stored.
        """
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            value = conn.execute(
                text("SELECT value FROM config WHERE key = :key"),
                {"key": CONFIG_KEY},
            ).scalar_one_or_none()
        if value is None:
            raise InvalidConfig("Account configuration not found")
        try:
            payload = json.loads(value)
        except json.JSONDecodeError as exc:
            raise InvalidConfig(
                f"Stored account configuration is not JSON: {exc}"
            ) from exc
        return config_from_mapping(payload)

    def add_transaction(self, transaction: Transaction) -> Transaction:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                text(
                    """
                    INSERT INTO transactions (
                        id, date, name, amount, note,
                        is_recurring, recurring_pattern
                    )
                    VALUES (
                        :id, :date, :name, :amount, :note,
                        :is_recurring, :recurring_pattern
                    )
                    """
                ),
                _transaction_params(transaction),
            )
        return transaction

    def update_transaction(
        self,
        transaction: Transaction,
    ) -> Transaction | None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                text(
                    """
                    UPDATE transactions
                    SET date = :date, name = :name, amount = :amount,
                        note = :note, is_recurring = :is_recurring,
                        recurring_pattern = :recurring_pattern
                    WHERE id = :id
                    """
                ),
                _transaction_params(transaction),
            )
            updated = result.rowcount
        if updated == 0:
            return None
        return transaction

    def delete_transaction(self, transaction_id: str) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                text("DELETE FROM transactions WHERE id = :id"),
                {"id": transaction_id},
            )
            removed = result.rowcount > 0
        return removed

    def save_account_config(self, config: AccountConfig) -> AccountConfig:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            updated = conn.execute(
                text("UPDATE config SET value = :value WHERE key = :key"),
                {"key": CONFIG_KEY, "value": json.dumps(config.to_dict())},
            )
            if updated.rowcount == 0:
                conn.execute(
                    text(
                        "INSERT INTO config (key, value) "
                        "VALUES (:key, :value)"
                    ),
                    {
                        "key": CONFIG_KEY,
                        "value": json.dumps(config.to_dict()),
                    },
                )
        return config


__all__ = ["SqlAlchemyTransactionStore", "sample_transactions", "CONFIG_KEY"]
