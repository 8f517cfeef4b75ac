"""CLI adapter to create the tracker tables and seed default data.

The store is seeded only when no account configuration exists yet, so the
command is safe to run repeatedly.
"""

from account_tracker.infrastructure.container import build_transaction_store
from account_tracker.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Initialize the transaction store."""
    logger = get_app_logger()
    store = build_transaction_store()
    store.initialize()
    transactions = store.list_transactions()
    config = store.get_account_config()
    logger.info(f"Store ready with {len(transactions)} transactions")
    print(
        f"Store ready: {len(transactions)} transactions, starting balance "
        f"{config.starting_balance} on {config.starting_date} "
        f"({config.timezone})."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
