"""Application ports package."""

from .database import DatabaseEnginePort
from .transaction_store import TransactionStorePort

__all__ = ["DatabaseEnginePort", "TransactionStorePort"]
