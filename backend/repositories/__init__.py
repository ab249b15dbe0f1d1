"""
Repository layer for data access abstraction.

This package contains the ledger port and the stores that implement it,
encapsulating storage access behind a small key-value interface.
"""

from .base_repository import BaseRepository
from .ledger_port import LedgerPort
from .memory_ledger import InMemoryLedger
from .sql_ledger import SqlLedger

__all__ = [
    "BaseRepository",
    "LedgerPort",
    "InMemoryLedger",
    "SqlLedger",
]
