"""
SQL-backed ledger repository.

Stores the world state in the ``ledger_entries`` table. Every put and delete
is committed immediately, so each mutation is one durable write.
"""

import logging
from typing import Iterator, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from constants import LedgerDefaults
from exceptions import StorageFault
from models import LedgerEntry
from .base_repository import BaseRepository
from .ledger_port import LedgerItem, LedgerPort

logger = logging.getLogger(__name__)


class SqlLedger(BaseRepository[LedgerEntry], LedgerPort):
    """Repository implementing the ledger port over a SQLAlchemy session."""

    def __init__(self, db: Session, batch_size: int = LedgerDefaults.SCAN_BATCH_SIZE):
        super().__init__(db, LedgerEntry)
        self.batch_size = batch_size

    def get(self, key: str) -> Optional[bytes]:
        try:
            entry = self.get_by_key(key)
        except SQLAlchemyError as e:
            raise StorageFault("get", str(e), key=key) from e
        return bytes(entry.value) if entry is not None else None

    def put(self, key: str, value: bytes) -> None:
        try:
            self.merge(LedgerEntry(key=key, value=bytes(value)))
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to write ledger key {key}: {e}", exc_info=True)
            raise StorageFault("put", str(e), key=key) from e

    def delete(self, key: str) -> None:
        try:
            if self.delete_by_key(key):
                self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete ledger key {key}: {e}", exc_info=True)
            raise StorageFault("delete", str(e), key=key) from e

    def scan_range(self, start_key: str, end_key: str) -> Iterator[LedgerItem]:
        stmt = select(LedgerEntry.key, LedgerEntry.value).order_by(LedgerEntry.key)
        if start_key:
            stmt = stmt.where(LedgerEntry.key >= start_key)
        if end_key:
            stmt = stmt.where(LedgerEntry.key < end_key)
        return self._stream(stmt.execution_options(yield_per=self.batch_size))

    def _stream(self, stmt) -> Iterator[LedgerItem]:
        try:
            result = self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageFault("scan", str(e)) from e

        try:
            for key, value in result:
                yield key, bytes(value)
        except SQLAlchemyError as e:
            raise StorageFault("scan", str(e)) from e
        finally:
            result.close()
