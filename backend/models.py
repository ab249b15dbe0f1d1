from sqlalchemy import Column, String, LargeBinary, DateTime, CheckConstraint
from datetime import datetime
from database import Base


class LedgerEntry(Base):
    """
    One key-value pair of the ledger world state.

    The table is a flat string-to-bytes mapping; asset records are stored
    under their asset ID with the JSON-encoded record as the value.
    Deleting a key removes the row entirely (no tombstone).
    """
    __tablename__ = 'ledger_entries'

    key = Column(String, primary_key=True)
    value = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint("key != ''"),
    )

    def __repr__(self):
        return f"<LedgerEntry key={self.key!r} bytes={len(self.value or b'')}>"
