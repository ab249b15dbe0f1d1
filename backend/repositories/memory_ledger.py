"""
In-memory ledger used by tests and by the 'memory' backend.
"""

from typing import Dict, Iterator, Optional

from .ledger_port import LedgerItem, LedgerPort


class InMemoryLedger(LedgerPort):
    """Dict-backed world state. Values are copied in and out as bytes."""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._state: Dict[str, bytes] = dict(initial or {})
        self.open_scans = 0

    def get(self, key: str) -> Optional[bytes]:
        return self._state.get(key)

    def put(self, key: str, value: bytes) -> None:
        self._state[key] = bytes(value)

    def delete(self, key: str) -> None:
        self._state.pop(key, None)

    def scan_range(self, start_key: str, end_key: str) -> Iterator[LedgerItem]:
        # Snapshot the keys so writes during iteration don't disturb the scan
        keys = sorted(
            k for k in self._state
            if (not start_key or k >= start_key) and (not end_key or k < end_key)
        )
        return self._iterate(keys)

    def _iterate(self, keys) -> Iterator[LedgerItem]:
        self.open_scans += 1
        try:
            for key in keys:
                value = self._state.get(key)
                if value is not None:
                    yield key, value
        finally:
            self.open_scans -= 1

    def __len__(self) -> int:
        return len(self._state)

    def __contains__(self, key: str) -> bool:
        return key in self._state
