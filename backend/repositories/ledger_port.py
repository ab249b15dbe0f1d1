"""
Ledger Port

Abstract key-value contract the asset service depends on. Concrete stores
(in-memory, SQL) live beside it; the storage engine of a real ledger is
expected to provide its own implementation.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple


LedgerItem = Tuple[str, bytes]


class LedgerPort(ABC):
    """
    Flat string-to-bytes world state.

    Failures of the underlying store are reported as StorageFault; a missing
    key is never a failure.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """
        Read the value stored under a key.

        Args:
            key: Ledger key

        Returns:
            Stored bytes, or None if the key is absent

        Raises:
            StorageFault: If the store cannot be read
        """
        pass

    @abstractmethod
    def put(self, key: str, value: bytes) -> None:
        """
        Insert or overwrite the value under a key.

        Raises:
            StorageFault: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Deleting an absent key is a no-op.

        Raises:
            StorageFault: If the delete fails
        """
        pass

    @abstractmethod
    def scan_range(self, start_key: str, end_key: str) -> Iterator[LedgerItem]:
        """
        Iterate entries in lexical key order.

        ``start_key`` is inclusive and ``end_key`` exclusive; an empty string
        for either bound leaves that side open, so ``scan_range("", "")``
        walks the whole keyspace. The returned iterator releases its cursor
        when exhausted or when ``close()`` is called, so callers that may stop
        early should wrap it in ``contextlib.closing``.

        Raises:
            StorageFault: If the scan fails
        """
        pass
