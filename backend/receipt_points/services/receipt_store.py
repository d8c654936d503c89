"""In-memory store of scored receipts.

The store maps receipt identifiers to point totals for the lifetime of
the process. Records are written once and never updated or expired.
Every access goes through a single lock so concurrent request threads
cannot lose inserts or read a half-written map, and :meth:`ReceiptStore.add`
allocates and inserts an identifier in one critical section so two
submissions can never share an id.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from receipt_points.services.identifiers import IdentifierAllocator


class ReceiptNotFoundError(KeyError):
    """Raised when looking up an identifier that was never issued."""

    def __init__(self, receipt_id: str) -> None:
        super().__init__(receipt_id)
        self.receipt_id = receipt_id


class ReceiptStore:
    def __init__(self, allocator: Optional[IdentifierAllocator] = None) -> None:
        self._records: Dict[str, int] = {}
        self._lock = threading.Lock()
        self.allocator = allocator or IdentifierAllocator()

    def put(self, receipt_id: str, points: int) -> None:
        with self._lock:
            self._records[receipt_id] = points

    def get(self, receipt_id: str) -> int:
        with self._lock:
            try:
                return self._records[receipt_id]
            except KeyError:
                raise ReceiptNotFoundError(receipt_id) from None

    def contains(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._records

    def add(self, points: int) -> str:
        """Allocate a fresh identifier, record ``points`` under it and return it."""
        with self._lock:
            receipt_id = self.allocator.allocate(self._records.__contains__)
            self._records[receipt_id] = points
            return receipt_id

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
