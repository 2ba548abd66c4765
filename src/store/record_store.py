"""In-memory record store.

This module keeps the loaded transactions for the current session.
Whole quarter batches are appended atomically under one lock.
"""

from __future__ import annotations

import threading
from typing import Iterable

from core.types import QuarterBatch, Transaction


class RecordStore:
    """Ordered, append-only transaction sequence shared by all queries."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._transactions: list[Transaction] = []
        self._quarters: dict[str, None] = {}

    def append_batches(self, batches: Iterable[QuarterBatch]) -> int:
        """Append quarter batches, each one inside a single critical section.

        Args:
            batches: Batches to append in order.

        Returns:
            Number of transactions appended.
        """
        appended = 0
        for batch in batches:
            with self._lock:
                self._transactions.extend(batch.transactions)
                self._quarters.setdefault(batch.quarter, None)
            appended += len(batch.transactions)
        return appended

    def clear(self) -> None:
        """Drop every stored transaction."""
        with self._lock:
            self._transactions.clear()
            self._quarters.clear()

    def snapshot(self) -> tuple[Transaction, ...]:
        """Return an immutable view of the current records."""
        with self._lock:
            return tuple(self._transactions)

    def loaded_quarters(self) -> list[str]:
        """Return successfully loaded quarter codes in load order.

        Quarters whose batch held no records are included.
        """
        with self._lock:
            return list(self._quarters)

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)
