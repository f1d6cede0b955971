"""
Record Store Interface

Durable storage for exchange records. Stores are pure persistence: they
assign identifiers and creation timestamps, and return records newest first.
"""

from __future__ import annotations

import itertools
import os
import time
from abc import ABC, abstractmethod
from typing import Optional

from core.schemas.exchange import ExchangeRecord, NewExchange


_PROCESS_TAG = os.urandom(5).hex()
_COUNTER = itertools.count()


def generate_record_id(now: Optional[float] = None) -> str:
    """
    Generate a unique, sortable record identifier.

    Format: 24 hex characters = 4-byte seconds | 5-byte process tag | 3-byte counter.
    """
    seconds = int(now if now is not None else time.time())
    counter = next(_COUNTER) & 0xFFFFFF
    return f"{seconds & 0xFFFFFFFF:08x}{_PROCESS_TAG}{counter:06x}"


def is_record_id(value: str) -> bool:
    """Check that a string has the shape of a record identifier."""
    if len(value) != 24:
        return False
    try:
        int(value, 16)
    except ValueError:
        return False
    return True


class RecordStore(ABC):
    """
    Abstract record store.

    Subclasses must implement every operation below. All methods may raise
    StoreError when the backing storage is unavailable.
    """

    name: str = "abstract"

    @abstractmethod
    def create(self, exchange: NewExchange) -> ExchangeRecord:
        """Persist an exchange, assigning its id and createdAt."""

    @abstractmethod
    def list_recent(self, limit: int) -> list[ExchangeRecord]:
        """Return up to `limit` records, newest first."""

    @abstractmethod
    def get_by_id(self, record_id: str) -> Optional[ExchangeRecord]:
        """Return one record, or None if absent."""

    @abstractmethod
    def delete_by_id(self, record_id: str) -> bool:
        """Delete one record. Returns False when it was already absent."""

    @abstractmethod
    def delete_all(self) -> int:
        """Delete every record. Returns how many were removed."""

    def ping(self) -> bool:
        """Check that the store is reachable."""
        return True

    def close(self) -> None:
        """Release any held resources."""

    def __enter__(self) -> "RecordStore":
        return self

    def __exit__(self, *args) -> None:
        self.close()
