"""
In-Memory Record Store

Process-local store. Used by tests and selected with a `memory://` store URL.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Optional

from core.schemas.exchange import ExchangeRecord, NewExchange
from core.store.base import RecordStore, generate_record_id


class InMemoryRecordStore(RecordStore):
    """Thread-safe dict-backed store."""

    name = "memory"

    def __init__(self) -> None:
        self._records: dict[str, ExchangeRecord] = {}
        self._lock = threading.Lock()

    def create(self, exchange: NewExchange) -> ExchangeRecord:
        now = datetime.now(timezone.utc)
        record = exchange.to_record(generate_record_id(now.timestamp()), now)
        with self._lock:
            self._records[record.id] = record
        return record

    def list_recent(self, limit: int) -> list[ExchangeRecord]:
        if limit <= 0:
            return []
        with self._lock:
            records = list(self._records.values())
        records.sort(key=lambda r: (r.created_at, r.id), reverse=True)
        return records[:limit]

    def get_by_id(self, record_id: str) -> Optional[ExchangeRecord]:
        with self._lock:
            return self._records.get(record_id)

    def delete_by_id(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def delete_all(self) -> int:
        with self._lock:
            count = len(self._records)
            self._records.clear()
        return count

    def __len__(self) -> int:
        return len(self._records)
