"""
Record Store Module

Persistence for request/response exchange records.
"""

from .base import RecordStore, generate_record_id, is_record_id
from .memory import InMemoryRecordStore
from .sql import SqlRecordStore


MEMORY_URL = "memory://"


def create_store(url: str) -> RecordStore:
    """Create a store from a URL: memory:// or any SQLAlchemy database URL."""
    if url == MEMORY_URL:
        return InMemoryRecordStore()
    return SqlRecordStore(url)


__all__ = [
    "MEMORY_URL",
    "RecordStore",
    "InMemoryRecordStore",
    "SqlRecordStore",
    "create_store",
    "generate_record_id",
    "is_record_id",
]
