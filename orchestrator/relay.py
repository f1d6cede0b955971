"""
Module 09A - Relay Service

Composes the request execution engine with the record store.

Key features:
- Every execution that reaches the outbound call is recorded, whether the
  origin answered or the transport failed
- Response delivery takes priority over persistence: a store failure after
  execution is logged and the response is still returned without a historyId
- Input validation happens before this layer; rejected descriptions are
  never executed and never recorded
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from core.engine.executor import RequestExecutor
from core.schemas.errors import RecordNotFoundError, StoreError
from core.schemas.exchange import (
    ExchangeRecord,
    NewExchange,
    RequestDescription,
    ResponseOutcome,
)
from core.store.base import RecordStore


logger = logging.getLogger(__name__)


DEFAULT_HISTORY_LIMIT = 50


@dataclass
class RelayResult:
    """Result of relaying one request."""
    success: bool
    response: ResponseOutcome
    history_id: Optional[str] = None
    error: Optional[str] = None
    persist_error: Optional[str] = None

    @property
    def recorded(self) -> bool:
        return self.history_id is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the proxy API's response body."""
        data: dict[str, Any] = {
            "success": self.success,
            "response": self.response.model_dump(mode="json", by_alias=True),
        }
        if self.history_id is not None:
            data["historyId"] = self.history_id
        if self.error is not None:
            data["error"] = self.error
        return data


class RelayService:
    """
    Executes requests and keeps their history.

    Usage:
        service = RelayService(executor=RequestExecutor(HttpTransport()), store=store)
        result = service.send(description)
        history = service.list_history()
    """

    def __init__(
        self,
        executor: RequestExecutor,
        store: RecordStore,
        *,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        if history_limit <= 0:
            raise ValueError("history_limit must be positive")
        self.executor = executor
        self.store = store
        self.history_limit = history_limit

    def send(self, description: RequestDescription, *, record: bool = True) -> RelayResult:
        """
        Execute a request and record the exchange.

        Args:
            description: Validated request description
            record: Persist the exchange (the CLI can opt out)

        Returns:
            RelayResult; success is False only for transport failures
        """
        execution = self.executor.run(description)
        result = RelayResult(
            success=execution.succeeded,
            response=execution.outcome,
            error=execution.error,
        )

        if not record:
            return result

        try:
            stored = self.store.create(NewExchange.from_description(description, execution.outcome))
            result.history_id = stored.id
        except StoreError as e:
            logger.error(f"Exchange executed but not recorded: {e.message}")
            result.persist_error = e.message

        return result

    def list_history(self, limit: Optional[int] = None) -> list[ExchangeRecord]:
        """Most recent records, newest first, capped at history_limit."""
        effective = self.history_limit if limit is None else min(limit, self.history_limit)
        return self.store.list_recent(effective)

    def get_record(self, record_id: str) -> ExchangeRecord:
        """Look up one record; raises RecordNotFoundError when absent."""
        record = self.store.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(record_id)
        return record

    def delete_record(self, record_id: str) -> bool:
        """Delete one record. Deleting an absent record is not an error."""
        removed = self.store.delete_by_id(record_id)
        if removed:
            logger.info(f"Deleted history record {record_id}")
        return removed

    def clear_history(self) -> int:
        """Delete every record; returns how many were removed."""
        count = self.store.delete_all()
        logger.info(f"Cleared {count} history record(s)")
        return count

    def health(self) -> dict[str, Any]:
        """Liveness information, including whether the store answers."""
        return {
            "success": True,
            "message": "Server is running",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "store": "connected" if self.store.ping() else "disconnected",
        }
