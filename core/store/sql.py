"""
SQL Record Store

SQLAlchemy-backed store. Any SQLAlchemy database URL works; the default is
a SQLite file next to the process (sqlite:///relaypost.db).

Each exchange is one row. A single write is one transaction, so a record is
either fully stored or not at all.

Opening the store never touches the database beyond a first attempt to
create the schema. If the database is unreachable, every operation raises
StoreError until it becomes reachable again, and the schema is created then.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Integer, String, Text, create_engine, delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker
from sqlalchemy.pool import StaticPool

from core.schemas.errors import StoreError
from core.schemas.exchange import ExchangeRecord, NewExchange, ResponseOutcome
from core.store.base import RecordStore, generate_record_id, is_record_id


logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class ExchangeRow(Base):
    """
    One persisted request/response exchange.

    Attributes:
        id: Sortable 24-hex identifier
        method: HTTP method as sent by the caller
        url: Target URL
        headers: Caller's request headers
        body: Caller's body text
        body_type: raw, form-data or urlencoded
        status: Response status (0 on transport failure)
        status_text: Reason phrase or failure message
        response_headers: Headers received in the response
        response_data: Response body rendered as text
        time_ms: Elapsed milliseconds
        created_at: When the record was stored (UTC)
    """
    __tablename__ = "exchange_records"

    id: Mapped[str] = mapped_column(String(24), primary_key=True)
    method: Mapped[str] = mapped_column(String(16))
    url: Mapped[str] = mapped_column(Text)
    headers: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    body: Mapped[str] = mapped_column(Text, default="")
    body_type: Mapped[str] = mapped_column(String(32), default="raw")
    status: Mapped[int] = mapped_column(Integer, default=0)
    status_text: Mapped[str] = mapped_column(Text, default="")
    response_headers: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    response_data: Mapped[str] = mapped_column(Text, default="")
    time_ms: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)

    def to_record(self) -> ExchangeRecord:
        created_at = self.created_at
        if created_at.tzinfo is None:
            # SQLite drops the offset; rows are always written in UTC
            created_at = created_at.replace(tzinfo=timezone.utc)
        return ExchangeRecord(
            id=self.id,
            method=self.method,
            url=self.url,
            headers=dict(self.headers or {}),
            body=self.body or "",
            body_type=self.body_type,
            response=ResponseOutcome(
                status=self.status,
                status_text=self.status_text or "",
                headers=dict(self.response_headers or {}),
                data=self.response_data or "",
                time=self.time_ms,
            ),
            created_at=created_at,
        )


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:")


class SqlRecordStore(RecordStore):
    """
    Record store over a SQLAlchemy engine.

    Usage:
        store = SqlRecordStore("sqlite:///relaypost.db")
        record = store.create(exchange)
        recent = store.list_recent(50)
    """

    name = "sql"

    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        engine_kwargs: dict[str, Any] = {"echo": echo}
        if url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(url):
                engine_kwargs["poolclass"] = StaticPool
        try:
            self._engine = create_engine(url, **engine_kwargs)
        except SQLAlchemyError as e:
            raise StoreError(f"Invalid record store URL: {e}") from e
        self._sessions = sessionmaker(bind=self._engine, expire_on_commit=False)
        self._schema_ready = False
        self._schema_lock = threading.Lock()

        display_url = self._engine.url.render_as_string(hide_password=True)
        try:
            self._ensure_schema()
            logger.info(f"Record store connected ({display_url})")
        except StoreError as e:
            logger.warning(f"Record store not reachable yet ({display_url}): {e.message}")

    def _ensure_schema(self) -> None:
        """Create the table on first successful contact with the database."""
        if self._schema_ready:
            return
        with self._schema_lock:
            if self._schema_ready:
                return
            try:
                Base.metadata.create_all(self._engine)
            except SQLAlchemyError as e:
                raise StoreError(f"Could not open record store: {e}") from e
            self._schema_ready = True

    def _session(self) -> Session:
        self._ensure_schema()
        return self._sessions()

    def create(self, exchange: NewExchange) -> ExchangeRecord:
        now = datetime.now(timezone.utc)
        row = ExchangeRow(
            id=generate_record_id(now.timestamp()),
            method=exchange.method,
            url=exchange.url,
            headers=dict(exchange.headers),
            body=exchange.body,
            body_type=exchange.body_type,
            status=exchange.response.status,
            status_text=exchange.response.status_text,
            response_headers=dict(exchange.response.headers),
            response_data=exchange.response.data,
            time_ms=exchange.response.time,
            created_at=now,
        )
        try:
            with self._session() as session, session.begin():
                session.add(row)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to save exchange record: {e}") from e
        return row.to_record()

    def list_recent(self, limit: int) -> list[ExchangeRecord]:
        if limit <= 0:
            return []
        stmt = (
            select(ExchangeRow)
            .order_by(ExchangeRow.created_at.desc(), ExchangeRow.id.desc())
            .limit(limit)
        )
        try:
            with self._session() as session:
                return [row.to_record() for row in session.scalars(stmt)]
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list exchange records: {e}") from e

    def get_by_id(self, record_id: str) -> Optional[ExchangeRecord]:
        if not is_record_id(record_id):
            return None
        try:
            with self._session() as session:
                row = session.get(ExchangeRow, record_id)
                return row.to_record() if row is not None else None
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load exchange record: {e}") from e

    def delete_by_id(self, record_id: str) -> bool:
        if not is_record_id(record_id):
            return False
        try:
            with self._session() as session, session.begin():
                result = session.execute(delete(ExchangeRow).where(ExchangeRow.id == record_id))
                return result.rowcount > 0
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to delete exchange record: {e}") from e

    def delete_all(self) -> int:
        try:
            with self._session() as session, session.begin():
                result = session.execute(delete(ExchangeRow))
                return result.rowcount or 0
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to clear exchange records: {e}") from e

    def ping(self) -> bool:
        try:
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Record store ping failed: {e}")
            return False

    def close(self) -> None:
        self._engine.dispose()
        logger.info("Record store disconnected")
