"""
Module 09D - History Routes

List, fetch and delete recorded exchanges.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_service
from api.errors import NotFoundError
from api.models.responses import HistoryListResponse, HistoryRecordResponse, MessageResponse
from core.schemas.errors import RecordNotFoundError
from orchestrator.relay import RelayService


router = APIRouter(prefix="/api/history", tags=["history"])


@router.get("", response_model=HistoryListResponse)
def list_history(
    limit: Optional[int] = Query(default=None, ge=1, description="Max records (capped at 50)"),
    service: RelayService = Depends(get_service),
) -> HistoryListResponse:
    """Most recent exchanges, newest first."""
    return HistoryListResponse(success=True, history=service.list_history(limit))


@router.get("/{record_id}", response_model=HistoryRecordResponse)
def get_history_record(
    record_id: str,
    service: RelayService = Depends(get_service),
) -> HistoryRecordResponse:
    """One exchange by id; 404 when absent."""
    try:
        record = service.get_record(record_id)
    except RecordNotFoundError as e:
        raise NotFoundError(e.message, details=e.details)
    return HistoryRecordResponse(success=True, request=record)


@router.delete("/{record_id}", response_model=MessageResponse, response_model_exclude_none=True)
def delete_history_record(
    record_id: str,
    service: RelayService = Depends(get_service),
) -> MessageResponse:
    """Delete one exchange. Succeeds even if it was already gone."""
    service.delete_record(record_id)
    return MessageResponse(success=True, message="Request deleted from history")


@router.delete("", response_model=MessageResponse)
def clear_history(service: RelayService = Depends(get_service)) -> MessageResponse:
    """Delete every exchange."""
    deleted = service.clear_history()
    return MessageResponse(success=True, message="All history cleared", deleted=deleted)
