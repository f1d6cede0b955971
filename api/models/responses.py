"""
Module 09D - API Response Models

Pydantic models for API response serialization.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from core.schemas.exchange import ExchangeRecord, ResponseOutcome


class RootResponse(BaseModel):
    """Response for GET / endpoint."""

    activeStatus: bool = True
    error: bool = False


class HealthResponse(BaseModel):
    """Response for GET /api/health endpoint."""

    success: bool = True
    message: str = "Server is running"
    timestamp: str = Field(..., description="Server time (ISO 8601, UTC)")
    store: str = Field(default="connected", description="Record store state")


class ProxyResponse(BaseModel):
    """Response for POST /api/request endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="False only when the outbound call failed below HTTP")
    response: ResponseOutcome = Field(..., description="Normalized response outcome")
    history_id: str | None = Field(
        default=None,
        alias="historyId",
        description="Identifier of the stored exchange record",
    )
    error: str | None = Field(default=None, description="Transport failure message")


class HistoryListResponse(BaseModel):
    """Response for GET /api/history endpoint."""

    success: bool = True
    history: list[ExchangeRecord] = Field(default_factory=list)


class HistoryRecordResponse(BaseModel):
    """Response for GET /api/history/{id} endpoint."""

    success: bool = True
    request: ExchangeRecord


class MessageResponse(BaseModel):
    """Response for delete endpoints."""

    success: bool = True
    message: str
    deleted: int | None = Field(default=None, description="Number of records removed")


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = False
    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Error code")
    details: dict[str, Any] = Field(default_factory=dict)
