"""API request and response models."""

from api.models.requests import ProxyRequest
from api.models.responses import (
    ErrorResponse,
    HealthResponse,
    HistoryListResponse,
    HistoryRecordResponse,
    MessageResponse,
    ProxyResponse,
    RootResponse,
)

__all__ = [
    "ProxyRequest",
    "ErrorResponse",
    "HealthResponse",
    "HistoryListResponse",
    "HistoryRecordResponse",
    "MessageResponse",
    "ProxyResponse",
    "RootResponse",
]
