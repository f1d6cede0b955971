"""
Common test fixtures shared by all modules.

Provides factory functions for core relaypost data structures:
- RequestDescription
- TransportResponse
- ResponseOutcome / NewExchange
"""

import json
from typing import Any, Optional

from core.http.client import TransportResponse
from core.schemas.exchange import NewExchange, RequestDescription, ResponseOutcome


# =============================================================================
# RequestDescription Factory
# =============================================================================

def make_description(
    method: str = "GET",
    url: str = "https://api.example.com/items",
    headers: Optional[dict[str, str]] = None,
    body: str = "",
    body_type: str = "raw",
) -> RequestDescription:
    """Create a validated RequestDescription."""
    return RequestDescription.model_validate({
        "method": method,
        "url": url,
        "headers": headers or {},
        "body": body,
        "bodyType": body_type,
    })


# =============================================================================
# TransportResponse Factory
# =============================================================================

def make_transport_response(
    status_code: int = 200,
    reason: str = "OK",
    body: Any = None,
    headers: Optional[dict[str, str]] = None,
    encoding: Optional[str] = None,
) -> TransportResponse:
    """Create a TransportResponse; dict/list bodies are JSON-encoded."""
    if body is None:
        content = b""
    elif isinstance(body, (dict, list)):
        content = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        content = body.encode("utf-8")
    else:
        content = body
    return TransportResponse(
        status_code=status_code,
        reason=reason,
        content=content,
        headers=headers if headers is not None else {"Content-Type": "application/json"},
        encoding=encoding,
    )


# =============================================================================
# Outcome / Exchange Factories
# =============================================================================

def make_outcome(
    status: int = 200,
    status_text: str = "OK",
    data: str = "{}",
    time: int = 12,
    headers: Optional[dict[str, Any]] = None,
) -> ResponseOutcome:
    """Create a ResponseOutcome."""
    return ResponseOutcome(
        status=status,
        status_text=status_text,
        headers=headers or {"content-type": "application/json"},
        data=data,
        time=time,
    )


def make_new_exchange(
    method: str = "GET",
    url: str = "https://api.example.com/items",
    status: int = 200,
    body: str = "",
) -> NewExchange:
    """Create a NewExchange ready to hand to a store."""
    return NewExchange(
        method=method,
        url=url,
        headers={"Accept": "application/json"},
        body=body,
        body_type="raw",
        response=make_outcome(status=status),
    )
