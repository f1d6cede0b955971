"""
Module 01 - Schemas
File: exchange.py

Purpose: Request/response exchange models.
These models define what a caller sends to the proxy, what the engine sends
to the remote origin, and what gets persisted in the history.

Wire names follow the client-facing JSON API (camelCase: bodyType, statusText,
createdAt); Python attribute names are snake_case and both are accepted on
input.
"""

from __future__ import annotations

import json
from datetime import datetime
from enum import Enum
from typing import Any, Optional
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HttpMethod(str, Enum):
    """HTTP verbs the proxy is willing to issue."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @property
    def carries_body(self) -> bool:
        """Whether a caller-supplied body is sent for this verb."""
        return self in (HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH)

    @classmethod
    def parse(cls, value: Any) -> "HttpMethod":
        """Parse a verb case-insensitively, raising ValueError on unknown verbs."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            raise ValueError("method is required")
        try:
            return cls(value.strip().upper())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValueError(f"unsupported method '{value}' (expected one of: {allowed})")


class BodyEncoding(str, Enum):
    """How the caller's body text is shaped for the outbound request."""

    RAW = "raw"
    FORM_DATA = "form-data"
    URLENCODED = "urlencoded"

    @property
    def default_content_type(self) -> str:
        return _DEFAULT_CONTENT_TYPES[self]

    @classmethod
    def parse(cls, value: Any) -> "BodyEncoding":
        """Parse an encoding name; missing values default to raw."""
        if isinstance(value, cls):
            return value
        if value is None or value == "":
            return cls.RAW
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(e.value for e in cls)
        raise ValueError(f"unsupported bodyType '{value}' (expected one of: {allowed})")


_DEFAULT_CONTENT_TYPES = {
    BodyEncoding.RAW: "application/json",
    BodyEncoding.FORM_DATA: "multipart/form-data",
    BodyEncoding.URLENCODED: "application/x-www-form-urlencoded",
}


class RequestDescription(BaseModel):
    """
    A caller's description of one outbound HTTP request.

    Validation happens here, before the engine ever touches the network:
    an unknown verb, a relative URL or an unknown bodyType is rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    method: HttpMethod = Field(..., description="HTTP verb (case-insensitive)")
    url: str = Field(..., description="Absolute target URL")
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Caller-controlled request headers",
    )
    body: str = Field(default="", description="Free-form request body text")
    body_type: BodyEncoding = Field(
        default=BodyEncoding.RAW,
        alias="bodyType",
        description="Body encoding: raw, form-data or urlencoded",
    )

    @field_validator("method", mode="before")
    @classmethod
    def _parse_method(cls, v: Any) -> HttpMethod:
        return HttpMethod.parse(v)

    @field_validator("url", mode="before")
    @classmethod
    def _check_url(cls, v: Any) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("url is required")
        url = v.strip()
        parts = urlsplit(url)
        if not parts.scheme or not parts.netloc:
            raise ValueError(f"url must be absolute (got '{url}')")
        return url

    @field_validator("headers", mode="before")
    @classmethod
    def _coerce_headers(cls, v: Any) -> dict[str, str]:
        if v is None:
            return {}
        if not isinstance(v, dict):
            raise ValueError("headers must be an object of name/value pairs")
        return {str(k): "" if val is None else str(val) for k, val in v.items()}

    @field_validator("body", mode="before")
    @classmethod
    def _coerce_body(cls, v: Any) -> str:
        if v is None:
            return ""
        if isinstance(v, (dict, list)):
            return json.dumps(v)
        return v if isinstance(v, str) else str(v)

    @field_validator("body_type", mode="before")
    @classmethod
    def _parse_body_type(cls, v: Any) -> BodyEncoding:
        return BodyEncoding.parse(v)


class NormalizedOutboundRequest(BaseModel):
    """The request the transport actually sends."""

    model_config = ConfigDict(extra="forbid")

    method: str = Field(..., description="Lower-cased HTTP verb")
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    payload: Any = Field(default=None, description="Parsed JSON value or body text")
    structured: bool = Field(
        default=False,
        description="True when payload is a parsed JSON value to be sent as JSON",
    )

    @property
    def has_payload(self) -> bool:
        return self.structured or self.payload is not None


class ResponseOutcome(BaseModel):
    """
    Normalized result of one execution.

    The same shape is produced whether the origin answered (any status) or
    the transport failed (status 0 unless a partial response was available).
    """

    model_config = ConfigDict(populate_by_name=True)

    status: int = Field(default=0, description="HTTP status, 0 when no response was received")
    status_text: str = Field(default="", alias="statusText")
    headers: dict[str, Any] = Field(default_factory=dict)
    data: str = Field(default="", description="Response body rendered as text")
    time: int = Field(default=0, ge=0, description="Elapsed whole milliseconds")


class ExchangeRecord(BaseModel):
    """A persisted request/response exchange. Immutable once created."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., alias="_id", description="Store-assigned sortable identifier")
    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""
    body_type: str = Field(default=BodyEncoding.RAW.value, alias="bodyType")
    response: ResponseOutcome = Field(default_factory=ResponseOutcome)
    created_at: datetime = Field(..., alias="createdAt")

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict using the API's field names."""
        return self.model_dump(mode="json", by_alias=True)


class NewExchange(BaseModel):
    """An exchange handed to the store; the store assigns id and createdAt."""

    model_config = ConfigDict(populate_by_name=True)

    method: str
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str = ""
    body_type: str = Field(default=BodyEncoding.RAW.value, alias="bodyType")
    response: ResponseOutcome = Field(default_factory=ResponseOutcome)

    @classmethod
    def from_description(
        cls,
        description: RequestDescription,
        outcome: ResponseOutcome,
    ) -> "NewExchange":
        return cls(
            method=description.method.value,
            url=description.url,
            headers=dict(description.headers),
            body=description.body,
            body_type=description.body_type.value,
            response=outcome,
        )

    def to_record(self, record_id: str, created_at: datetime) -> ExchangeRecord:
        return ExchangeRecord(
            id=record_id,
            method=self.method,
            url=self.url,
            headers=dict(self.headers),
            body=self.body,
            body_type=self.body_type,
            response=self.response.model_copy(deep=True),
            created_at=created_at,
        )


def find_header(headers: dict[str, Any], name: str) -> Optional[str]:
    """Case-insensitive header lookup; returns the stored key or None."""
    target = name.lower()
    for key in headers:
        if key.lower() == target:
            return key
    return None
