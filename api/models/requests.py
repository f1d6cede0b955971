"""
Module 09D - API Request Models

Pydantic models for API request validation.
"""

from pydantic import ConfigDict

from core.schemas.exchange import RequestDescription


class ProxyRequest(RequestDescription):
    """Request body for POST /api/request."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "method": "POST",
                    "url": "https://httpbin.org/post",
                    "headers": {"Accept": "application/json"},
                    "body": "{\"hello\": \"world\"}",
                    "bodyType": "raw",
                }
            ]
        },
    )
