"""
Request Normalization

Turns a RequestDescription into the NormalizedOutboundRequest the transport
sends. Body shaping only happens for POST/PUT/PATCH with a non-empty body:

    raw         JSON-parse the text; send the parsed value, or the text if
                it does not parse. Default Content-Type application/json.
    form-data   send the text as-is. Default multipart/form-data.
    urlencoded  send the text as-is. Default application/x-www-form-urlencoded.

The default Content-Type is only filled in when the caller has not set one
under any capitalization.
"""

from __future__ import annotations

import json
from typing import Any

from core.schemas.exchange import (
    BodyEncoding,
    NormalizedOutboundRequest,
    RequestDescription,
    find_header,
)


CONTENT_TYPE = "Content-Type"


def shape_payload(body: str, encoding: BodyEncoding) -> tuple[Any, bool]:
    """
    Shape body text for the given encoding.

    Returns:
        (payload, structured) where structured is True when payload is a
        parsed JSON value rather than text.
    """
    if encoding is BodyEncoding.RAW:
        try:
            return json.loads(body), True
        except ValueError:
            return body, False
    return body, False


def with_default_content_type(headers: dict[str, str], content_type: str) -> dict[str, str]:
    """Copy headers, adding Content-Type only if no variant of it is present."""
    merged = dict(headers)
    if find_header(merged, CONTENT_TYPE) is None:
        merged[CONTENT_TYPE] = content_type
    return merged


def normalize_request(description: RequestDescription) -> NormalizedOutboundRequest:
    """Build the outbound request for a validated description."""
    headers = dict(description.headers)
    payload: Any = None
    structured = False

    if description.method.carries_body and description.body:
        encoding = description.body_type
        payload, structured = shape_payload(description.body, encoding)
        headers = with_default_content_type(headers, encoding.default_content_type)

    return NormalizedOutboundRequest(
        method=description.method.value.lower(),
        url=description.url,
        headers=headers,
        payload=payload,
        structured=structured,
    )
