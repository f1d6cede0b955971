"""
Module 01 - Schemas
File: __init__.py

Purpose: Export the public API for the schemas module.
"""

from .errors import (
    FIELD_ERROR_CODES,
    ErrorCodes,
    InputValidationError,
    RecordNotFoundError,
    RelayError,
    StoreError,
)
from .exchange import (
    BodyEncoding,
    ExchangeRecord,
    HttpMethod,
    NewExchange,
    NormalizedOutboundRequest,
    RequestDescription,
    ResponseOutcome,
    find_header,
)

__all__ = [
    # Errors
    "FIELD_ERROR_CODES",
    "ErrorCodes",
    "InputValidationError",
    "RecordNotFoundError",
    "RelayError",
    "StoreError",
    # Exchange models
    "BodyEncoding",
    "ExchangeRecord",
    "HttpMethod",
    "NewExchange",
    "NormalizedOutboundRequest",
    "RequestDescription",
    "ResponseOutcome",
    "find_header",
]
