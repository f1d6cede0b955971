"""
Module 01 - Schemas
File: errors.py

Purpose: Error taxonomy shared by the engine, the record store, the API and
the CLI. Transport failures are not listed here: they are data, carried
inside a ResponseOutcome, and never unwind as exceptions past the engine.
"""

from typing import Any, Iterable, Mapping


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input errors
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_METHOD = "INVALID_METHOD"
    INVALID_URL = "INVALID_URL"
    INVALID_BODY_TYPE = "INVALID_BODY_TYPE"

    # Persistence errors
    STORE_ERROR = "STORE_ERROR"
    RECORD_NOT_FOUND = "RECORD_NOT_FOUND"

    INTERNAL_ERROR = "INTERNAL_ERROR"


# Input fields with their own code; anything else is INVALID_REQUEST
FIELD_ERROR_CODES = {
    "method": ErrorCodes.INVALID_METHOD,
    "url": ErrorCodes.INVALID_URL,
    "bodyType": ErrorCodes.INVALID_BODY_TYPE,
    "body_type": ErrorCodes.INVALID_BODY_TYPE,
}


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class RelayError(Exception):
    """
    Base exception for all relaypost errors.

    Carries a machine-readable code and structured details so the API layer
    can map it to a response without inspecting the message.
    """

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.INTERNAL_ERROR,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InputValidationError(RelayError):
    """Raised when a request description is malformed (before any outbound call)."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.INVALID_REQUEST,
        field_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_path:
            full_details["field_path"] = field_path
        super().__init__(message=message, code=code, details=full_details)
        self.field_path = field_path

    @classmethod
    def from_errors(cls, errors: Iterable[Mapping[str, Any]]) -> "InputValidationError":
        """
        Build from pydantic error dicts (ValidationError.errors() or
        FastAPI's RequestValidationError.errors()).

        The code follows the first offending field.
        """
        parts: list[str] = []
        entries: list[dict[str, Any]] = []
        fields: list[str] = []
        for err in errors:
            loc = [str(p) for p in err.get("loc", ())]
            if loc and loc[0] == "body":
                loc = loc[1:]
            where = ".".join(loc)
            msg = err.get("msg", "invalid value")
            parts.append(f"{where}: {msg}" if where else msg)
            entries.append({"loc": loc, "msg": msg})
            if loc:
                fields.append(loc[0])

        field_path = fields[0] if fields else None
        return cls(
            "; ".join(parts) or "Invalid request",
            code=FIELD_ERROR_CODES.get(field_path or "", ErrorCodes.INVALID_REQUEST),
            field_path=field_path,
            details={"errors": entries},
        )


class StoreError(RelayError):
    """Raised when the record store cannot be reached or a write fails."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message=message, code=ErrorCodes.STORE_ERROR, details=details)


class RecordNotFoundError(RelayError):
    """Raised when an exchange record lookup misses."""

    def __init__(self, record_id: str) -> None:
        super().__init__(
            message="Request not found",
            code=ErrorCodes.RECORD_NOT_FOUND,
            details={"id": record_id},
        )
        self.record_id = record_id
