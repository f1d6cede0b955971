"""
Execution Outcomes

The two ways an execution can end, and their conversion to the single
ResponseOutcome shape that is returned to callers and persisted.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from core.schemas.exchange import ResponseOutcome


def render_body(body: Any, encoding: Optional[str] = None) -> str:
    """
    Render a response body as text.

    Bytes are decoded with the declared charset, falling back to UTF-8.
    JSON objects and arrays come back pretty-printed with 2-space
    indentation; any other text is returned unchanged.
    """
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    if isinstance(body, (bytes, bytearray)):
        body = _decode(bytes(body), encoding)
    if not isinstance(body, str):
        return str(body)

    try:
        parsed = json.loads(body)
    except ValueError:
        return body
    if isinstance(parsed, (dict, list)):
        return json.dumps(parsed, indent=2, ensure_ascii=False)
    return body


def _decode(raw: bytes, encoding: Optional[str]) -> str:
    if encoding:
        try:
            return raw.decode(encoding, errors="replace")
        except LookupError:
            pass
    return raw.decode("utf-8", errors="replace")


@dataclass
class Completed:
    """The origin answered. Any status code counts."""
    status: int
    status_text: str = ""
    headers: dict[str, Any] = field(default_factory=dict)
    body: Any = None
    encoding: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return True

    @property
    def error(self) -> Optional[str]:
        return None

    def to_outcome(self, elapsed_ms: int) -> ResponseOutcome:
        return ResponseOutcome(
            status=self.status,
            status_text=self.status_text,
            headers=dict(self.headers),
            data=render_body(self.body, self.encoding),
            time=elapsed_ms,
        )


@dataclass
class TransportFailed:
    """No usable response. Partial response fields are set when the failure carried one."""
    message: str
    status: Optional[int] = None
    status_text: Optional[str] = None
    headers: Optional[dict[str, Any]] = None
    body: Any = None
    encoding: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return False

    @property
    def error(self) -> Optional[str]:
        return self.message

    def to_outcome(self, elapsed_ms: int) -> ResponseOutcome:
        has_body = self.body is not None and self.body != b"" and self.body != ""
        return ResponseOutcome(
            status=self.status or 0,
            status_text=self.status_text or self.message,
            headers=dict(self.headers or {}),
            data=render_body(self.body, self.encoding) if has_body else self.message,
            time=elapsed_ms,
        )


ExecutionResult = Union[Completed, TransportFailed]
