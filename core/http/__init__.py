"""
HTTP Transport Module

Outbound HTTP transport used by the request execution engine.
"""

from .client import HttpTransport, TransportFailure, TransportResponse

__all__ = [
    "HttpTransport",
    "TransportFailure",
    "TransportResponse",
]
