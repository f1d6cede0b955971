"""
Request Execution Engine

Normalization, execution and outcome unification for proxied requests.
"""

from .executor import DEFAULT_TIMEOUT_MS, Execution, RequestExecutor, Transport
from .normalize import normalize_request, shape_payload, with_default_content_type
from .outcome import Completed, ExecutionResult, TransportFailed, render_body

__all__ = [
    "DEFAULT_TIMEOUT_MS",
    "Execution",
    "RequestExecutor",
    "Transport",
    "normalize_request",
    "shape_payload",
    "with_default_content_type",
    "Completed",
    "ExecutionResult",
    "TransportFailed",
    "render_body",
]
