"""
Module 09D - Proxy Request Route

Execute an outbound request on behalf of the caller and record it.

The handler is a plain (sync) function: FastAPI runs it in its worker
threadpool, so each inbound request blocks only its own worker while the
outbound call is in flight.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_service
from api.models.requests import ProxyRequest
from api.models.responses import ProxyResponse
from orchestrator.relay import RelayService


logger = logging.getLogger(__name__)

router = APIRouter(tags=["request"])


@router.post(
    "/api/request",
    response_model=ProxyResponse,
    response_model_exclude_none=True,
)
def send_request(
    body: ProxyRequest,
    service: RelayService = Depends(get_service),
) -> ProxyResponse:
    """
    Execute the described request.

    Always returns HTTP 200 once the outbound call was attempted; success is
    false when it failed below HTTP (DNS, refused, timeout, TLS). Origin
    status codes, including 4xx and 5xx, are success=true.
    """
    result = service.send(body)
    return ProxyResponse(
        success=result.success,
        response=result.response,
        history_id=result.history_id,
        error=result.error,
    )
