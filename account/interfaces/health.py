"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
The body is encoded in whichever supported format the client accepts.
"""

from fastapi import APIRouter, Request

from account.core.config import settings
from account.interfaces.schemas import HealthResponse
from account.shared.transport.responses import NegotiatedResponse, negotiated_response

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> NegotiatedResponse:
    """Return current application health status."""
    return negotiated_response(
        request, HealthResponse(status="ok", version=settings.version)
    )
