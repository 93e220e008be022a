"""Liveness endpoint for the development backend."""

import time

from fastapi import APIRouter, Request

from uigen.server import __version__
from uigen.server.api.schemas import HealthResponse
from uigen.server.services import get_project_store

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report version, uptime and how many projects are stored."""
    started_at = getattr(request.app.state, "started_at", None)
    uptime = time.monotonic() - started_at if started_at is not None else 0.0
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=uptime,
        projects=get_project_store().count(),
    )
