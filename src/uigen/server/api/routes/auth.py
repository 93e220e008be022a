"""Development sign-in and sign-up endpoints."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from uigen.server.api.schemas import CredentialsRequest, AuthResultResponse
from uigen.server.services import check_credentials

logger = logging.getLogger(__name__)

router = APIRouter()


def _respond(request: CredentialsRequest, failure_status: int) -> JSONResponse:
    result = check_credentials(request.email, request.password)
    body = AuthResultResponse(success=result.success, error=result.error)
    if not result.success:
        logger.info("Rejected credentials for %s: %s", request.email, result.error)
        return JSONResponse(status_code=failure_status, content=body.model_dump())
    return JSONResponse(status_code=200, content=body.model_dump())


@router.post("/sign-in", response_model=AuthResultResponse)
async def sign_in(request: CredentialsRequest) -> JSONResponse:
    """Check sign-in credentials. Rejections return 401 with a result body."""
    return _respond(request, failure_status=401)


@router.post("/sign-up", response_model=AuthResultResponse)
async def sign_up(request: CredentialsRequest) -> JSONResponse:
    """Check sign-up credentials. Rejections return 400 with a result body."""
    return _respond(request, failure_status=400)
