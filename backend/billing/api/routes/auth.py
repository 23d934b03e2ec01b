"""Auth Routes - exchange email/password for a bearer token.

Invariants:
    - Unknown email and wrong password both answer 401 with the same body
    - The plain-text password is never logged
"""

import logging

from fastapi import APIRouter, Depends, status

from billing.api.dependencies import get_authenticator, get_request_context
from billing.core.request_context import RequestContext
from billing.schemas.auth import LoginRequest, LoginResponse
from billing.services.authenticator import Authenticator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


@router.post(
    "/login", response_model=LoginResponse, status_code=status.HTTP_200_OK,
)
async def login(
    body: LoginRequest,
    ctx: RequestContext = Depends(get_request_context),
    authenticator: Authenticator = Depends(get_authenticator),
):
    token = await authenticator.login(ctx, body.email, body.password)
    logger.info("Login succeeded", extra={"path": "/api/login"})
    return LoginResponse(token=token)
