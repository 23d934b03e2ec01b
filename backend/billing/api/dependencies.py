"""API Dependencies - request context, authentication and service wiring.

Invariants:
    - get_request_context carries the request's single transaction (from get_db)
    - get_authenticated_context adds an identity only after the token validated
    - Missing/malformed Authorization header raises InvalidTokenError (401),
      never reaches a service

Design Decisions:
    - Services built per request from cached Settings: construction is cheap
      (no I/O) and dependency_overrides can swap any piece in tests
    - Header parsed by hand instead of fastapi.security.HTTPBearer: HTTPBearer
      answers 403 on a missing header, the API contract is 401
"""

from datetime import timedelta

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from billing.config import Settings, get_settings
from billing.core.errors import InvalidTokenError
from billing.core.request_context import RequestContext
from billing.infrastructure.database import get_db
from billing.infrastructure.security import PasswordHasher, TokenSigner
from billing.repositories.invoice_repository import SqlInvoiceRepository
from billing.repositories.user_repository import SqlUserRepository
from billing.services.authenticator import Authenticator
from billing.services.invoice_service import InvoiceService

_BEARER_PREFIX = "bearer "


def get_request_context(
    db: AsyncSession = Depends(get_db),
) -> RequestContext[AsyncSession]:
    return RequestContext().with_transaction(db)


def get_authenticator(
    settings: Settings = Depends(get_settings),
) -> Authenticator:
    return Authenticator(
        user_repository=SqlUserRepository(),
        password_hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        token_signer=TokenSigner(
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(minutes=settings.token_ttl_minutes),
        ),
    )


def get_invoice_service(
    settings: Settings = Depends(get_settings),
) -> InvoiceService:
    return InvoiceService(
        invoice_repository=SqlInvoiceRepository(),
        user_repository=SqlUserRepository(),
        fee_rate=settings.fee_rate,
        tax_rate=settings.tax_rate,
    )


def extract_bearer_token(authorization: str | None) -> str:
    """Return the token part of an 'Authorization: Bearer <token>' header."""
    if not authorization:
        raise InvalidTokenError("missing Authorization header")
    if not authorization.lower().startswith(_BEARER_PREFIX):
        raise InvalidTokenError("Authorization header must use the Bearer scheme")
    token = authorization[len(_BEARER_PREFIX):].strip()
    if not token:
        raise InvalidTokenError("empty bearer token")
    return token


def get_authenticated_context(
    ctx: RequestContext[AsyncSession] = Depends(get_request_context),
    authenticator: Authenticator = Depends(get_authenticator),
    authorization: str | None = Header(default=None),
) -> RequestContext[AsyncSession]:
    token = extract_bearer_token(authorization)
    user_id = authenticator.validate_token(token)
    return ctx.with_identity(user_id)
