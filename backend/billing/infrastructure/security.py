"""Credential Primitives - bcrypt password hashing and HS256 bearer tokens.

Invariants:
    - Passwords are only ever compared through CryptContext.verify (constant-time, salted)
    - Tokens carry user_id, iat and exp; exp - iat == ttl (one hour by default)
    - Expired tokens raise ExpiredTokenError, every other decode failure InvalidTokenError
    - Signing failures raise TokenIssuanceError, never return None

Design Decisions:
    - passlib CryptContext with deprecated="auto": stored hashes from older
      schemes keep verifying while new hashes use bcrypt
    - dummy_verify() on unknown emails keeps both login failures equally slow
    - Clock injectable (now=) so expiry is testable without sleeping
"""

from datetime import datetime, timedelta, timezone

import jwt
from passlib.context import CryptContext

from billing.core.domain_types import UserId
from billing.core.errors import (
    ExpiredTokenError, InvalidTokenError, TokenIssuanceError,
)

USER_ID_CLAIM = "user_id"
DEFAULT_TOKEN_TTL = timedelta(hours=1)


class PasswordHasher:
    """bcrypt hashing through passlib."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds,
        )

    def hash(self, raw: str) -> str:
        return self._context.hash(raw)

    def verify(self, raw: str, hashed: str | None) -> bool:
        if not hashed:
            self._context.dummy_verify()
            return False
        try:
            return bool(self._context.verify(raw, hashed))
        except ValueError:
            # Stored value is not a recognizable hash
            return False

    def dummy_verify(self) -> None:
        self._context.dummy_verify()


class TokenSigner:
    """Issues and validates HMAC-signed JWTs for a shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TOKEN_TTL,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, user_id: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            USER_ID_CLAIM: user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
            raise TokenIssuanceError(str(e)) from e

    def validate(self, token: str) -> UserId:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError() from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        user_id = claims.get(USER_ID_CLAIM)
        if not isinstance(user_id, str) or not user_id:
            raise InvalidTokenError("token carries no user_id")
        return UserId(user_id)
