"""Credential Primitives - verifies bcrypt hashing and JWT issue/validate.

Tests:
    - Hash verifies only the original password; unknown hash formats fail closed
    - Tokens round-trip the user id and carry a one-hour expiry
    - Expired, foreign-signed, malformed and claim-less tokens are rejected
    - Signing with an unsupported algorithm raises TokenIssuanceError
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from billing.core.errors import (
    ExpiredTokenError, InvalidTokenError, TokenIssuanceError,
)
from billing.infrastructure.security import PasswordHasher, TokenSigner

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"
USER_ID = "01HZX3K5N2A8B7C6D5E4F3G2H1"


@pytest.fixture(scope="module")
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def signer():
    return TokenSigner(SECRET)


def test_hash_is_not_plain_text(hasher):
    hashed = hasher.hash("password")
    assert hashed != "password"
    assert hashed.startswith("$2")


def test_verify_accepts_original_password(hasher):
    assert hasher.verify("password", hasher.hash("password"))


def test_verify_rejects_other_password(hasher):
    assert not hasher.verify("Password", hasher.hash("password"))


def test_verify_fails_closed_on_missing_or_unknown_hash(hasher):
    assert not hasher.verify("password", "")
    assert not hasher.verify("password", None)
    assert not hasher.verify("password", "not-a-bcrypt-hash")


def test_token_round_trip(signer):
    token = signer.issue(USER_ID)
    assert token
    assert signer.validate(token) == USER_ID


def test_token_expires_one_hour_after_issue(signer):
    token = signer.issue(USER_ID)
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims["user_id"] == USER_ID
    assert claims["exp"] - claims["iat"] == 3600


def test_expired_token_rejected(signer):
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    token = signer.issue(USER_ID, now=issued)
    with pytest.raises(ExpiredTokenError):
        signer.validate(token)


def test_token_signed_with_other_secret_rejected(signer):
    other = TokenSigner("another-secret-that-is-also-long-enough-123")
    with pytest.raises(InvalidTokenError):
        signer.validate(other.issue(USER_ID))


def test_malformed_token_rejected(signer):
    with pytest.raises(InvalidTokenError):
        signer.validate("not.a.jwt")


def test_token_without_user_id_rejected(signer):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"iat": int(now.timestamp()), "exp": int((now + timedelta(hours=1)).timestamp())},
        SECRET, algorithm="HS256",
    )
    with pytest.raises(InvalidTokenError):
        signer.validate(token)


def test_token_without_exp_rejected(signer):
    token = jwt.encode({"user_id": USER_ID, "iat": 0}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        signer.validate(token)


def test_unsupported_algorithm_raises_issuance_error():
    broken = TokenSigner(SECRET, algorithm="NOT-AN-ALGORITHM")
    with pytest.raises(TokenIssuanceError):
        broken.issue(USER_ID)
