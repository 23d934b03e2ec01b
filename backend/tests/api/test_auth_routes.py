"""Auth Routes - verifies POST /api/login over HTTP.

Invariants:
    - 200 with a non-empty token for the seeded admin
    - 401 with the same body for unknown email and wrong password
    - 400 for a malformed body
"""

import os

import jwt

from billing.seed import DEFAULT_EMAIL, DEFAULT_PASSWORD


async def test_login_returns_token(client, seeded):
    res = await client.post(
        "/api/login", json={"email": DEFAULT_EMAIL, "password": DEFAULT_PASSWORD},
    )
    assert res.status_code == 200
    token = res.json()["token"]
    claims = jwt.decode(token, os.environ["JWT_SECRET"], algorithms=["HS256"])
    assert claims["user_id"] == seeded.user.id
    assert claims["exp"] - claims["iat"] == 3600


async def test_wrong_password_and_unknown_email_answer_alike(client, seeded):
    wrong = await client.post(
        "/api/login", json={"email": DEFAULT_EMAIL, "password": "wrong"},
    )
    unknown = await client.post(
        "/api/login", json={"email": "nobody@localhost.ai", "password": DEFAULT_PASSWORD},
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json()["error"]["code"] == unknown.json()["error"]["code"] == "INVALID_CREDENTIALS"
    assert wrong.json()["error"]["message"] == unknown.json()["error"]["message"]
    assert wrong.headers["www-authenticate"] == "Bearer"


async def test_malformed_email_is_validation_error(client):
    res = await client.post("/api/login", json={"email": "not-an-email", "password": "x"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    fields = [d["field"] for d in res.json()["error"]["details"]]
    assert "body.email" in fields


async def test_missing_password_is_validation_error(client):
    res = await client.post("/api/login", json={"email": DEFAULT_EMAIL})
    assert res.status_code == 400
