"""Auth Schemas - login request/response bodies.

Invariants:
    - email validated syntactically (EmailStr) before any store lookup
    - password non-empty; its strength is not checked at login
"""

from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=256)


class LoginResponse(BaseModel):
    """Bearer token for the Authorization header."""
    token: str
