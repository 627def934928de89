# app/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines the login request/response and the claims carried by session tokens.
"""
import datetime as dt
from pydantic import BaseModel

from .user import UserOut

class LoginRequest(BaseModel):
    """
    Request model for user login endpoint.
    Fields are optional so missing ones are reported by the validation rules.
    """
    email: str | None = None
    password: str | None = None  # Plain text, verified against the stored hash

class TokenClaims(BaseModel):
    """
    Identity embedded in a session token at issuance.
    """
    sub: str  # Subject (user ID)
    email: str
    role: str = "user"

class LoginResponse(BaseModel):
    """
    Response model for successful login.
    """
    token: str  # Bearer token for subsequent requests
    user: UserOut  # Public projection, never carries the hash
    expiresAt: dt.datetime
