"""
Domain model for users.
Represents a user account held by the credential store, including the
password hash. Never serialize this model directly; use schemas.UserOut.
"""
import datetime as dt
from typing import Literal
from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """
    User account.

    Instances are frozen: the store hands out the stored object itself and
    nobody can change it afterwards.

    Security:
    - password_hash is an Argon2 hash, never the plain text
    - email is unique across all users (checked at creation only)
    """
    model_config = ConfigDict(frozen=True)

    id: str  # Generated by the users table ("1", "2", ...)
    name: str
    email: str
    password_hash: str
    role: str = "user"  # Any string round-trips; "admin" has no extra rights
    status: Literal["active", "inactive"] = "active"
    created_at: dt.datetime  # Set once at creation
