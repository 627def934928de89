# app/schemas/user.py
"""
Pydantic schemas for user endpoints.
UserOut is the only outward representation of a User.
"""
import datetime as dt
from typing import List
from pydantic import BaseModel

from app.models.user import User

class UserCreateIn(BaseModel):
    """
    Request model for registration.
    Every field is optional here; required-ness is enforced by the validation
    rules so that all missing fields are reported together.
    """
    name: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None  # Defaults to "user"; any value is accepted

class UserOut(BaseModel):
    """
    Public projection of a User. Built field by field so new secret fields on
    the entity can never leak through it.
    """
    id: str
    name: str
    email: str
    role: str
    status: str
    createdAt: dt.datetime

    @classmethod
    def from_user(cls, user: User) -> "UserOut":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            status=user.status,
            createdAt=user.created_at,
        )

class UserListOut(BaseModel):
    """
    Paginated list of users.
    """
    data: List[UserOut]
    total: int  # Count before slicing
    page: int
    limit: int
