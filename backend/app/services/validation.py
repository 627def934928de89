# app/services/validation.py
"""
Validation rules applied before any collection mutation.

Each validate_* function checks its rules in a fixed order and raises on the
first failure, except the required-field step which reports every missing
field at once. A value that is absent or empty counts as missing.
Nothing is written until a validator has returned.
"""
from typing import NamedTuple, Optional

from app.core.errors import Conflict, ValidationFailed
from app.models.post import CATEGORIES
from app.schemas.auth import LoginRequest
from app.schemas.post import PostCreateIn
from app.schemas.user import UserCreateIn
from app.services.credentials import CredentialStore

NAME_MIN, NAME_MAX = 2, 100
PASSWORD_MIN = 8
TITLE_MIN, TITLE_MAX = 5, 200
CONTENT_MIN = 10


class NewUser(NamedTuple):
    name: str
    email: str
    password: str
    role: str


class NewPost(NamedTuple):
    title: str
    content: str
    category: str
    tags: tuple[str, ...]
    is_published: bool


def _require(fields: dict[str, Optional[str]], message: str) -> None:
    missing = {
        field: f"{field.capitalize()} is required"
        for field, value in fields.items()
        if not value
    }
    if missing:
        raise ValidationFailed(message, details=missing)


def validate_user_create(body: UserCreateIn, credentials: CredentialStore) -> NewUser:
    """
    Rules, in order:
      1. name, email and password present (all missing ones reported)
      2. name length between 2 and 100
      3. password at least 8 characters
      4. email not registered yet (Conflict)
    The role is not checked; it defaults to "user".
    """
    _require(
        {"name": body.name, "email": body.email, "password": body.password},
        "Name, email, and password are required",
    )
    if not NAME_MIN <= len(body.name) <= NAME_MAX:
        raise ValidationFailed(f"Name must be between {NAME_MIN} and {NAME_MAX} characters")
    if len(body.password) < PASSWORD_MIN:
        raise ValidationFailed(f"Password must be at least {PASSWORD_MIN} characters long")
    if credentials.exists(body.email):
        raise Conflict(
            "A user with this email address already exists",
            title="User already exists",
        )
    return NewUser(
        name=body.name,
        email=body.email,
        password=body.password,
        role=body.role or "user",
    )


def validate_post_create(body: PostCreateIn) -> NewPost:
    """
    Rules, in order:
      1. title, content and category present (all missing ones reported)
      2. title length between 5 and 200
      3. content at least 10 characters
      4. category is one of CATEGORIES
    """
    _require(
        {"title": body.title, "content": body.content, "category": body.category},
        "Title, content, and category are required",
    )
    if not TITLE_MIN <= len(body.title) <= TITLE_MAX:
        raise ValidationFailed(f"Title must be between {TITLE_MIN} and {TITLE_MAX} characters")
    if len(body.content) < CONTENT_MIN:
        raise ValidationFailed(f"Content must be at least {CONTENT_MIN} characters long")
    if body.category not in CATEGORIES:
        raise ValidationFailed(
            "Invalid category. Must be one of: " + ", ".join(CATEGORIES),
            details={"category": body.category},
        )
    return NewPost(
        title=body.title,
        content=body.content,
        category=body.category,
        tags=tuple(body.tags or ()),
        is_published=bool(body.isPublished),
    )


def validate_login(body: LoginRequest) -> tuple[str, str]:
    _require(
        {"email": body.email, "password": body.password},
        "Email and password are required",
    )
    return body.email, body.password
