# app/services/__init__.py
"""
Services Module

Domain logic behind the HTTP routers:
- store: In-memory insertion-ordered tables with pagination and filtering
- credentials: User records, password hashing and login checks
- validation: Rule sets run before every create
- posts: Post creation and filtered listing
- uploads: Blob intake and the local blob store
"""

from .store import (
    CollectionStore,
    Table,
    parse_positive_int,
)
from .credentials import CredentialStore
from .validation import (
    NewPost,
    NewUser,
    validate_login,
    validate_post_create,
    validate_user_create,
)
from .posts import PostService
from .uploads import (
    BlobStore,
    FileIntake,
    LocalBlobStore,
)

__all__ = [
    # Storage
    "CollectionStore",
    "Table",
    "parse_positive_int",
    # Users
    "CredentialStore",
    # Validation
    "NewPost",
    "NewUser",
    "validate_login",
    "validate_post_create",
    "validate_user_create",
    # Posts
    "PostService",
    # Files
    "BlobStore",
    "FileIntake",
    "LocalBlobStore",
]
