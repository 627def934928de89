# app/services/credentials.py
"""
Credential store: user records and their password hashes.

This is the only writer of the users table. Lookups return the stored User
entity, which still carries the hash; routers must project it through
schemas.UserOut before anything leaves the process.
"""
import datetime as dt
import logging
import threading
from typing import Optional

from app.core.errors import Conflict, utc_now
from app.core.security import hash_password, verify_password
from app.models.user import User
from app.services.store import Table

logger = logging.getLogger("uvicorn.error")


class CredentialStore:
    def __init__(self, users: Table[User]):
        self._users = users
        self._by_email: dict[str, User] = {}
        # Guards the email check and the append as one step
        self._lock = threading.Lock()

    def create(
        self,
        name: str,
        email: str,
        password: str,
        role: str = "user",
        created_at: Optional[dt.datetime] = None,
    ) -> User:
        """
        Hash the password and store a new active user.

        Raises:
            Conflict: a user with this email already exists
        """
        password_hash = hash_password(password)
        with self._lock:
            if email in self._by_email:
                raise Conflict(
                    "A user with this email address already exists",
                    title="User already exists",
                )
            user = self._users.append(
                lambda new_id: User(
                    id=new_id,
                    name=name,
                    email=email,
                    password_hash=password_hash,
                    role=role,
                    status="active",
                    created_at=created_at or utc_now(),
                )
            )
            self._by_email[email] = user
        logger.info("[users] created id=%s role=%s", user.id, user.role)
        return user

    def exists(self, email: str) -> bool:
        return email in self._by_email

    def find_by_email(self, email: str) -> Optional[User]:
        return self._by_email.get(email)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def verify(self, password: str, password_hash: str) -> bool:
        return verify_password(password, password_hash)

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user when the email exists and the password matches."""
        user = self.find_by_email(email)
        if user is None or not self.verify(password, user.password_hash):
            return None
        return user
