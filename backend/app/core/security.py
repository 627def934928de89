# app/core/security.py
"""
Security module for authentication.
Handles password hashing and signed, time-limited session tokens.
"""
import datetime as dt
import jwt  # PyJWT
from passlib.context import CryptContext
from pydantic import ValidationError

from app.core.errors import Forbidden, utc_now
from app.schemas.auth import TokenClaims

# Password hashing context
# Argon2 is salted and has an adaptive cost; verify() compares in constant time
pwd_context = CryptContext(
    schemes=["argon2"],
    deprecated="auto",
)

JWT_ALG = "HS256"  # JWT signing algorithm (HMAC SHA-256)
ACCESS_TOKEN_EXPIRE_HOURS = 24
MIN_SECRET_BYTES = 32  # HS256 keys shorter than the digest are flagged as insecure

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to keep in the credential store)
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Returns False (instead of raising) when the stored hash is malformed.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


class TokenService:
    """
    Issues and verifies signed session tokens.

    The signing secret is handed in once at construction and only read
    afterwards. Tokens are stateless: there is no revocation list, a token is
    valid until its embedded expiry.

    Token payload:
        - sub: Subject (user ID)
        - email: User email
        - role: User role
        - iat: Issued at timestamp
        - exp: Expiration timestamp
    """

    def __init__(self, secret: str, expire_hours: int = ACCESS_TOKEN_EXPIRE_HOURS):
        self._secret = secret
        self._ttl = dt.timedelta(hours=expire_hours)

    def __repr__(self) -> str:
        return f"TokenService(ttl={self._ttl})"

    @property
    def ttl(self) -> dt.timedelta:
        return self._ttl

    def issue(self, claims: TokenClaims, now: dt.datetime | None = None) -> tuple[str, dt.datetime]:
        """
        Create a signed token for the given claims.

        Returns:
            (token, expires_at) where expires_at is issuance time + TTL
        """
        now = now or utc_now()
        expires_at = now + self._ttl
        payload = {
            **claims.model_dump(),
            "iat": now,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=JWT_ALG)
        return token, expires_at

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a token.

        Raises:
            Forbidden: bad signature, malformed token, missing claims or expiry
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALG],
                options={"require": ["exp", "sub"]},
            )
            return TokenClaims.model_validate(payload)
        except (jwt.InvalidTokenError, ValidationError):
            raise Forbidden("Invalid or expired token")
