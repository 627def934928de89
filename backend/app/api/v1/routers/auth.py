# app/api/v1/routers/auth.py
import logging
from fastapi import APIRouter, Depends
from app.api.v1.deps import get_credentials, get_tokens
from app.core.errors import Unauthorized
from app.core.security import TokenService
from app.schemas.auth import LoginRequest, LoginResponse, TokenClaims
from app.schemas.error import ErrorOut
from app.schemas.user import UserOut
from app.services import CredentialStore, validate_login

logger = logging.getLogger("uvicorn.error")

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}},
)
async def login(
    body: LoginRequest,
    credentials: CredentialStore = Depends(get_credentials),
    tokens: TokenService = Depends(get_tokens),
):
    """
    Authenticate a user and issue a session token.

    Args:
        body: Request body containing email and password

    Returns:
        LoginResponse:
            - token: Signed bearer token, valid for 24 hours
            - user: Public user projection
            - expiresAt: Token expiry (ISO-8601)

    Raises:
        ValidationFailed (400): Missing email or password
        Unauthorized (401): Unknown email or wrong password
    """
    email, password = validate_login(body)
    user = credentials.authenticate(email, password)
    if user is None:
        logger.info("[auth] failed login attempt")
        raise Unauthorized("Email or password is incorrect", title="Invalid credentials")

    token, expires_at = tokens.issue(TokenClaims(sub=user.id, email=user.email, role=user.role))
    return LoginResponse(token=token, user=UserOut.from_user(user), expiresAt=expires_at)
