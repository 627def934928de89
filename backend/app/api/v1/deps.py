# app/api/v1/deps.py
from fastapi import Header, Request

from app.core.errors import Unauthorized
from app.core.security import TokenService
from app.schemas.auth import TokenClaims
from app.services import CollectionStore, CredentialStore, FileIntake, PostService


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Return the token from an "Authorization: Bearer <token>" header value,
    or None when the header is missing, uses another scheme or is empty.
    """
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization.split(" ", 1)[1].strip()
        return token or None
    return None


def authenticate(authorization: str | None, tokens: TokenService) -> TokenClaims:
    """
    Access gate: turn an Authorization header into verified claims.

    Raises:
        Unauthorized (401): No bearer token in the request
        Forbidden (403): Token present but invalid or expired (from TokenService.verify)
    """
    token = extract_bearer_token(authorization)
    if not token:
        raise Unauthorized("Access token required")
    return tokens.verify(token)


# ---- application services, built once per app in main.create_app ----
def get_tokens(request: Request) -> TokenService:
    return request.app.state.tokens


def get_store(request: Request) -> CollectionStore:
    return request.app.state.store


def get_credentials(request: Request) -> CredentialStore:
    return request.app.state.credentials


def get_posts(request: Request) -> PostService:
    return request.app.state.posts


def get_intake(request: Request) -> FileIntake:
    return request.app.state.intake


async def get_current_claims(
    request: Request,
    authorization: str | None = Header(default=None),
) -> TokenClaims:
    """
    FastAPI dependency guarding protected routes.

    Verifies the bearer token and exposes its claims both as the dependency
    value and on request.state.claims.

    Usage:
        @router.post("/protected")
        async def protected_route(claims: TokenClaims = Depends(get_current_claims)):
            return {"user_id": claims.sub}
    """
    claims = authenticate(authorization, get_tokens(request))
    request.state.claims = claims
    return claims
