# app/api/v1/routers/users.py
from fastapi import APIRouter, Depends, Query, status
from app.api.v1.deps import get_credentials, get_current_claims, get_store
from app.core.errors import NotFound
from app.schemas.error import ErrorOut
from app.schemas.user import UserCreateIn, UserListOut, UserOut
from app.services import (
    CollectionStore,
    CredentialStore,
    parse_positive_int,
    validate_user_create,
)
from app.services.store import DEFAULT_LIMIT, DEFAULT_PAGE

router = APIRouter(prefix="/users", tags=["users"])

@router.get(
    "",
    response_model=UserListOut,
    dependencies=[Depends(get_current_claims)],
    responses={401: {"model": ErrorOut}, 403: {"model": ErrorOut}},
)
async def list_users(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    store: CollectionStore = Depends(get_store),
):
    """
    Get a page of users in creation order (authentication required).

    Args:
        page: 1-based page number; missing or invalid values mean 1
        limit: Page size; missing or invalid values mean 10

    Returns:
        UserListOut: data (public projections), total, page, limit
    """
    page_no = parse_positive_int(page, DEFAULT_PAGE)
    size = parse_positive_int(limit, DEFAULT_LIMIT)
    rows, total = store.users.list(page=page_no, limit=size)
    return UserListOut(
        data=[UserOut.from_user(u) for u in rows],
        total=total,
        page=page_no,
        limit=size,
    )

@router.post(
    "",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorOut}, 409: {"model": ErrorOut}},
)
async def create_user(body: UserCreateIn, credentials: CredentialStore = Depends(get_credentials)):
    """
    Register a new user account.

    The password is hashed before storage and never returned. The role
    defaults to "user" and is stored as given.

    Raises:
        ValidationFailed (400): Missing fields, bad name length, short password
        Conflict (409): Email already registered
    """
    new = validate_user_create(body, credentials)
    user = credentials.create(new.name, new.email, new.password, new.role)
    return UserOut.from_user(user)

@router.get(
    "/{user_id}",
    response_model=UserOut,
    dependencies=[Depends(get_current_claims)],
    responses={401: {"model": ErrorOut}, 403: {"model": ErrorOut}, 404: {"model": ErrorOut}},
)
async def get_user(user_id: str, credentials: CredentialStore = Depends(get_credentials)):
    user = credentials.find_by_id(user_id)
    if user is None:
        raise NotFound("User with the specified ID does not exist", title="User not found")
    return UserOut.from_user(user)
