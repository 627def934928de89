# app/api/v1/routers/posts.py
from fastapi import APIRouter, Depends, Query, status
from app.api.v1.deps import get_current_claims, get_posts
from app.schemas.auth import TokenClaims
from app.schemas.error import ErrorOut
from app.schemas.post import PostCreateIn, PostListOut, PostOut
from app.services import PostService, parse_positive_int, validate_post_create
from app.services.store import DEFAULT_LIMIT, DEFAULT_PAGE

router = APIRouter(prefix="/posts", tags=["posts"])

@router.get("", response_model=PostListOut, response_model_exclude_unset=True)
async def list_posts(
    author: str | None = Query(default=None, description="Exact author id"),
    category: str | None = Query(default=None, description="Exact category"),
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    posts: PostService = Depends(get_posts),
):
    """
    List posts (public).

    author and category filters are combined with AND. Without page/limit
    every matching post is returned; with either one the result is sliced
    and page/limit are echoed back. total is always the filtered count.
    """
    if page is None and limit is None:
        rows = posts.search(author=author, category=category)
        return PostListOut(data=[PostOut.from_post(p) for p in rows], total=len(rows))

    page_no = parse_positive_int(page, DEFAULT_PAGE)
    size = parse_positive_int(limit, DEFAULT_LIMIT)
    rows, total = posts.page(page_no, size, author=author, category=category)
    return PostListOut(
        data=[PostOut.from_post(p) for p in rows],
        total=total,
        page=page_no,
        limit=size,
    )

@router.post(
    "",
    response_model=PostOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}, 403: {"model": ErrorOut}},
)
async def create_post(
    body: PostCreateIn,
    claims: TokenClaims = Depends(get_current_claims),
    posts: PostService = Depends(get_posts),
):
    """
    Create a post authored by the caller.

    The author id comes from the token claims; any author field in the body
    is ignored. publishedAt is set only when isPublished is true.

    Raises:
        ValidationFailed (400): Missing fields, bad lengths, unknown category
        Unauthorized (401) / Forbidden (403): From the access gate
    """
    new = validate_post_create(body)
    return PostOut.from_post(posts.create(claims.sub, new))
