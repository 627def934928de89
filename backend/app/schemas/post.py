# app/schemas/post.py
"""
Pydantic schemas for post endpoints.
"""
import datetime as dt
from typing import List, Optional
from pydantic import BaseModel

from app.models.post import Post

class PostCreateIn(BaseModel):
    """
    Request model for creating a post. The author is never read from the body.
    """
    title: str | None = None
    content: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    isPublished: bool | None = None

class PostOut(BaseModel):
    id: str
    title: str
    content: str
    authorId: str
    category: str
    tags: List[str]
    isPublished: bool
    publishedAt: Optional[dt.datetime] = None  # Null unless published
    readTime: int  # Minutes
    createdAt: dt.datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostOut":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            authorId=post.author_id,
            category=post.category,
            tags=list(post.tags),
            isPublished=post.is_published,
            publishedAt=post.published_at,
            readTime=post.read_time,
            createdAt=post.created_at,
        )

class PostListOut(BaseModel):
    """
    Filtered list of posts. page/limit are present only when the caller
    asked for pagination.
    """
    data: List[PostOut]
    total: int
    page: Optional[int] = None
    limit: Optional[int] = None
