# app/services/posts.py
"""
Post creation and listing on top of the posts table.
"""
import datetime as dt
import logging
from typing import Optional

from app.core.errors import utc_now
from app.models.post import Post, estimate_read_time
from app.services.store import Table, all_of
from app.services.validation import NewPost

logger = logging.getLogger("uvicorn.error")


class PostService:
    def __init__(self, posts: Table[Post]):
        self._posts = posts

    def create(self, author_id: str, new: NewPost, now: Optional[dt.datetime] = None) -> Post:
        """
        Store a validated post. The author comes from the caller's token
        claims and is not looked up again.
        """
        now = now or utc_now()
        post = self._posts.append(
            lambda new_id: Post(
                id=new_id,
                title=new.title,
                content=new.content,
                author_id=author_id,
                category=new.category,
                tags=new.tags,
                is_published=new.is_published,
                published_at=now if new.is_published else None,
                read_time=estimate_read_time(new.content),
                created_at=now,
            )
        )
        logger.info("[posts] created id=%s author=%s category=%s", post.id, author_id, post.category)
        return post

    @staticmethod
    def _filters(author: Optional[str], category: Optional[str]):
        checks = []
        if author:
            checks.append(lambda p: p.author_id == author)
        if category:
            checks.append(lambda p: p.category == category)
        return all_of(checks)

    def search(self, author: Optional[str] = None, category: Optional[str] = None) -> list[Post]:
        """All posts matching both filters (a missing filter matches everything)."""
        return self._posts.filter(self._filters(author, category))

    def page(
        self,
        page: int,
        limit: int,
        author: Optional[str] = None,
        category: Optional[str] = None,
    ) -> tuple[list[Post], int]:
        return self._posts.list(self._filters(author, category), page=page, limit=limit)
