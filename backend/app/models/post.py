"""
Domain model for blog posts.
"""
import datetime as dt
import math
from typing import Literal
from pydantic import BaseModel, ConfigDict

CATEGORIES = ("technology", "lifestyle", "business", "sports")
Category = Literal["technology", "lifestyle", "business", "sports"]

WORDS_PER_MINUTE = 200

def estimate_read_time(content: str) -> int:
    """Minutes to read, one per started block of 200 space-separated words."""
    return math.ceil(len(content.split(" ")) / WORDS_PER_MINUTE)

class Post(BaseModel):
    """
    Blog post.

    Relationships:
    - author_id refers to a User id (taken from the author's token claims)

    published_at is set iff is_published is True.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str
    author_id: str
    category: Category
    tags: tuple[str, ...] = ()  # Ordered, may be empty
    is_published: bool = False
    published_at: dt.datetime | None = None
    read_time: int  # Derived from content at creation
    created_at: dt.datetime
