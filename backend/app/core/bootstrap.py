"""
Bootstrap module for application initialization.
Seeds the demo account and its first post so a fresh server has something to show.
"""
import datetime as dt
import logging

from app.models.post import Post
from app.services.credentials import CredentialStore
from app.services.store import CollectionStore

logger = logging.getLogger("uvicorn.error")

DEMO_CREATED_AT = dt.datetime(2024, 1, 15, 10, 30, tzinfo=dt.timezone.utc)
DEMO_EMAIL = "john@example.com"
DEMO_PASSWORD = "password123"

def seed_demo_data(store: CollectionStore, credentials: CredentialStore) -> None:
    """
    Create the demo user and post if the demo email is not registered yet.

    Demo account:
      John Doe <john@example.com>, password "password123", role "user"
    Demo post:
      "Getting Started with API Development" (technology, published)
    """
    if credentials.exists(DEMO_EMAIL):
        return  # Already seeded

    user = credentials.create(
        name="John Doe",
        email=DEMO_EMAIL,
        password=DEMO_PASSWORD,
        role="user",
        created_at=DEMO_CREATED_AT,
    )
    store.posts.append(
        lambda new_id: Post(
            id=new_id,
            title="Getting Started with API Development",
            content="This is a comprehensive guide to API development...",
            author_id=user.id,
            category="technology",
            tags=("api", "development"),
            is_published=True,
            published_at=DEMO_CREATED_AT,
            read_time=5,
            created_at=DEMO_CREATED_AT,
        )
    )
    logger.info("[bootstrap] Seeded demo user id=%s email=%s with one post", user.id, user.email)
