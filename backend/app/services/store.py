# app/services/store.py
"""
In-memory collection store.

Each Table keeps entities in insertion order and hands out ids from its own
counter. Id generation and append happen under one lock per table, so two
writers can never receive the same id even when handlers run in a threadpool.
"""
import threading
import time
from typing import Callable, Generic, Iterable, Optional, TypeVar

from app.models import Post, UploadedFile, User

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """
    Parse a query value as a positive int.
    Missing, non-numeric and values below 1 fall back to `default`.
    """
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


class Table(Generic[T]):
    """
    Insertion-ordered, append-only table.

    Args:
        key: Returns the id of a stored entity
        id_factory: Produces the next id from the counter value; defaults to
            the counter as a string ("1", "2", ...)
    """

    def __init__(
        self,
        key: Callable[[T], str],
        id_factory: Optional[Callable[[int], str]] = None,
    ):
        self._key = key
        self._id_factory = id_factory or str
        self._rows: list[T] = []
        self._index: dict[str, T] = {}
        self._counter = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._rows)

    def append(self, build: Callable[[str], T]) -> T:
        """
        Reserve the next id, build the entity with it and store it.
        `build` runs under the table lock and must not touch this table.
        """
        with self._lock:
            self._counter += 1
            entity = build(self._id_factory(self._counter))
            self._rows.append(entity)
            # First writer wins the id lookup when a custom factory repeats ids
            self._index.setdefault(self._key(entity), entity)
            return entity

    def get(self, entity_id: str) -> Optional[T]:
        return self._index.get(entity_id)

    def filter(self, predicate: Optional[Callable[[T], bool]] = None) -> list[T]:
        with self._lock:
            rows = list(self._rows)
        if predicate is None:
            return rows
        return [row for row in rows if predicate(row)]

    def list(
        self,
        predicate: Optional[Callable[[T], bool]] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> tuple[list[T], int]:
        """
        Filter, then slice one page.

        Returns:
            (items on the requested page, total matching before slicing)
        """
        rows = self.filter(predicate)
        start = (page - 1) * limit
        return rows[start:start + limit], len(rows)


def all_of(predicates: Iterable[Callable[[T], bool]]) -> Callable[[T], bool]:
    """AND-combine predicates; an empty set matches everything."""
    checks = list(predicates)
    return lambda row: all(check(row) for check in checks)


class CollectionStore:
    """
    Owns the users, posts and files tables for one application instance.
    """

    def __init__(self, clock_ms: Optional[Callable[[], int]] = None):
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self.users: Table[User] = Table(key=lambda u: u.id)
        self.posts: Table[Post] = Table(key=lambda p: p.id)
        self.files: Table[UploadedFile] = Table(
            key=lambda f: f.id,
            id_factory=lambda _n: f"file_{self._clock_ms()}",
        )
