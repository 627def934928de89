"""
Unit tests for services.store module.
Tests id generation, pagination and filtering of in-memory tables.
"""
import threading

import pytest

from app.models.user import User
from app.services.store import CollectionStore, Table, all_of, parse_positive_int


class Row:
    def __init__(self, row_id: str, kind: str = "a"):
        self.id = row_id
        self.kind = kind


def make_table(n: int = 0) -> Table:
    table = Table(key=lambda r: r.id)
    for _ in range(n):
        table.append(lambda new_id: Row(new_id))
    return table


class TestIdGeneration:

    def test_ids_are_sequential_strings(self):
        table = make_table(3)
        assert [r.id for r in table.filter()] == ["1", "2", "3"]

    def test_get_by_id(self):
        table = make_table(2)
        assert table.get("2").id == "2"
        assert table.get("99") is None

    def test_concurrent_appends_get_unique_ids(self):
        """Many writers at once must never reuse an id."""
        table = make_table()
        barrier = threading.Barrier(8)

        def writer():
            barrier.wait()
            for _ in range(50):
                table.append(lambda new_id: Row(new_id))

        threads = [threading.Thread(target=writer) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [r.id for r in table.filter()]
        assert len(table) == 400
        assert len(set(ids)) == 400
        assert sorted(int(i) for i in ids) == list(range(1, 401))

    def test_custom_id_factory(self):
        table = Table(key=lambda r: r.id, id_factory=lambda n: f"row_{n * 10}")
        row = table.append(lambda new_id: Row(new_id))
        assert row.id == "row_10"

    def test_files_table_uses_time_based_ids(self):
        store = CollectionStore(clock_ms=lambda: 1700000000123)
        assert store.files._id_factory(1) == "file_1700000000123"


class TestPagination:

    def test_second_page_of_25(self):
        table = make_table(25)
        items, total = table.list(page=2, limit=10)
        assert [r.id for r in items] == [str(i) for i in range(11, 21)]
        assert total == 25

    def test_last_partial_page(self):
        table = make_table(25)
        items, total = table.list(page=3, limit=10)
        assert [r.id for r in items] == [str(i) for i in range(21, 26)]
        assert total == 25

    def test_page_past_the_end_is_empty(self):
        items, total = make_table(5).list(page=4, limit=10)
        assert items == []
        assert total == 5

    def test_total_counts_filtered_rows_before_slicing(self):
        table = make_table()
        for i in range(12):
            table.append(lambda new_id, i=i: Row(new_id, kind="even" if i % 2 == 0 else "odd"))
        items, total = table.list(lambda r: r.kind == "even", page=1, limit=4)
        assert total == 6
        assert len(items) == 4
        assert all(r.kind == "even" for r in items)

    @pytest.mark.parametrize(
        "raw, expected",
        [(None, 1), ("", 1), ("abc", 1), ("0", 1), ("-3", 1), ("2", 2), (" 7 ", 7)],
    )
    def test_parse_positive_int(self, raw, expected):
        assert parse_positive_int(raw, 1) == expected


class TestFilters:

    def test_all_of_combines_with_and(self):
        check = all_of([lambda r: r.id != "1", lambda r: r.kind == "a"])
        assert check(Row("2", "a")) is True
        assert check(Row("1", "a")) is False
        assert check(Row("2", "b")) is False

    def test_all_of_empty_matches_everything(self):
        assert all_of([])(Row("1")) is True


def test_stored_entities_are_immutable():
    store = CollectionStore()
    user = store.users.append(
        lambda new_id: User(
            id=new_id,
            name="Jane",
            email="jane@x.io",
            password_hash="x",
            created_at="2024-01-15T10:30:00Z",
        )
    )
    with pytest.raises(Exception):
        user.email = "other@x.io"
    assert store.users.get("1").email == "jane@x.io"
