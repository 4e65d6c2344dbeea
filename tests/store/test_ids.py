"""
Tests for book id generation strategies
"""

import uuid

import pytest

from bookstore.store import (
    BookRecord,
    InMemoryBookStore,
    LengthIdGenerator,
    SequentialIdGenerator,
    UuidIdGenerator,
    create_id_generator,
)


class TestSequentialIdGenerator:
    def test_counts_from_start(self):
        generator = SequentialIdGenerator()

        assert [generator.next_id([]) for _ in range(3)] == ["1", "2", "3"]

    def test_custom_start(self):
        assert SequentialIdGenerator(start=10).next_id([]) == "10"

    def test_ignores_collection_size(self):
        generator = SequentialIdGenerator()
        generator.next_id([])

        assert generator.next_id([]) == "2"

    def test_observe_moves_past_existing_ids(self):
        generator = SequentialIdGenerator()
        generator.observe(["1", "7", "3"])

        assert generator.next_id([]) == "8"

    def test_observe_never_moves_backwards(self):
        generator = SequentialIdGenerator(start=20)
        generator.observe(["2"])

        assert generator.next_id([]) == "20"

    def test_observe_skips_non_numeric_ids(self):
        generator = SequentialIdGenerator()
        generator.observe(["abc", str(uuid.uuid4())])

        assert generator.next_id([]) == "1"

    def test_observe_skips_digit_like_ids_int_cannot_parse(self):
        generator = SequentialIdGenerator()
        generator.observe(["²", "3"])

        assert generator.next_id([]) == "4"

    def test_store_accepts_superscript_id(self):
        store = InMemoryBookStore(books=[BookRecord(id="²", title="A", author="a")])

        assert store.get("²").title == "A"
        assert store.create("B", "b").id == "1"


class TestLengthIdGenerator:
    def test_uses_collection_size(self):
        generator = LengthIdGenerator()

        assert generator.next_id([]) == "1"
        assert generator.next_id(["a", "b"]) == "3"


class TestUuidIdGenerator:
    def test_generates_unique_uuids(self):
        generator = UuidIdGenerator()
        ids = {generator.next_id([]) for _ in range(50)}

        assert len(ids) == 50
        for value in ids:
            assert str(uuid.UUID(value)) == value

    def test_store_with_uuid_ids(self):
        store = InMemoryBookStore(id_generator=UuidIdGenerator())
        book = store.create("Dune", "Frank Herbert")

        assert store.get(book.id) == book


class TestCreateIdGenerator:
    @pytest.mark.parametrize(
        "strategy, expected",
        [
            ("sequential", SequentialIdGenerator),
            ("length", LengthIdGenerator),
            ("uuid", UuidIdGenerator),
            ("SEQUENTIAL", SequentialIdGenerator),
        ],
    )
    def test_known_strategies(self, strategy, expected):
        assert isinstance(create_id_generator(strategy), expected)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown id strategy 'random'"):
            create_id_generator("random")

    def test_each_call_returns_new_generator(self):
        first = create_id_generator("sequential")
        second = create_id_generator("sequential")

        first.next_id([])
        assert second.next_id([]) == "1"
