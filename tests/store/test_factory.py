"""
Tests for book store construction and seeding
"""

import pytest

from bookstore.store import (
    DEFAULT_BOOKS,
    InMemoryBookStore,
    LengthIdGenerator,
    create_book_store,
    default_books,
    get_book_store,
    reset_book_store,
)


class TestCreateBookStore:
    def test_seeded_by_default(self):
        store = create_book_store(id_strategy="sequential", seed_sample_data=True)

        assert [book.title for book in store.list()] == ["The Awakening", "City of Glass"]
        assert store.create("Dune", "Frank Herbert").id == "3"

    def test_without_seed(self):
        store = create_book_store(id_strategy="sequential", seed_sample_data=False)

        assert store.count() == 0

    def test_length_strategy(self):
        store = create_book_store(id_strategy="length", seed_sample_data=True)

        assert store.id_strategy == "length"
        assert store.create("Dune", "Frank Herbert").id == "3"

    def test_unknown_strategy_fails(self):
        with pytest.raises(ValueError):
            create_book_store(id_strategy="nope")

    def test_falls_back_to_settings(self, monkeypatch):
        from bookstore.config import settings

        monkeypatch.setattr(settings, "id_strategy", "uuid")
        monkeypatch.setattr(settings, "seed_sample_data", False)

        store = create_book_store()

        assert store.id_strategy == "uuid"
        assert store.count() == 0

    def test_stores_are_independent(self):
        first = create_book_store(seed_sample_data=True)
        second = create_book_store(seed_sample_data=True)

        first.delete("1")

        assert second.count() == 2


class TestSharedStore:
    def test_get_returns_same_instance(self):
        assert get_book_store() is get_book_store()

    def test_reset_drops_instance(self):
        store = get_book_store()
        store.create("Dune", "Frank Herbert")

        reset_book_store()

        assert get_book_store() is not store


class TestDefaultBooks:
    def test_sample_books(self):
        assert [(b.id, b.title, b.author) for b in default_books()] == [
            ("1", "The Awakening", "Kate Chopin"),
            ("2", "City of Glass", "Paul Auster"),
        ]

    def test_returns_fresh_copies(self):
        books = default_books()
        books[0].title = "Changed"

        assert DEFAULT_BOOKS[0].title == "The Awakening"
        assert default_books()[0].title == "The Awakening"

    def test_length_store_seeded_with_defaults_continues_numbering(self):
        store = InMemoryBookStore(books=default_books(), id_generator=LengthIdGenerator())

        assert store.create("Dune", "Frank Herbert").id == "3"
