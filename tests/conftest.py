"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from bookstore.store import (
    InMemoryBookStore,
    LengthIdGenerator,
    default_books,
    reset_book_store,
)


@pytest.fixture
def book_store() -> InMemoryBookStore:
    """A fresh store seeded with the two sample books."""
    return InMemoryBookStore(books=default_books())


@pytest.fixture
def empty_store() -> InMemoryBookStore:
    """A fresh store with no books."""
    return InMemoryBookStore()


@pytest.fixture
def legacy_store() -> InMemoryBookStore:
    """An empty store that assigns ids by collection length."""
    return InMemoryBookStore(id_generator=LengthIdGenerator())


@pytest.fixture
def mock_info(book_store: InMemoryBookStore) -> MagicMock:
    """Create a mock GraphQL info object carrying the seeded store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {
        "request": MagicMock(headers=MagicMock(get=MagicMock(return_value=None))),
        "book_store": book_store,
    }
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables and the shared store for each test."""
    original_env = os.environ.copy()
    reset_book_store()
    yield
    reset_book_store()
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
