"""Factory for the process-wide book store."""

import threading

from ..logging import get_logger
from .base import BookRepository
from .ids import create_id_generator
from .memory import InMemoryBookStore
from .seed_data import default_books

logger = get_logger(__name__)

_store: BookRepository | None = None
_store_lock = threading.Lock()


def create_book_store(
    id_strategy: str | None = None, seed_sample_data: bool | None = None
) -> BookRepository:
    """Create a new book store.

    Arguments left as None fall back to ``settings``.

    Raises:
        ValueError: If the id strategy is unknown
    """
    from ..config import settings

    strategy = id_strategy if id_strategy is not None else settings.id_strategy
    seed = seed_sample_data if seed_sample_data is not None else settings.seed_sample_data

    store = InMemoryBookStore(
        books=default_books() if seed else None,
        id_generator=create_id_generator(strategy),
    )
    logger.info("Book store created", id_strategy=strategy, books=store.count())
    return store


def get_book_store() -> BookRepository:
    """Get the shared book store, creating it from settings on first access."""
    global _store

    if _store is None:
        with _store_lock:
            if _store is None:
                _store = create_book_store()
    return _store


def reset_book_store() -> None:
    """Drop the shared book store (for tests)."""
    global _store
    with _store_lock:
        _store = None
