"""
Book storage for the bookstore service
"""

from .base import BookRecord, BookRepository
from .factory import create_book_store, get_book_store, reset_book_store
from .ids import (
    IdGenerator,
    LengthIdGenerator,
    SequentialIdGenerator,
    UuidIdGenerator,
    create_id_generator,
)
from .memory import InMemoryBookStore
from .seed_data import DEFAULT_BOOKS, default_books

__all__ = [
    "BookRecord",
    "BookRepository",
    "InMemoryBookStore",
    "IdGenerator",
    "SequentialIdGenerator",
    "LengthIdGenerator",
    "UuidIdGenerator",
    "create_id_generator",
    "create_book_store",
    "get_book_store",
    "reset_book_store",
    "DEFAULT_BOOKS",
    "default_books",
]
