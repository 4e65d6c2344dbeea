"""
Sample books loaded into a fresh store.
"""

from __future__ import annotations

from dataclasses import replace

from .base import BookRecord

DEFAULT_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(id="1", title="The Awakening", author="Kate Chopin"),
    BookRecord(id="2", title="City of Glass", author="Paul Auster"),
)


def default_books() -> list[BookRecord]:
    """Return fresh copies of the sample books, ids included."""
    return [replace(book) for book in DEFAULT_BOOKS]
