from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import BookRepository, get_book_store

if TYPE_CHECKING:
    from ..mutations.root import CreateBookInput, UpdateBookInput
    from ..types.book import Book

logger = get_logger(__name__)


def get_book_store_from_info(info: strawberry.Info) -> BookRepository:
    """
    Extract the book store from the GraphQL context.

    Falls back to the shared store when the context does not carry one,
    e.g. when the schema is executed directly.
    """
    context = info.context
    store = context.get("book_store") if isinstance(context, dict) else None
    if store is None:
        return get_book_store()
    return store


# Query resolvers
async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve all books in insertion order."""
    from ..types.book import Book as BookType

    store = get_book_store_from_info(info)
    return [BookType.from_record(record) for record in store.list()]


async def resolve_book_by_id(info: strawberry.Info, id: str) -> Book | None:
    """Resolve a single book by its ID."""
    from ..types.book import Book as BookType

    store = get_book_store_from_info(info)
    record = store.get(str(id))
    if record is None:
        logger.info("Book not found", book_id=str(id))
        return None
    return BookType.from_record(record)


# Mutation resolvers
async def create_book(info: strawberry.Info, input: CreateBookInput) -> Book:
    """Append a new book to the store."""
    from ..types.book import Book as BookType

    logger.info("Creating book", title=input.title, author=input.author)

    store = get_book_store_from_info(info)
    record = store.create(input.title, input.author)

    logger.info("Book created", book_id=record.id)
    return BookType.from_record(record)


async def update_book(info: strawberry.Info, input: UpdateBookInput) -> Book | None:
    """
    Merge the provided fields into an existing book.

    Returns None when no book has the given ID; the store is left untouched.
    """
    from ..types.book import Book as BookType

    logger.info(
        "Updating book",
        book_id=str(input.id),
        title=input.title,
        author=input.author,
    )

    store = get_book_store_from_info(info)
    record = store.update(str(input.id), title=input.title, author=input.author)

    if record is None:
        logger.info("Book not found for update", book_id=str(input.id))
        return None

    return BookType.from_record(record)


async def delete_book(info: strawberry.Info, id: str) -> bool:
    """Delete a book. Returns False when nothing was removed."""
    logger.info("Deleting book", book_id=str(id))

    store = get_book_store_from_info(info)
    deleted = store.delete(str(id))

    if not deleted:
        logger.info("Book not found for delete", book_id=str(id))
    return deleted
