"""In-memory book store."""

import threading
from collections.abc import Iterable
from dataclasses import replace

from ..logging import get_logger
from .base import BookRecord, BookRepository
from .ids import IdGenerator, SequentialIdGenerator

logger = get_logger(__name__)


class InMemoryBookStore(BookRepository):
    """Ordered list of books held in process memory.

    Records handed out are copies, so callers cannot mutate the store
    behind its back.
    """

    def __init__(
        self,
        books: Iterable[BookRecord] | None = None,
        id_generator: IdGenerator | None = None,
    ):
        self._lock = threading.RLock()
        self._books: list[BookRecord] = [replace(book) for book in books or ()]
        self._id_generator = id_generator or SequentialIdGenerator()
        self._id_generator.observe(book.id for book in self._books)

    @property
    def id_strategy(self) -> str:
        return self._id_generator.name

    def list(self) -> list[BookRecord]:
        with self._lock:
            return [replace(book) for book in self._books]

    def get(self, book_id: str) -> BookRecord | None:
        with self._lock:
            book = self._find(book_id)
            return replace(book) if book else None

    def create(self, title: str, author: str) -> BookRecord:
        with self._lock:
            book = BookRecord(
                id=self._id_generator.next_id(self._books),
                title=title,
                author=author,
            )
            self._books.append(book)
            logger.debug("Book stored", book_id=book.id, count=len(self._books))
            return replace(book)

    def update(
        self, book_id: str, title: str | None = None, author: str | None = None
    ) -> BookRecord | None:
        with self._lock:
            book = self._find(book_id)
            if book is None:
                return None

            if title is not None:
                book.title = title
            if author is not None:
                book.author = author
            return replace(book)

    def delete(self, book_id: str) -> bool:
        with self._lock:
            initial_count = len(self._books)
            self._books = [book for book in self._books if book.id != book_id]
            removed = initial_count - len(self._books)
            if removed > 1:
                logger.warning("Deleted books sharing one id", book_id=book_id, removed=removed)
            return removed > 0

    def clear(self) -> None:
        with self._lock:
            self._books.clear()

    def count(self) -> int:
        with self._lock:
            return len(self._books)

    def _find(self, book_id: str) -> BookRecord | None:
        for book in self._books:
            if book.id == book_id:
                return book
        return None
