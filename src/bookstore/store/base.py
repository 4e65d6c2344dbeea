"""Core book store interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class BookRecord:
    """A stored book. Mutable: updates merge fields in place."""

    id: str
    title: str
    author: str


class BookRepository(ABC):
    """Abstract base class for book stores.

    Lookups that miss are reported through return values, never raised:
    ``update`` returns ``None`` and ``delete`` returns ``False``.
    """

    @abstractmethod
    def list(self) -> Sequence[BookRecord]:
        """Return all books in insertion order."""
        pass

    @abstractmethod
    def get(self, book_id: str) -> BookRecord | None:
        """Return the first book with ``book_id``, or ``None``."""
        pass

    @abstractmethod
    def create(self, title: str, author: str) -> BookRecord:
        """Append a new book and return it."""
        pass

    @abstractmethod
    def update(
        self, book_id: str, title: str | None = None, author: str | None = None
    ) -> BookRecord | None:
        """Merge the given fields into the first matching book.

        Fields passed as ``None`` are left unchanged.
        """
        pass

    @abstractmethod
    def delete(self, book_id: str) -> bool:
        """Remove every book with ``book_id``; True if anything was removed."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove all books."""
        pass

    def count(self) -> int:
        return len(self.list())

    def __len__(self) -> int:
        return self.count()
