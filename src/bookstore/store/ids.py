"""Identifier generation strategies for new book records."""

import threading
import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sized

from ..logging import get_logger

logger = get_logger(__name__)


class IdGenerator(ABC):
    """Produces the id for the next book appended to ``books``."""

    name: str

    @abstractmethod
    def next_id(self, books: Sized) -> str:
        pass

    def observe(self, existing_ids: Iterable[str]) -> None:
        """Account for ids already present (e.g. seeded records)."""
        _ = existing_ids


class SequentialIdGenerator(IdGenerator):
    """Monotonic counter. Ids are never reused, even after deletions."""

    name = "sequential"

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self._next = start

    def next_id(self, books: Sized) -> str:
        _ = books
        with self._lock:
            value = self._next
            self._next += 1
        return str(value)

    def observe(self, existing_ids: Iterable[str]) -> None:
        numeric = [int(book_id) for book_id in existing_ids if book_id.isdecimal()]
        if not numeric:
            return
        with self._lock:
            # Never move backwards; ids handed out stay retired
            self._next = max(max(numeric) + 1, self._next)


class LengthIdGenerator(IdGenerator):
    """Legacy scheme: id is the collection size plus one.

    Ids repeat once a record has been deleted and another created, e.g.
    create, create, delete("1"), create yields "1", "2", "2".
    """

    name = "length"

    def next_id(self, books: Sized) -> str:
        return str(len(books) + 1)


class UuidIdGenerator(IdGenerator):
    """Random UUID4 ids."""

    name = "uuid"

    def next_id(self, books: Sized) -> str:
        _ = books
        return str(uuid.uuid4())


_GENERATORS: dict[str, type[IdGenerator]] = {
    SequentialIdGenerator.name: SequentialIdGenerator,
    LengthIdGenerator.name: LengthIdGenerator,
    UuidIdGenerator.name: UuidIdGenerator,
}


def create_id_generator(strategy: str) -> IdGenerator:
    """Build an id generator by strategy name.

    Raises:
        ValueError: If the strategy is unknown
    """
    generator_cls = _GENERATORS.get(strategy.lower())
    if generator_cls is None:
        available = ", ".join(sorted(_GENERATORS))
        raise ValueError(f"Unknown id strategy '{strategy}'. Available: {available}")

    if generator_cls is LengthIdGenerator:
        logger.warning(
            "Using length-based book ids; ids may repeat after deletions",
            id_strategy=strategy,
        )
    return generator_cls()
