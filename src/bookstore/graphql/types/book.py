"""
Book GraphQL type definitions
"""

import strawberry

from ...store.base import BookRecord


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    id: strawberry.ID
    title: str
    author: str

    @classmethod
    def from_record(cls, record: BookRecord) -> "Book":
        return cls(id=strawberry.ID(record.id), title=record.title, author=record.author)
