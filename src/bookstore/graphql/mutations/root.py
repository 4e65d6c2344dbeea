"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import Book


# Input types for mutations
@strawberry.input
class CreateBookInput:
    """Input for creating a new book."""

    title: str
    author: str


@strawberry.input
class UpdateBookInput:
    """Input for updating a book. Omitted fields keep their current value."""

    id: strawberry.ID
    title: str | None = None
    author: str | None = None


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createBook")
    async def create_book(self, info: strawberry.Info, input: CreateBookInput) -> Book:
        """Create a new book."""
        from ..resolvers.book import create_book

        return await create_book(info, input)

    @strawberry.mutation(name="updateBook")
    async def update_book(self, info: strawberry.Info, input: UpdateBookInput) -> Book | None:
        """Update an existing book. Returns null if no book has the given ID."""
        from ..resolvers.book import update_book

        return await update_book(info, input)

    @strawberry.mutation(name="deleteBook")
    async def delete_book(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a book. Returns false if no book has the given ID."""
        from ..resolvers.book import delete_book

        return await delete_book(info, id)
