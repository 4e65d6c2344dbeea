"""
Main FastAPI application for the bookstore service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import BookRepository, create_book_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Bookstore API ready",
        url=f"http://{settings.api_host}:{settings.api_port}/graphql",
        books=app.state.book_store.count(),
        id_strategy=settings.id_strategy,
    )

    yield

    logger.info("Shutting down Bookstore API...")


def create_app(book_store: BookRepository | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        book_store: Store owned by this app. A new one is built from settings
            when omitted, so separate apps never share books.
    """
    app = FastAPI(
        title="Bookstore API",
        description="GraphQL API over an in-memory book list",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # Unknown id strategies fail here, before the server accepts requests
    app.state.book_store = book_store if book_store is not None else create_book_store()

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check(request: Request):  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": __version__,
            "books": request.app.state.book_store.count(),
        }

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(app.state.book_store, graphiql=settings.graphiql)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        # Server should not start with a broken schema
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
