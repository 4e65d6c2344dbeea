#!/usr/bin/env python3
"""
Main CLI entry point for the bookstore server.
"""

import os
import sys

import click
import uvicorn

from bookstore import __version__
from bookstore.config import settings
from bookstore.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookstore")
def cli() -> None:
    """Bookstore CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default="0.0.0.0",
    help="Host to bind to (default: 0.0.0.0)",
)
@click.option(
    "--port",
    default=4000,
    type=int,
    help="Port to bind to (default: 4000)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--id-strategy",
    default=None,
    type=click.Choice(["sequential", "length", "uuid"]),
    help="How new book ids are assigned (default: from settings)",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    id_strategy: str | None,
    log_level: str,
) -> None:
    """Start the Bookstore API server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookstore API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # The live settings object serves this process; the environment carries
    # the same overrides into the reloader's child process
    overrides = {
        "api_host": host,
        "api_port": port,
        "debug": log_level == "debug",
        "log_level": log_level.upper(),
    }
    if id_strategy:
        overrides["id_strategy"] = id_strategy

    for name, value in overrides.items():
        setattr(settings, name, value)
        env_value = str(value).lower() if isinstance(value, bool) else str(value)
        os.environ[f"BOOKSTORE_{name.upper()}"] = env_value

    try:
        # One worker only: books live in this process's memory
        if reload:
            uvicorn.run(
                "bookstore.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            # Build the app here so it sees the overrides above, even when
            # bookstore.api.app was already imported
            from bookstore.api.app import create_app

            uvicorn.run(
                create_app(),
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to a file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema (SDL)."""
    from bookstore.graphql.schema import print_schema

    sdl = print_schema()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"Schema written to {output}")
    else:
        click.echo(sdl)


@cli.command()
@click.option(
    "--seed/--no-seed",
    default=True,
    help="Start from the sample books (default: seed)",
)
def books(seed: bool) -> None:
    """List the books a fresh server would start with."""
    from bookstore.store import create_book_store

    store = create_book_store(seed_sample_data=seed)
    records = store.list()
    if not records:
        click.echo("No books.")
        return

    id_width = max(len("ID"), *(len(book.id) for book in records))
    title_width = max(len("TITLE"), *(len(book.title) for book in records))
    click.echo(f"{'ID':<{id_width}}  {'TITLE':<{title_width}}  AUTHOR")
    for book in records:
        click.echo(f"{book.id:<{id_width}}  {book.title:<{title_width}}  {book.author}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
