"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"
REQUEST_ID_HEADER = "X-Request-ID"

# Whitespace, commas and comments are insignificant before the first definition
_IGNORED_PREFIX = re.compile(r"(?:[\s,\ufeff]|#[^\n\r]*)*")
_OPERATION_PATTERN = re.compile(r"(query|mutation)\s+([_A-Za-z]\w*)")
_REQUEST_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]{1,64}")


def operation_name_from_query(query: str) -> str | None:
    """Derive a loggable operation name from a GraphQL document.

    Named mutations are prefixed with ``mutation:``; introspection queries
    map to ``__introspection``.
    """
    if not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    start = _IGNORED_PREFIX.match(query).end()
    match = _OPERATION_PATTERN.match(query, start)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


def _operation_from_payload(payload: dict[str, Any]) -> str | None:
    op = payload.get("operationName")
    if isinstance(op, str) and op:
        return op
    query = payload.get("query", "")
    if not isinstance(query, str):
        return None
    return operation_name_from_query(query)


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Find the GraphQL operation name for GET and POST requests to /graphql."""
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        return _operation_from_payload(dict(request.query_params))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        return _operation_from_payload(data)

    return None


def incoming_request_id(request: Request) -> str | None:
    """Return the client's X-Request-ID when it is a short plain token.

    Anything else is dropped so a fresh id gets generated instead of
    logging and echoing arbitrary header content.
    """
    value = request.headers.get(REQUEST_ID_HEADER)
    if value and _REQUEST_ID_PATTERN.fullmatch(value):
        return value
    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        graphql_operation = await extract_graphql_operation_name(request)
        request_id = set_request_context(
            request_id=incoming_request_id(request),
            operation=graphql_operation,
        )

        try:
            # Never log raw GraphQL documents or variables from the query string
            query_params = None
            if request.query_params:
                query_params = dict(request.query_params)
                if request.url.path == GRAPHQL_PATH:
                    for key in ("query", "variables", "extensions"):
                        if key in query_params:
                            query_params[key] = "[REDACTED]"

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=query_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
