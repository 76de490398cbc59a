"""
Middleware for request context and logging
"""

import json
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from graphql import GraphQLError, OperationDefinitionNode, OperationType, parse
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

GRAPHQL_PATH = "/graphql"

# Never log raw GraphQL payloads carried in the query string
REDACTED_GRAPHQL_PARAMS = ("query", "variables", "extensions")


def sanitize_query_params(params: dict[str, Any], path: str) -> dict[str, Any]:
    """Redact GraphQL documents and variables from query parameters before logging."""
    if path != GRAPHQL_PATH:
        return dict(params)

    return {
        key: "[REDACTED]" if key in REDACTED_GRAPHQL_PARAMS else value
        for key, value in params.items()
    }


def operation_name_from_payload(operation_name: Any, query: Any) -> str | None:
    """Derive a loggable operation name from a GraphQL request payload.

    Prefers the explicit ``operationName``; otherwise reads the name from the
    document, prefixed with ``mutation:`` for mutations.
    """
    if isinstance(operation_name, str) and operation_name:
        return operation_name

    if not isinstance(query, str) or not query:
        return None

    try:
        document = parse(query)
    except GraphQLError:
        return "invalid_document"

    operation = next(
        (node for node in document.definitions if isinstance(node, OperationDefinitionNode)),
        None,
    )
    if operation is not None and operation.name is not None:
        kind = "mutation:" if operation.operation == OperationType.MUTATION else ""
        return f"{kind}{operation.name.value}"
    if "__schema" in query:
        return "__introspection"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != GRAPHQL_PATH:
        return None

    if request.method == "GET":
        params = request.query_params
        return operation_name_from_payload(params.get("operationName"), params.get("query"))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            if not isinstance(data, dict):
                return None
            return operation_name_from_payload(data.get("operationName"), data.get("query"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""

        graphql_operation = await extract_graphql_operation_name(request)
        set_request_context(graphql_operation=graphql_operation)

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(
                    dict(request.query_params), request.url.path
                )

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=sanitized_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

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
