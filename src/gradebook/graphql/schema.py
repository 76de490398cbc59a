"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..logging import get_logger
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


class SchemaValidationError(Exception):
    """The GraphQL schema is inconsistent and cannot be served."""


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved lazy type references early, causing the server to fail
    fast rather than erroring on the first request.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    from graphql import get_introspection_query, graphql_sync

    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise SchemaValidationError(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = [str(e) for e in result.errors]
        logger.error("GraphQL introspection failed", errors=error_messages)
        raise SchemaValidationError(f"GraphQL introspection failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")


def export_schema() -> str:
    """Return the schema in GraphQL SDL."""
    return schema.as_str()


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "store": request.app.state.store,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
