"""
Shared context access for GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..logging import get_logger

if TYPE_CHECKING:
    from ..store import Store

logger = get_logger(__name__)


class StoreUnavailableError(RuntimeError):
    """Raised when a resolver runs without a store in its context."""


def get_store_from_info(info: strawberry.Info) -> "Store":
    """
    Extract the record store from the GraphQL info object.

    The transport puts the process store into the context value; tests pass
    their own isolated store the same way.
    """
    store = info.context.get("store") if isinstance(info.context, dict) else None
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise StoreUnavailableError("Store not found in GraphQL context")
    return store
