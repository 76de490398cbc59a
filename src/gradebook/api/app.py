"""
Main FastAPI application for the gradebook service
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import get_data_dir, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import SeedDataError, Store, load_store

# Configure logging before creating logger
configure_logging(debug=settings.debug, log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting gradebook API...")

    if app.state.store is None:
        data_dir = app.state.data_dir
        try:
            app.state.store = load_store(data_dir)
        except SeedDataError as e:
            logger.error("Failed to load seed data", path=str(e.path), error=e.reason)
            raise

    logger.info("Store ready", **app.state.store.counts())

    yield

    logger.info("Shutting down gradebook API...")


def create_app(store: Store | None = None, data_dir: Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Pre-built store to serve. When omitted the seed files in
            ``data_dir`` are loaded during startup.
        data_dir: Directory with the seed files (defaults to settings)
    """

    app = FastAPI(
        title="Gradebook API",
        description="Courses, students and grades over GraphQL",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.store = store
    app.state.data_dir = get_data_dir(data_dir)

    app.add_middleware(LoggingContextMiddleware)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        current_store = app.state.store
        return {
            "status": "healthy",
            "version": __version__,
            "records": current_store.counts() if current_store is not None else {},
        }

    from ..graphql.schema import create_graphql_router, validate_schema

    # Validate schema at startup so a broken type graph never gets served
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(graphiql=settings.graphiql), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "gradebook.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
