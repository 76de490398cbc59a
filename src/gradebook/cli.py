#!/usr/bin/env python3
"""
Main CLI entry point for the gradebook server.
"""

import sys
from pathlib import Path

import click
import uvicorn

from gradebook import __version__
from gradebook.config import get_data_dir, settings
from gradebook.logging import configure_logging, get_logger

logger = get_logger(__name__)

DATA_DIR_OPTION = click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding courses.json, students.json and grades.json",
)


@click.group()
@click.version_option(version=__version__, prog_name="gradebook")
def cli() -> None:
    """Gradebook CLI - serve the GraphQL API and inspect seed data."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    help=f"Host to bind to (default: {settings.api_host})",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    help=f"Port to bind to (default: {settings.api_port})",
)
@DATA_DIR_OPTION
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(host: str, port: int, data_dir: Path | None, log_level: str) -> None:
    """Start the gradebook API server."""
    # Importing the app module configures logging from settings, so do it
    # before applying the command line level
    from gradebook.api.app import create_app
    from gradebook.store import SeedDataError, load_store

    configure_logging(debug=(log_level == "debug"), log_level=log_level)

    resolved_dir = get_data_dir(data_dir)
    logger.info(
        "Starting gradebook API server",
        host=host,
        port=port,
        data_dir=str(resolved_dir),
        log_level=log_level,
    )

    # The store lives in this process, so the app is always run in-process
    try:
        store = load_store(resolved_dir)
    except SeedDataError as e:
        logger.error("Failed to load seed data", path=str(e.path), error=e.reason)
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    try:
        app = create_app(store=store, data_dir=resolved_dir)
        uvicorn.run(app, host=host, port=port, log_level=log_level, access_log=True)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command("check-data")
@DATA_DIR_OPTION
def check_data(data_dir: Path | None) -> None:
    """Validate the seed files and report how many records each holds."""
    from gradebook.store import SeedDataError, load_store

    configure_logging(log_level="warning")

    resolved_dir = get_data_dir(data_dir)
    try:
        store = load_store(resolved_dir)
    except SeedDataError as e:
        logger.error("Seed data check failed", path=str(e.path), error=e.reason)
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ Seed data in {resolved_dir} is valid")
    for kind, count in store.counts().items():
        click.echo(f"  {kind}: {count}")


@cli.command("export-schema")
def export_schema_command() -> None:
    """Print the GraphQL schema in SDL."""
    from gradebook.graphql.schema import export_schema

    click.echo(export_schema())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
