"""Exceptions raised by the in-memory store."""

from pathlib import Path


class StoreException(Exception):
    """Base exception for store operations."""

    pass


class SeedDataError(StoreException):
    """A seed file is missing, unreadable, or does not match the record shape."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid seed file {path}: {reason}")
