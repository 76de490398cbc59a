"""
Seed data loading.

The store is populated once at startup from three JSON documents in a data
directory. Anything wrong with them is fatal: the caller gets a
``SeedDataError`` naming the offending file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..logging import get_logger
from .exceptions import SeedDataError
from .memory import Store
from .models import RECORD_TYPES, EntityKind

logger = get_logger(__name__)

SEED_FILES: dict[EntityKind, str] = {
    EntityKind.COURSE: "courses.json",
    EntityKind.STUDENT: "students.json",
    EntityKind.GRADE: "grades.json",
}


def load_records(path: Path, kind: EntityKind) -> list[BaseModel]:
    """
    Read and validate one seed file.

    Args:
        path: JSON file holding a list of records
        kind: Entity kind the file describes

    Returns:
        Validated records in file order

    Raises:
        SeedDataError: If the file cannot be read, is not valid JSON, does not
            match the record shape, or repeats an id
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise SeedDataError(path, e.strerror or str(e)) from e

    adapter = TypeAdapter(list[RECORD_TYPES[kind]])
    try:
        records = adapter.validate_json(raw)
    except ValidationError as e:
        raise SeedDataError(path, str(e)) from e

    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise SeedDataError(path, f"duplicate id {record.id}")
        seen.add(record.id)

    return records


def load_store(data_dir: Path) -> Store:
    """Build a store from the seed files in ``data_dir``."""
    loaded = {kind: load_records(data_dir / filename, kind) for kind, filename in SEED_FILES.items()}

    store = Store(
        courses=loaded[EntityKind.COURSE],
        students=loaded[EntityKind.STUDENT],
        grades=loaded[EntityKind.GRADE],
    )
    logger.info("Seed data loaded", data_dir=str(data_dir), **store.counts())
    return store
