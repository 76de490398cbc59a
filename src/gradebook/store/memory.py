"""In-memory store holding one ordered sequence per entity kind."""

import threading
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Any

from ..logging import get_logger
from .models import EntityKind

logger = get_logger(__name__)


class Store:
    """Process-lifetime storage for courses, students and grades.

    Sequences keep insertion order. Lookups are linear scans, which is fine
    for the small record counts this service is meant for.

    Every public method takes the store lock, and ``transaction()`` holds it
    across several calls so a mutation and its cascade are observed as one
    step by other threads.
    """

    def __init__(
        self,
        courses: Iterable[Any] = (),
        students: Iterable[Any] = (),
        grades: Iterable[Any] = (),
    ):
        self._records: dict[EntityKind, list[Any]] = {
            EntityKind.COURSE: list(courses),
            EntityKind.STUDENT: list(students),
            EntityKind.GRADE: list(grades),
        }
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["Store"]:
        """Hold the store lock for the duration of a mutation."""
        with self._lock:
            yield self

    def list_all(self, kind: EntityKind) -> list[Any]:
        """Return a snapshot of every record of ``kind`` in insertion order."""
        with self._lock:
            return list(self._records[kind])

    def find_by_id(self, kind: EntityKind, id: int | None) -> Any | None:
        """Return the first record of ``kind`` whose id equals ``id``, or None."""
        if id is None:
            return None
        with self._lock:
            for record in self._records[kind]:
                if record.id == id:
                    return record
        return None

    def append(self, kind: EntityKind, record: Any) -> Any:
        with self._lock:
            self._records[kind].append(record)
        return record

    def remove_where(self, kind: EntityKind, predicate: Callable[[Any], bool]) -> int:
        """Remove every record of ``kind`` matching ``predicate``.

        Survivors keep their relative order. Returns the number removed.
        """
        with self._lock:
            records = self._records[kind]
            survivors = [record for record in records if not predicate(record)]
            removed = len(records) - len(survivors)
            records[:] = survivors
        if removed:
            logger.debug("Records removed", kind=kind.value, count=removed)
        return removed

    def size(self, kind: EntityKind) -> int:
        with self._lock:
            return len(self._records[kind])

    def next_id(self, kind: EntityKind) -> int:
        # size + 1, so ids freed by a deletion can be handed out again
        return self.size(kind) + 1

    def counts(self) -> dict[str, int]:
        """Number of records per kind, keyed by kind value."""
        with self._lock:
            return {kind.value: len(records) for kind, records in self._records.items()}
