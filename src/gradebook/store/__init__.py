"""
In-memory record store for courses, students and grades.
"""

from .exceptions import SeedDataError, StoreException
from .memory import Store
from .models import CourseRecord, EntityKind, GradeRecord, StudentRecord
from .seed import load_store

__all__ = [
    "CourseRecord",
    "EntityKind",
    "GradeRecord",
    "SeedDataError",
    "Store",
    "StoreException",
    "StudentRecord",
    "load_store",
]
