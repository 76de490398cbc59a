from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import EntityKind, StudentRecord
from ..context import get_store_from_info
from .course import course_from_record

if TYPE_CHECKING:
    from ..types.course import Course
    from ..types.student import Student

logger = get_logger(__name__)


def student_from_record(record: StudentRecord) -> Student:
    """Convert a stored student record to its GraphQL type."""
    from ..types.student import Student as StudentType

    return StudentType(
        id=record.id,
        name=record.name,
        last_name=record.last_name,
        course_id=record.course_id,
    )


# Query resolvers
async def resolve_students(info: strawberry.Info) -> list[Student]:
    store = get_store_from_info(info)
    return [student_from_record(record) for record in store.list_all(EntityKind.STUDENT)]


async def resolve_student_by_id(info: strawberry.Info, id: int | None) -> Student | None:
    """Resolve a student by its ID. A missing or unknown id yields None."""
    store = get_store_from_info(info)
    record = store.find_by_id(EntityKind.STUDENT, id)
    if record is None:
        logger.info("Student not found", student_id=id)
        return None
    return student_from_record(record)


# Field resolvers
async def resolve_student_course(student: Student, info: strawberry.Info) -> Course | None:
    """Resolve the course a student references; None when the reference dangles."""
    store = get_store_from_info(info)
    record = store.find_by_id(EntityKind.COURSE, student.course_id)
    if record is None:
        logger.debug("Dangling course reference", student_id=student.id, course_id=student.course_id)
        return None
    return course_from_record(record)


# Mutation resolvers
async def add_student(
    info: strawberry.Info, name: str, last_name: str, course_id: int
) -> Student:
    """Append a new student. The course id is not checked against existing courses."""
    store = get_store_from_info(info)

    with store.transaction():
        record = StudentRecord(
            id=store.next_id(EntityKind.STUDENT),
            name=name,
            last_name=last_name,
            course_id=course_id,
        )
        store.append(EntityKind.STUDENT, record)

    logger.info("Student added", student_id=record.id, course_id=course_id)
    return student_from_record(record)


async def delete_student(info: strawberry.Info, id: int | None) -> list[Student]:
    """Delete a student and its grades, returning the remaining students."""
    store = get_store_from_info(info)

    with store.transaction():
        students_removed = store.remove_where(EntityKind.STUDENT, lambda student: student.id == id)
        grades_removed = store.remove_where(EntityKind.GRADE, lambda grade: grade.student_id == id)
        remaining = store.list_all(EntityKind.STUDENT)

    logger.info(
        "Student deleted",
        student_id=id,
        students_removed=students_removed,
        grades_removed=grades_removed,
    )
    return [student_from_record(record) for record in remaining]
