from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import EntityKind, GradeRecord
from ..context import get_store_from_info
from .course import course_from_record
from .student import student_from_record

if TYPE_CHECKING:
    from ..types.course import Course
    from ..types.grade import Grade
    from ..types.student import Student

logger = get_logger(__name__)


def grade_from_record(record: GradeRecord) -> Grade:
    """Convert a stored grade record to its GraphQL type."""
    from ..types.grade import Grade as GradeType

    return GradeType(
        id=record.id,
        course_id=record.course_id,
        student_id=record.student_id,
        grade=record.grade,
    )


# Query resolvers
async def resolve_grades(info: strawberry.Info) -> list[Grade]:
    store = get_store_from_info(info)
    return [grade_from_record(record) for record in store.list_all(EntityKind.GRADE)]


async def resolve_grade_by_id(info: strawberry.Info, id: int | None) -> Grade | None:
    store = get_store_from_info(info)
    record = store.find_by_id(EntityKind.GRADE, id)
    if record is None:
        logger.info("Grade not found", grade_id=id)
        return None
    return grade_from_record(record)


# Field resolvers
async def resolve_grade_course(grade: Grade, info: strawberry.Info) -> Course | None:
    store = get_store_from_info(info)
    record = store.find_by_id(EntityKind.COURSE, grade.course_id)
    if record is None:
        logger.debug("Dangling course reference", grade_id=grade.id, course_id=grade.course_id)
        return None
    return course_from_record(record)


async def resolve_grade_student(grade: Grade, info: strawberry.Info) -> Student | None:
    store = get_store_from_info(info)
    record = store.find_by_id(EntityKind.STUDENT, grade.student_id)
    if record is None:
        logger.debug("Dangling student reference", grade_id=grade.id, student_id=grade.student_id)
        return None
    return student_from_record(record)


# Mutation resolvers
async def add_grade(
    info: strawberry.Info, course_id: int, student_id: int, grade: float
) -> Grade:
    """Append a new grade. Neither referenced id is checked."""
    store = get_store_from_info(info)

    with store.transaction():
        record = GradeRecord(
            id=store.next_id(EntityKind.GRADE),
            course_id=course_id,
            student_id=student_id,
            grade=grade,
        )
        store.append(EntityKind.GRADE, record)

    logger.info("Grade added", grade_id=record.id, course_id=course_id, student_id=student_id)
    return grade_from_record(record)


async def delete_grade(info: strawberry.Info, id: int | None) -> list[Grade]:
    store = get_store_from_info(info)

    with store.transaction():
        grades_removed = store.remove_where(EntityKind.GRADE, lambda grade: grade.id == id)
        remaining = store.list_all(EntityKind.GRADE)

    logger.info("Grade deleted", grade_id=id, grades_removed=grades_removed)
    return [grade_from_record(record) for record in remaining]
