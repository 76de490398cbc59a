from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ...store import CourseRecord, EntityKind
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.course import Course

logger = get_logger(__name__)


def course_from_record(record: CourseRecord) -> Course:
    """Convert a stored course record to its GraphQL type."""
    from ..types.course import Course as CourseType

    return CourseType(id=record.id, name=record.name, description=record.description)


# Query resolvers
async def resolve_courses(info: strawberry.Info) -> list[Course]:
    store = get_store_from_info(info)
    return [course_from_record(record) for record in store.list_all(EntityKind.COURSE)]


async def resolve_course_by_id(info: strawberry.Info, id: int | None) -> Course | None:
    """Resolve a course by its ID. A missing or unknown id yields None."""
    store = get_store_from_info(info)
    record = store.find_by_id(EntityKind.COURSE, id)
    if record is None:
        logger.info("Course not found", course_id=id)
        return None
    return course_from_record(record)


# Mutation resolvers
async def add_course(info: strawberry.Info, name: str, description: str) -> Course:
    """Append a new course; its id is the current course count plus one."""
    store = get_store_from_info(info)

    with store.transaction():
        record = CourseRecord(
            id=store.next_id(EntityKind.COURSE),
            name=name,
            description=description,
        )
        store.append(EntityKind.COURSE, record)

    logger.info("Course added", course_id=record.id)
    return course_from_record(record)


async def delete_course(info: strawberry.Info, id: int | None) -> list[Course]:
    """
    Delete a course together with its students and grades.

    Returns the remaining courses. An absent id matches nothing.
    """
    store = get_store_from_info(info)

    with store.transaction():
        courses_removed = store.remove_where(EntityKind.COURSE, lambda course: course.id == id)
        students_removed = store.remove_where(
            EntityKind.STUDENT, lambda student: student.course_id == id
        )
        grades_removed = store.remove_where(EntityKind.GRADE, lambda grade: grade.course_id == id)
        remaining = store.list_all(EntityKind.COURSE)

    logger.info(
        "Course deleted",
        course_id=id,
        courses_removed=courses_removed,
        students_removed=students_removed,
        grades_removed=grades_removed,
    )
    return [course_from_record(record) for record in remaining]
