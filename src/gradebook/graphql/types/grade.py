"""
Grade GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .course import Course
    from .student import Student


@strawberry.type(description="Represent grades")
class Grade:
    """Grade type for GraphQL API."""

    id: int
    course_id: int
    student_id: int
    grade: float

    @strawberry.field
    async def course(
        self, info: strawberry.Info
    ) -> Annotated["Course", strawberry.lazy(".course")] | None:
        """Get the course this grade was given in."""
        from ..resolvers.grade import resolve_grade_course

        return await resolve_grade_course(self, info)

    @strawberry.field
    async def student(
        self, info: strawberry.Info
    ) -> Annotated["Student", strawberry.lazy(".student")] | None:
        """Get the student this grade belongs to."""
        from ..resolvers.grade import resolve_grade_student

        return await resolve_grade_student(self, info)
