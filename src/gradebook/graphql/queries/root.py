"""
Root GraphQL query definitions
"""

import strawberry

from ..types.course import Course
from ..types.grade import Grade
from ..types.student import Student


@strawberry.type(description="Root Query")
class Query:
    """Root GraphQL query type."""

    @strawberry.field(description="List of All Courses")
    async def courses(self, info: strawberry.Info) -> list[Course]:
        from ..resolvers.course import resolve_courses

        return await resolve_courses(info)

    @strawberry.field(description="List of All Students")
    async def students(self, info: strawberry.Info) -> list[Student]:
        from ..resolvers.student import resolve_students

        return await resolve_students(info)

    @strawberry.field(description="List of All Grades")
    async def grades(self, info: strawberry.Info) -> list[Grade]:
        from ..resolvers.grade import resolve_grades

        return await resolve_grades(info)

    @strawberry.field(description="Particular Course")
    async def course(self, info: strawberry.Info, id: int | None = None) -> Course | None:
        from ..resolvers.course import resolve_course_by_id

        return await resolve_course_by_id(info, id)

    @strawberry.field(description="Particular Student")
    async def student(self, info: strawberry.Info, id: int | None = None) -> Student | None:
        from ..resolvers.student import resolve_student_by_id

        return await resolve_student_by_id(info, id)

    @strawberry.field(description="Particular Grade")
    async def grade(self, info: strawberry.Info, id: int | None = None) -> Grade | None:
        from ..resolvers.grade import resolve_grade_by_id

        return await resolve_grade_by_id(info, id)
