"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.course import Course
from ..types.grade import Grade
from ..types.student import Student


@strawberry.type(description="Root Mutation")
class Mutation:
    """Root GraphQL mutation type."""

    # Course mutations
    @strawberry.mutation(name="addCourse", description="Add a course")
    async def add_course(self, info: strawberry.Info, name: str, description: str) -> Course:
        from ..resolvers.course import add_course

        return await add_course(info, name, description)

    @strawberry.mutation(name="delCourse", description="Delete a course")
    async def del_course(self, info: strawberry.Info, id: int | None = None) -> list[Course]:
        """Delete a course along with its students and grades."""
        from ..resolvers.course import delete_course

        return await delete_course(info, id)

    # Student mutations
    @strawberry.mutation(name="addStudent", description="Add a student")
    async def add_student(
        self, info: strawberry.Info, name: str, last_name: str, course_id: int
    ) -> Student:
        from ..resolvers.student import add_student

        return await add_student(info, name, last_name, course_id)

    @strawberry.mutation(name="delStudent", description="Delete a student")
    async def del_student(self, info: strawberry.Info, id: int | None = None) -> list[Student]:
        """Delete a student along with its grades."""
        from ..resolvers.student import delete_student

        return await delete_student(info, id)

    # Grade mutations
    @strawberry.mutation(name="addGrade", description="Add a grade")
    async def add_grade(
        self, info: strawberry.Info, course_id: int, student_id: int, grade: float
    ) -> Grade:
        from ..resolvers.grade import add_grade

        return await add_grade(info, course_id, student_id, grade)

    @strawberry.mutation(name="delGrade", description="Delete a grade")
    async def del_grade(self, info: strawberry.Info, id: int | None = None) -> list[Grade]:
        from ..resolvers.grade import delete_grade

        return await delete_grade(info, id)
