"""
Student GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .course import Course


@strawberry.type(description="Represent students")
class Student:
    """Student type for GraphQL API."""

    id: int
    name: str
    last_name: str
    course_id: int

    @strawberry.field(deprecation_reason="Misspelled legacy name, use `lastName`.")
    def lastnamme(self) -> str:
        """Last name of the student."""
        return self.last_name

    @strawberry.field
    async def course(
        self, info: strawberry.Info
    ) -> Annotated["Course", strawberry.lazy(".course")] | None:
        """Get the course this student is enrolled in."""
        from ..resolvers.student import resolve_student_course

        return await resolve_student_course(self, info)
