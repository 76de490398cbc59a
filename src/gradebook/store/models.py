"""
Record shapes held by the store.

Each entity kind has its own frozen record; the three share no base class.
Seed files use camelCase keys, so records validate by alias and also accept
their Python field names.
"""

from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EntityKind(Enum):
    """The three kinds of records kept by the store."""

    COURSE = "course"
    STUDENT = "student"
    GRADE = "grade"


class CourseRecord(BaseModel):
    """A course as stored in memory."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    name: str
    description: str


class StudentRecord(BaseModel):
    """A student as stored in memory."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    name: str
    # Older seed files spell this key "lastnamme"
    last_name: str = Field(validation_alias=AliasChoices("lastName", "lastnamme", "last_name"))
    course_id: int


class GradeRecord(BaseModel):
    """A grade as stored in memory."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: int
    course_id: int
    student_id: int
    grade: float


RECORD_TYPES: dict[EntityKind, type[BaseModel]] = {
    EntityKind.COURSE: CourseRecord,
    EntityKind.STUDENT: StudentRecord,
    EntityKind.GRADE: GradeRecord,
}
