"""
Course GraphQL type definitions
"""

import strawberry


@strawberry.type(description="Represent courses")
class Course:
    """Course type for GraphQL API."""

    id: int
    name: str
    description: str
