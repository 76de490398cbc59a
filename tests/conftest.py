"""
Shared pytest fixtures and configuration for all tests.
"""

import json
import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from gradebook.store import CourseRecord, GradeRecord, Store, StudentRecord


@pytest.fixture
def store() -> Store:
    """An empty, isolated store."""
    return Store()


@pytest.fixture
def seeded_store() -> Store:
    """Course#1, Student#1 in course 1, Grade#1 for student 1 in course 1."""
    return Store(
        courses=[CourseRecord(id=1, name="Math", description="Algebra")],
        students=[StudentRecord(id=1, name="Ada", last_name="Lovelace", course_id=1)],
        grades=[GradeRecord(id=1, course_id=1, student_id=1, grade=9.5)],
    )


@pytest.fixture
def execute(store: Store) -> Callable[..., Any]:
    """Run a GraphQL operation against the ``store`` fixture."""
    from gradebook.graphql.schema import schema

    async def _execute(query: str, variables: dict[str, Any] | None = None, target: Store | None = None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value={"store": target if target is not None else store},
        )

    return _execute


@pytest.fixture
def client(seeded_store: Store) -> Generator[TestClient, None, None]:
    """HTTP client for an app serving ``seeded_store``."""
    from gradebook.api.app import create_app

    app = create_app(store=seeded_store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def write_seed_files(tmp_path: Path) -> Callable[..., Path]:
    """Write seed files into a temporary data directory and return it."""

    def _write(
        courses: Any = (),
        students: Any = (),
        grades: Any = (),
    ) -> Path:
        for filename, content in (
            ("courses.json", courses),
            ("students.json", students),
            ("grades.json", grades),
        ):
            path = tmp_path / filename
            if isinstance(content, str):
                path.write_text(content, encoding="utf-8")
            elif content is not None:
                path.write_text(json.dumps(list(content)), encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
