"""Tests for seed data loading."""

from pathlib import Path

import pytest

from gradebook.config import PACKAGE_DATA_DIR
from gradebook.store import EntityKind, SeedDataError, StoreException, load_store
from gradebook.store.seed import load_records

COURSES = [
    {"id": 1, "name": "Math", "description": "Algebra"},
    {"id": 2, "name": "Physics", "description": "Mechanics"},
]
STUDENTS = [{"id": 1, "name": "Ada", "lastName": "Lovelace", "courseId": 1}]
GRADES = [{"id": 1, "courseId": 1, "studentId": 1, "grade": 9.5}]


class TestLoadStore:
    """Test building a store from seed files."""

    def test_load_store(self, write_seed_files) -> None:
        data_dir = write_seed_files(COURSES, STUDENTS, GRADES)

        store = load_store(data_dir)

        assert [c.name for c in store.list_all(EntityKind.COURSE)] == ["Math", "Physics"]
        student = store.find_by_id(EntityKind.STUDENT, 1)
        assert student.last_name == "Lovelace"
        assert student.course_id == 1
        assert store.find_by_id(EntityKind.GRADE, 1).grade == 9.5

    def test_load_empty_files(self, write_seed_files) -> None:
        store = load_store(write_seed_files())

        assert store.counts() == {"course": 0, "student": 0, "grade": 0}

    def test_legacy_last_name_key(self, write_seed_files) -> None:
        students = [{"id": 1, "name": "Dan", "lastnamme": "Gling", "courseId": 99}]

        store = load_store(write_seed_files(students=students))

        assert store.find_by_id(EntityKind.STUDENT, 1).last_name == "Gling"

    def test_packaged_seed_data_is_valid(self) -> None:
        store = load_store(PACKAGE_DATA_DIR)

        assert store.size(EntityKind.COURSE) > 0
        assert store.size(EntityKind.STUDENT) > 0
        assert store.size(EntityKind.GRADE) > 0


class TestSeedErrors:
    """Seed problems are fatal and name the offending file."""

    def test_missing_file(self, write_seed_files) -> None:
        data_dir = write_seed_files(COURSES, STUDENTS, grades=None)

        with pytest.raises(SeedDataError) as exc_info:
            load_store(data_dir)

        assert exc_info.value.path == data_dir / "grades.json"

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(SeedDataError):
            load_store(tmp_path / "does-not-exist")

    def test_malformed_json(self, write_seed_files) -> None:
        data_dir = write_seed_files(courses="[{not json")

        with pytest.raises(SeedDataError) as exc_info:
            load_store(data_dir)

        assert exc_info.value.path.name == "courses.json"

    def test_wrong_field_type(self, write_seed_files) -> None:
        grades = [{"id": 1, "courseId": 1, "studentId": 1, "grade": "excellent"}]

        with pytest.raises(SeedDataError) as exc_info:
            load_store(write_seed_files(grades=grades))

        assert exc_info.value.path.name == "grades.json"

    def test_missing_field(self, write_seed_files) -> None:
        students = [{"id": 1, "name": "Ada", "courseId": 1}]

        with pytest.raises(SeedDataError):
            load_store(write_seed_files(students=students))

    def test_not_a_list(self, write_seed_files) -> None:
        with pytest.raises(SeedDataError):
            load_store(write_seed_files(courses='{"id": 1}'))

    def test_duplicate_ids(self, tmp_path: Path) -> None:
        path = tmp_path / "courses.json"
        path.write_text(
            '[{"id": 1, "name": "a", "description": "b"}, {"id": 1, "name": "c", "description": "d"}]'
        )

        with pytest.raises(SeedDataError, match="duplicate id 1"):
            load_records(path, EntityKind.COURSE)

    def test_seed_error_is_store_exception(self) -> None:
        error = SeedDataError(Path("courses.json"), "boom")

        assert isinstance(error, StoreException)
        assert "courses.json" in str(error)
        assert error.reason == "boom"
