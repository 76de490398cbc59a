"""Tests for request logging helpers."""

import pytest

from gradebook.logging import (
    clear_request_context,
    generate_request_id,
    request_id_ctx,
    set_request_context,
)
from gradebook.middleware import operation_name_from_payload, sanitize_query_params


class TestOperationName:
    def test_explicit_operation_name_wins(self):
        assert operation_name_from_payload("GetCourses", "query Other { courses { id } }") == (
            "GetCourses"
        )

    def test_named_query(self):
        assert operation_name_from_payload(None, "query GetCourse { course(id: 1) { id } }") == (
            "GetCourse"
        )

    def test_named_mutation(self):
        query = 'mutation AddCourse { addCourse(name: "a", description: "b") { id } }'
        assert operation_name_from_payload(None, query) == "mutation:AddCourse"

    def test_keywords_inside_string_arguments_are_ignored(self):
        query = (
            'mutation AddCourse { addCourse(name: "a", description: "query bogus") { id } }'
        )
        assert operation_name_from_payload(None, query) == "mutation:AddCourse"

    def test_fragment_before_operation(self):
        query = "fragment F on Course { id } query ListCourses { courses { ...F } }"
        assert operation_name_from_payload(None, query) == "ListCourses"

    def test_unparsable_document(self):
        assert operation_name_from_payload(None, "query {") == "invalid_document"

    def test_anonymous_operation(self):
        assert operation_name_from_payload(None, "{ courses { id } }") == "unnamed_operation"

    def test_introspection(self):
        assert operation_name_from_payload(None, "{ __schema { types { name } } }") == (
            "__introspection"
        )

    @pytest.mark.parametrize("query", [None, "", 42])
    def test_no_query(self, query):
        assert operation_name_from_payload(None, query) is None


class TestSanitizeQueryParams:
    def test_graphql_payload_is_redacted(self):
        params = {"query": "{ courses { id } }", "variables": "{}", "operationName": "Q"}

        assert sanitize_query_params(params, "/graphql") == {
            "query": "[REDACTED]",
            "variables": "[REDACTED]",
            "operationName": "Q",
        }

    def test_other_paths_untouched(self):
        assert sanitize_query_params({"query": "x"}, "/health") == {"query": "x"}


class TestRequestContext:
    def test_set_and_clear(self):
        set_request_context(request_id="req-123")
        assert request_id_ctx.get() == "req-123"

        clear_request_context()
        assert request_id_ctx.get() is None

    def test_generated_request_ids_are_compact_and_distinct(self):
        first, second = generate_request_id(), generate_request_id()

        assert len(first) == 14
        assert first != second
