"""Tests for the error hierarchy — status codes and response envelope."""

import pytest

from metro_guide.core.errors import (
    DatabaseError, EndpointFailureError, ErrorCategory, ErrorSeverity,
    InvalidInputError, MetroGuideError, ResourceNotFoundError,
)


@pytest.mark.parametrize(
    "error, status, category",
    [
        (InvalidInputError("Search query is required", field="q"), 400, ErrorCategory.VALIDATION),
        (ResourceNotFoundError("Station not found"), 404, ErrorCategory.RESOURCE_NOT_FOUND),
        (EndpointFailureError("Failed to fetch stations"), 500, ErrorCategory.INTERNAL),
        (DatabaseError("Connection or operational error", "execute"), 500, ErrorCategory.DATABASE),
    ],
)
def test_status_and_category(error, status, category):
    assert isinstance(error, MetroGuideError)
    assert error.http_status == status
    assert error.category == category


def test_response_body_is_message_only():
    err = ResourceNotFoundError("Metro line not found")
    assert err.to_response() == {"message": "Metro line not found"}


def test_endpoint_failure_is_critical():
    err = EndpointFailureError("Failed to fetch categories")
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.code == "ENDPOINT_FAILURE"


def test_invalid_input_keeps_field():
    err = InvalidInputError("Session ID required", field="x-session-id")
    assert err.field == "x-session-id"
    assert str(err) == "Session ID required"


def test_database_error_prefixes_operation():
    err = DatabaseError("Integrity constraint violated", "commit")
    assert err.message == "Database commit failed: Integrity constraint violated"
    assert err.operation == "commit"
