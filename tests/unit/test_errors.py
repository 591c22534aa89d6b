"""Unit tests for error values and their user-facing descriptions."""

from datetime import date

import pytest
from pydantic import ValidationError

from src.core.errors import (
    ErrorCode,
    ErrorSeverity,
    InvalidDateOrder,
    InvalidField,
    InvalidStatusTransition,
    LoadFailure,
    MissingField,
    PersistFailure,
    describe_error,
)
from src.domain.task import TaskStatus


@pytest.mark.unit
class TestDescribeError:
    """Tests for describe_error function."""

    def test_missing_title(self):
        """Test a missing title names the field."""
        response = describe_error(MissingField(field="title"))

        assert response.code == ErrorCode.ERR_MISSING_FIELD
        assert response.message == "Title is required!"
        assert response.severity == ErrorSeverity.LOW

    def test_missing_completion_date(self):
        """Test date field names are humanized."""
        response = describe_error(MissingField(field="completion_date"))

        assert response.message == "Completion date is required!"

    def test_invalid_field(self):
        """Test invalid input includes the reason."""
        response = describe_error(InvalidField(field="due_date", reason="bad format"))

        assert response.code == ErrorCode.ERR_INVALID_FIELD
        assert "bad format" in response.message
        assert "YYYY-MM-DD" in response.suggestion

    def test_invalid_date_order(self):
        """Test date order message matches the app's wording."""
        response = describe_error(InvalidDateOrder(due_date=date(2024, 1, 10), completion_date=date(2024, 1, 9)))

        assert response.code == ErrorCode.ERR_INVALID_DATE_ORDER
        assert response.message == "Completion date cannot be earlier than due date!"
        assert "2024-01-10" in response.suggestion

    def test_invalid_status_transition(self):
        """Test rejected transitions name both statuses."""
        error = InvalidStatusTransition(task_id="1", current=TaskStatus.COMPLETED, requested=TaskStatus.IN_PROGRESS)

        response = describe_error(error)

        assert response.code == ErrorCode.ERR_INVALID_STATUS_TRANSITION
        assert "Completed" in response.message
        assert "In Progress" in response.message

    def test_load_failure(self):
        """Test load failures are high severity."""
        response = describe_error(LoadFailure(reason="disk"))

        assert response.message == "Failed to load tasks!"
        assert response.severity == ErrorSeverity.HIGH

    def test_persist_failure(self):
        """Test save failures tell the user changes are kept."""
        response = describe_error(PersistFailure(reason="disk"))

        assert response.code == ErrorCode.ERR_PERSIST_FAILURE
        assert response.message == "Failed to save tasks!"
        assert "kept" in response.suggestion


@pytest.mark.unit
def test_error_values_are_frozen():
    """Test error values cannot be modified after creation."""
    error = MissingField(field="title")

    with pytest.raises(ValidationError):
        error.field = "description"
