"""Tests for domain error handler to verify structured JSON error responses."""
import json
import pytest
from datetime import datetime
from fastapi.responses import JSONResponse

from gymlog.core.error_handlers import domain_error_handler, ERROR_STATUS_MAP
from gymlog.core.exceptions import (
    DomainError,
    NotFoundError,
    ValidationError,
    BusinessRuleError,
    ConflictError,
)


class MockRequest:
    """Mock FastAPI Request object for testing."""

    def __init__(self, request_id: str = "test-request-123"):
        self.state = type('State', (), {'request_id': request_id})()


class TestDomainErrorExceptions:
    """Test domain exception classes and their error codes."""

    def test_domain_error_base(self):
        error = DomainError(
            code="TEST_001",
            message="Test error message",
            details={"key": "value"}
        )

        assert error.code == "TEST_001"
        assert error.message == "Test error message"
        assert error.details == {"key": "value"}
        assert str(error) == "Test error message"

    def test_not_found_error(self):
        """Test NotFoundError generates correct error code."""
        error = NotFoundError("exercise", "Exercise not found", {"id": 123})

        assert error.code == "NF_EXERCISE_001"
        assert error.message == "Exercise not found"
        assert error.details == {"id": 123}

    def test_not_found_error_default_message(self):
        error = NotFoundError("workout")

        assert error.code == "NF_WORKOUT_001"
        assert error.message == "workout not found"
        assert error.details == {}

    def test_validation_error(self):
        """Test ValidationError generates correct error code."""
        error = ValidationError("limit", "must be between 1 and 100")

        assert error.code == "VAL_LIMIT_001"
        assert error.message == "Validation failed for limit: must be between 1 and 100"
        assert error.details == {"field": "limit"}

    def test_validation_error_with_details(self):
        error = ValidationError("cursor", "must not be negative", {"cursor": -4})

        assert error.code == "VAL_CURSOR_001"
        assert error.details == {"cursor": -4}

    def test_business_rule_error_default(self):
        error = BusinessRuleError("Cannot log a set on a deleted training day")

        assert error.code == "BR_001"
        assert error.details == {}

    def test_conflict_error_custom(self):
        """Test ConflictError with custom code and details."""
        error = ConflictError(
            "Exercise already exists",
            code="CF_EXERCISE_001",
            details={"name": "Front Lever"}
        )

        assert error.code == "CF_EXERCISE_001"
        assert error.message == "Exercise already exists"
        assert error.details == {"name": "Front Lever"}


class TestErrorStatusMap:
    """Test ERROR_STATUS_MAP mapping."""

    def test_status_map_complete(self):
        """Verify all domain errors have status codes mapped."""
        assert NotFoundError in ERROR_STATUS_MAP
        assert ValidationError in ERROR_STATUS_MAP
        assert BusinessRuleError in ERROR_STATUS_MAP
        assert ConflictError in ERROR_STATUS_MAP

    def test_status_codes(self):
        assert ERROR_STATUS_MAP[NotFoundError] == 404
        assert ERROR_STATUS_MAP[ValidationError] == 400
        assert ERROR_STATUS_MAP[BusinessRuleError] == 422
        assert ERROR_STATUS_MAP[ConflictError] == 409


class TestDomainErrorHandler:
    """Test domain_error_handler function."""

    @pytest.mark.asyncio
    async def test_not_found_error_response(self):
        """Test NotFoundError returns 404 with structured JSON."""
        error = NotFoundError("workout", "Workout 999 not found", {"id": 999})
        request = MockRequest(request_id="req-123")

        response = await domain_error_handler(request, error)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 404

        data = json.loads(response.body.decode())

        assert data["data"] is None
        assert len(data["errors"]) == 1

        error_dict = data["errors"][0]
        assert error_dict["code"] == "NF_WORKOUT_001"
        assert error_dict["message"] == "Workout 999 not found"
        assert error_dict["details"] == {"id": 999}

    @pytest.mark.asyncio
    async def test_validation_error_response(self):
        error = ValidationError("filter", "Exercise has no column 'colour'")
        request = MockRequest(request_id="req-456")

        response = await domain_error_handler(request, error)

        assert response.status_code == 400
        data = json.loads(response.body.decode())
        assert data["errors"][0]["code"] == "VAL_FILTER_001"
        assert data["errors"][0]["details"]["field"] == "filter"

    @pytest.mark.asyncio
    async def test_response_includes_metadata(self):
        """Test error response includes request_id and timestamp."""
        error = NotFoundError("test_entity")
        request = MockRequest(request_id="test-request-id-12345")

        response = await domain_error_handler(request, error)

        data = json.loads(response.body.decode())

        assert data["meta"]["request_id"] == "test-request-id-12345"
        datetime.fromisoformat(data["meta"]["timestamp"].replace('Z', '+00:00'))

    @pytest.mark.asyncio
    async def test_unknown_domain_error_returns_500(self):
        """Test unknown DomainError subclass returns 500."""

        class CustomDomainError(DomainError):
            pass

        error = CustomDomainError("CUSTOM_001", "Custom error message")

        response = await domain_error_handler(MockRequest(), error)

        assert response.status_code == 500
        data = json.loads(response.body.decode())
        assert data["errors"][0]["code"] == "CUSTOM_001"

    @pytest.mark.asyncio
    async def test_error_with_none_request_id(self):
        """Test error response when request has no request_id."""
        error = ValidationError("field", "Invalid field")
        request = type('Request', (), {
            'state': type('State', (), {})()
        })()

        response = await domain_error_handler(request, error)

        data = json.loads(response.body.decode())
        assert data["meta"]["request_id"] is None
