"""Error Hierarchy — verifies codes, statuses and the error envelope.

Tests:
    - Every concrete error maps to the expected HTTP status and code
    - to_response() is exactly {"error": message}
    - Severity/category carried for logging
"""

import pytest

from users_api.core.errors import (
    ConfigurationError, ErrorCategory, ErrorSeverity,
    InternalServerError, InvalidPayloadError, UserCreationError, UsersApiError,
)


@pytest.mark.parametrize("error, status, code, message", [
    (InvalidPayloadError(), 400, "INVALID_PAYLOAD", "Invalid request payload"),
    (UserCreationError(), 500, "USER_CREATE_FAILED", "Failed to create user"),
    (InternalServerError(), 500, "INTERNAL_ERROR", "Internal Server Error"),
])
def test_request_errors_have_fixed_messages(error, status, code, message):
    assert isinstance(error, UsersApiError)
    assert error.http_status == status
    assert error.code == code
    assert error.to_response() == {"error": message}


def test_configuration_error_keeps_message():
    error = ConfigurationError("DATABASE_URL not found in environment variables")
    assert str(error) == "DATABASE_URL not found in environment variables"
    assert error.category == ErrorCategory.CONFIGURATION


def test_severity_and_category_by_class():
    assert InvalidPayloadError().severity == ErrorSeverity.WARNING
    assert InvalidPayloadError().category == ErrorCategory.VALIDATION
    assert UserCreationError().severity == ErrorSeverity.CRITICAL
    assert UserCreationError().category == ErrorCategory.DATABASE
